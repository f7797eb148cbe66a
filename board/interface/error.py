"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class MalformedInputError(InterfaceError):
    """Request body could not be parsed into a submission."""

    def __init__(self, detail: str = "Invalid JSON"):
        super().__init__(detail)


class PayloadTooLargeError(InterfaceError):
    """Request body exceeded the configured size ceiling."""

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(f"Request body exceeds {max_bytes} bytes")
