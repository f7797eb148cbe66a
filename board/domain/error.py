"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """A submission is missing fields or exceeds field limits.

    The message is safe to show to the client.
    """

    pass


class RateLimitError(DomainError):
    """Too many submissions from one client within the rate-limit window."""

    def __init__(self, key: str):
        self.key = key
        super().__init__("Too many requests, try later")


class StorageError(DomainError):
    """Raised by repository implementations when the store fails.

    The message is generic; driver details are only logged.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage failure during {operation}")
