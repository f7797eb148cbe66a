"""HTML escaping for user-supplied text."""

_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

_ESCAPE_TABLE = str.maketrans(_HTML_ENTITIES)


def escape_html(text: str) -> str:
    """Replace the five HTML-special characters with entities.

    Each character is translated independently in a single pass, so existing
    entities are escaped again (``&amp;`` becomes ``&amp;amp;``). Everything
    else, including whitespace and case, is left untouched.

    Args:
        text: Raw user input

    Returns:
        Escaped text
    """
    return text.translate(_ESCAPE_TABLE)
