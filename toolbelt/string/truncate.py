"""
Truncation to a maximum length with an omission marker.
"""

from toolbelt.string.case import _ensure_str


def truncate(text: str, length: int = 30, omission: str = "...") -> str:
    """
    Truncate text if it is longer than ``length`` characters.

    The omission marker counts towards ``length``, so the result is never
    longer than ``length`` unless the marker alone is longer, in which case
    the marker is returned on its own.

    Args:
        text: String to truncate.
        length: Maximum length of the result.
        omission: Marker appended to truncated text.

    Raises:
        InvalidArgumentError: If text is not a string.

    Example:
        >>> truncate("hi-diddly-ho there, neighborino")
        'hi-diddly-ho there, neighbo...'
        >>> truncate("hi-diddly-ho there, neighborino", length=24)
        'hi-diddly-ho there, n...'
    """
    text = _ensure_str(text)
    if len(text) <= length:
        return text
    end = length - len(omission)
    if end < 1:
        return omission
    return text[:end] + omission
