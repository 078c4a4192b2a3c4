"""
Case conversion: camel_case, kebab_case, capitalize.

Word boundaries are spaces, underscores, hyphens and lower-to-upper
transitions ("fooBar" is two words). Other punctuation is dropped.
"""

import re

from toolbelt.errors import InvalidArgumentError

_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_SEPARATORS = re.compile(r"[_\-\s]+")
_KEBAB_SEPARATORS = re.compile(r"[\s_]+")
_NON_WORD = re.compile(r"[^\w\s]")
_NON_KEBAB = re.compile(r"[^\w-]")


def _ensure_str(text: object) -> str:
    if not isinstance(text, str):
        raise InvalidArgumentError("a string", text)
    return text


def camel_case(text: str) -> str:
    """
    Convert text to camel case.

    Raises:
        InvalidArgumentError: If text is not a string.

    Example:
        >>> camel_case("Foo Bar")
        'fooBar'
        >>> camel_case("--foo-bar--")
        'fooBar'
        >>> camel_case("__FOO_BAR__")
        'fooBar'
    """
    text = _ensure_str(text)
    spaced = _LOWER_UPPER.sub(r"\1 \2", text)
    spaced = _SEPARATORS.sub(" ", spaced)
    words = _NON_WORD.sub("", spaced).split()
    if not words:
        return ""
    head, *rest = (word.lower() for word in words)
    return head + "".join(word[:1].upper() + word[1:] for word in rest)


def kebab_case(text: str) -> str:
    """
    Convert text to kebab case.

    Raises:
        InvalidArgumentError: If text is not a string.

    Example:
        >>> kebab_case("Foo Bar")
        'foo-bar'
        >>> kebab_case("fooBar")
        'foo-bar'
        >>> kebab_case("__FOO_BAR__")
        'foo-bar'
    """
    text = _ensure_str(text)
    hyphenated = _LOWER_UPPER.sub(r"\1-\2", text)
    hyphenated = _KEBAB_SEPARATORS.sub("-", hyphenated)
    hyphenated = _NON_KEBAB.sub("", hyphenated)
    return hyphenated.lower().strip("-")


def capitalize(text: str) -> str:
    """
    Convert the first character of text to upper case and the rest to lower case.

    Raises:
        InvalidArgumentError: If text is not a string.

    Example:
        >>> capitalize("HELLO")
        'Hello'
    """
    text = _ensure_str(text)
    return text[:1].upper() + text[1:].lower()
