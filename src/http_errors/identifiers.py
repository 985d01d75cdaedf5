"""Conversion of reason phrases into Python identifiers."""

from __future__ import annotations

import re

_INVALID_CHARS = re.compile(r"[^ _0-9A-Za-z]")

_ERROR_SUFFIX = "Error"


def to_identifier(phrase: str) -> str:
    """Convert a reason phrase into an identifier fragment.

    Each space-separated token has its first character upper-cased, the
    tokens are joined, and anything that is not a letter, digit or
    underscore is dropped.

    Examples:
        >>> to_identifier("Not Found")
        'NotFound'
        >>> to_identifier("I'm a Teapot")
        'ImATeapot'
    """
    joined = "".join(token[:1].upper() + token[1:] for token in phrase.split(" "))
    return _INVALID_CHARS.sub("", joined)


def to_class_name(identifier: str) -> str:
    """Append the ``Error`` suffix unless the identifier already ends with it."""
    if identifier.endswith(_ERROR_SUFFIX):
        return identifier
    return identifier + _ERROR_SUFFIX
