"""Title sanitisation.

Game strings carry colour codes (``^yellow;``), line breaks and symbols that
MediaWiki refuses in page names. Everything that becomes a title goes
through clean_page_name() first.
"""

from __future__ import annotations

import re

_COLOR_CODE = re.compile(r"\^[^;^]+;")
_WHITESPACE = re.compile(r"\s+")
_ILLEGAL_TITLE_CHARS = re.compile(r"[<>|{}]")


def ucfirst(value: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def remove_colors(value: str) -> str:
    """Remove color codes such as ``^yellow;`` or ``^reset;``."""
    return _COLOR_CODE.sub("", value)


def clean_name(value: str) -> str:
    """Normalize a single-line name: no colors, no newlines, single spaces."""
    return _WHITESPACE.sub(" ", remove_colors(value)).strip()


def clean_page_name(value: str) -> str:
    """Turn an arbitrary display name into a valid MediaWiki page name.

    Examples:
        "^orange;Iron^reset; Bar" -> "Iron Bar"
        "shrine #3" -> "Shrine N3"
        "Poster [large]" -> "Poster (large)"
    """
    name = _ILLEGAL_TITLE_CHARS.sub("", clean_name(value))
    name = ucfirst(_WHITESPACE.sub(" ", name).strip())
    return name.replace("#", "N").replace("[", "(").replace("]", ")")
