"""
Case formats and name conversion helpers.

Defines the naming conventions a SchemaCaseFormat marker may request and a
zero-IO converter between them. Source names may be written in any supported
convention; word boundaries are detected from underscores, hyphens and camel
humps (including acronyms such as ``HTTPServer``).

Design principles
-----------------
1) One naming standard for the enum itself:
   - Enum class: PascalCase
   - Enum member names: UPPER_SNAKE
   - Enum serialized values (config files, env vars): lower_snake

2) Conversion is lossless for names that already follow one convention:
   ``user_id`` -> ``userId`` -> ``USER_ID`` -> ``user-id`` all split into the
   same words.

Examples
--------
>>> from typefield.core.casing import CaseFormat, convert_case
>>> convert_case("userId", CaseFormat.UPPER_UNDERSCORE)
'USER_ID'
>>> convert_case("user_id", CaseFormat.LOWER_CAMEL)
'userId'
>>> convert_case("HTTPServerPort", CaseFormat.LOWER_HYPHEN)
'http-server-port'
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

__all__ = [
    "CaseFormat",
    "split_words",
    "convert_case",
    "is_lower_snake",
    "case_format_from_value",
]


class CaseFormat(Enum):
    """
    Naming conventions understood by SchemaCaseFormat.

    ``LOWER_SNAKE`` and ``UPPER_SNAKE`` are aliases of the underscore members.
    """

    LOWER_CAMEL = "lower_camel"
    UPPER_CAMEL = "upper_camel"
    LOWER_UNDERSCORE = "lower_underscore"
    UPPER_UNDERSCORE = "upper_underscore"
    LOWER_HYPHEN = "lower_hyphen"
    LOWER_SNAKE = "lower_underscore"
    UPPER_SNAKE = "upper_underscore"


_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"[_\-\s]+")
_HUMP_RE: Final[re.Pattern[str]] = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+")
_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def split_words(name: str) -> list[str]:
    """
    Split a name into lower-cased words.

    Args:
      name (str): Name in any supported convention.

    Returns:
      list[str]: Words in order, lower-cased.

    Examples:
      >>> split_words("getHTTPServer_port")
      ['get', 'http', 'server', 'port']
    """
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(name or ""):
        words.extend(w.lower() for w in _HUMP_RE.findall(chunk))
    return words


def convert_case(name: str, target: CaseFormat) -> str:
    """
    Convert a name to the requested case format.

    Args:
      name (str): Natural declared name (snake, camel, or hyphen case).
      target (CaseFormat): Requested convention.

    Returns:
      str: Converted name; empty for an empty input.
    """
    words = split_words(name)
    if not words:
        return ""
    if target is CaseFormat.LOWER_CAMEL:
        return words[0] + "".join(w.capitalize() for w in words[1:])
    if target is CaseFormat.UPPER_CAMEL:
        return "".join(w.capitalize() for w in words)
    if target is CaseFormat.LOWER_UNDERSCORE:
        return "_".join(words)
    if target is CaseFormat.UPPER_UNDERSCORE:
        return "_".join(words).upper()
    return "-".join(words)


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Examples:
      >>> is_lower_snake("upper_underscore")
      True
      >>> is_lower_snake("UpperUnderscore")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def case_format_from_value(s: str) -> CaseFormat:
    """
    Parse a case format from its serialized value or member name.

    Args:
      s (str): ``"upper_underscore"``, ``"UPPER_SNAKE"`` and similar spellings.

    Returns:
      CaseFormat: Parsed format.

    Raises:
      ValueError: If s does not name a known case format.
    """
    key = (s or "").strip().lower()
    if not is_lower_snake(key):
        raise ValueError(f"case format must be lower_snake (got: {s!r})")
    if key.upper() in CaseFormat.__members__:
        return CaseFormat[key.upper()]
    allowed = sorted({f.value for f in CaseFormat})
    if key not in allowed:
        raise ValueError(f"case format must be one of {allowed} (got {s!r})")
    return CaseFormat(key)
