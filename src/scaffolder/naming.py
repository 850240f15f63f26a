"""String case conversion used to derive folder names and class identifiers."""

from __future__ import annotations

import re
from enum import Enum

__all__ = [
    "NamingPattern",
    "apply_pattern",
    "to_camel_case",
    "to_kebab_case",
    "to_lower_case",
    "to_pascal_case",
]


# Runs of separators, or the empty position in front of every capital letter.
_WORD_BOUNDARY = re.compile(r"[_\-\s]+|(?=[A-Z])")
_CAMEL_HUMP = re.compile(r"([a-z])([A-Z])")


class NamingPattern(str, Enum):
    """Casing conventions accepted for generated folder and file names."""

    LOWER_CASE = "lowercase"
    KEBAB_CASE = "kebab-case"
    PASCAL_CASE = "PascalCase"
    CAMEL_CASE = "camelCase"


def to_pascal_case(value: str) -> str:
    """Return ``value`` as ``PascalCase``.

    The input is split on runs of underscores, hyphens and whitespace and in
    front of every uppercase letter, so ``user_profile``, ``user-profile`` and
    ``userProfile`` all become ``UserProfile``. Each word has its first
    character titlecased and the remainder lowercased. Empty words are dropped,
    which makes the function idempotent.
    """

    words = (word for word in _WORD_BOUNDARY.split(value) if word)
    return "".join(word[:1].title() + word[1:].lower() for word in words)


def to_kebab_case(value: str) -> str:
    """Return ``value`` as ``kebab-case``.

    Only camel humps (a lowercase letter followed by an uppercase one) are
    turned into hyphens. Underscores and spaces are kept as they are, so
    callers wanting those split must pass a camel or Pascal cased value.
    """

    return _CAMEL_HUMP.sub(r"\1-\2", value).lower()


def to_camel_case(value: str) -> str:
    """Lowercase the first character of ``value`` and keep the rest verbatim.

    Unlike :func:`to_pascal_case` no word splitting happens here:
    ``to_camel_case("user_profile")`` stays ``"user_profile"``.
    """

    return value[:1].lower() + value[1:]


def to_lower_case(value: str) -> str:
    return value.lower()


_CONVERTERS = {
    NamingPattern.LOWER_CASE: to_lower_case,
    NamingPattern.KEBAB_CASE: to_kebab_case,
    NamingPattern.PASCAL_CASE: to_pascal_case,
    NamingPattern.CAMEL_CASE: to_camel_case,
}


def apply_pattern(value: str, pattern: NamingPattern | str) -> str:
    """Convert ``value`` according to ``pattern``."""

    return _CONVERTERS[NamingPattern(pattern)](value)
