"""Flag string parsing for the regex compiler."""

from __future__ import annotations

import enum

from .errors import InvalidFlagError


class Flag(enum.Enum):
    """A regex modifier, valued by the RE2 inline flag it turns on."""

    IGNORE_CASE = "i"
    MULTILINE = "m"
    DOT_ALL = "s"
    UNGREEDY = "U"


FLAG_CHARS: dict[str, Flag | None] = {
    "i": Flag.IGNORE_CASE,
    "m": Flag.MULTILINE,
    "s": Flag.DOT_ALL,
    "U": Flag.UNGREEDY,
    # Accepted for JavaScript-style flag strings; no effect on a single search.
    "g": None,
    "u": None,
}


def parse_flags(flags: str | None) -> frozenset[Flag]:
    """Parse a flags string such as ``"imsU"`` into a set of flags.

    Order and repetition do not matter.

    Raises:
        InvalidFlagError: If any character is not a supported flag.
    """
    if not flags:
        return frozenset()

    unsupported = "".join(dict.fromkeys(c for c in flags if c not in FLAG_CHARS))
    if unsupported:
        raise InvalidFlagError(flags, unsupported)

    return frozenset(f for f in (FLAG_CHARS[c] for c in flags) if f is not None)


def inline_prefix(flags: frozenset[Flag]) -> str:
    """Render flags as an RE2 inline group, e.g. ``(?is)``; empty for no flags."""
    if not flags:
        return ""
    letters = "".join(sorted(f.value for f in flags))
    return f"(?{letters})"
