"""Immutable value types passed between the extraction stages.

Every value is created fresh for a single run and discarded afterwards:

    Document + CompiledMatcher → MatchResult | None → ExtractionResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .flags import Flag


@dataclass(frozen=True)
class Document:
    """Text to search, as supplied by a fetcher.

    Lone surrogates cannot be handed to RE2, which works on UTF-8, so they
    are replaced with U+FFFD on construction.
    """

    text: str

    def __post_init__(self) -> None:
        try:
            self.text.encode("utf-8")
        except UnicodeEncodeError:
            clean = self.text.encode("utf-8", errors="surrogatepass").decode("utf-8", errors="replace")
            object.__setattr__(self, "text", clean)

    @classmethod
    def from_bytes(cls, content: bytes) -> Document:
        """Decode raw content as UTF-8, replacing invalid bytes."""
        return cls(content.decode("utf-8", errors="replace"))

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class CompiledMatcher:
    """A pattern compiled under RE2 together with the flags it was built with.

    Attributes:
        pattern: Pattern as supplied by the caller (without flag prefix).
        flags: Parsed flags.
        regex: The compiled ``re2`` object.
        group_count: Number of capture groups declared in the pattern.
        group_names: Named groups mapped to their index.
    """

    pattern: str
    flags: frozenset[Flag]
    regex: Any = field(repr=False, compare=False)
    group_count: int = 0
    group_names: tuple[tuple[str, int], ...] = ()


@dataclass(frozen=True)
class MatchResult:
    """First match of a matcher in a document.

    ``groups`` holds capture groups 1..n; an entry is None when its
    alternative did not take part in the match.
    """

    full_match: str
    groups: tuple[str | None, ...] = ()
    named_groups: tuple[tuple[str, int], ...] = ()
    start: int = 0
    end: int = 0

    def group(self, index: int) -> str | None:
        """Group by number; 0 is the full match, out of range is None."""
        if index == 0:
            return self.full_match
        if 1 <= index <= len(self.groups):
            return self.groups[index - 1]
        return None

    def named(self, name: str) -> str | None:
        """Group by name, None if the name is unknown or did not participate."""
        for group_name, index in self.named_groups:
            if group_name == name:
                return self.group(index)
        return None


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of a full pipeline run."""

    value: str
    matched: bool
    match: MatchResult | None = None
