"""Replacement templates.

A template is literal text with ``$`` references into the match, following
the conventions of JavaScript's ``String.prototype.replace``:

    $$        a literal "$"
    $&        the whole match
    $` $'     text before/after the match (always empty here, since the
              output is built from the matched text alone)
    $n $nn    capture group n (1-99); $0 is the whole match
    $<name>   named capture group, when the pattern declares any

References to groups that do not exist or did not participate expand to the
empty string. Anything else after ``$`` is kept literally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .types import MatchResult


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class GroupRef:
    index: int


@dataclass(frozen=True)
class NamedRef:
    name: str


@dataclass(frozen=True)
class Empty:
    """A reference that always expands to nothing."""


Token = Union[Literal, GroupRef, NamedRef, Empty]


def parse_template(
    template: str,
    group_count: int,
    group_names: tuple[tuple[str, int], ...] = (),
) -> tuple[Token, ...]:
    """Split ``template`` into literal chunks and group references.

    ``group_count`` decides how ``$nn`` is read: as group nn when it exists,
    otherwise as group n followed by a literal digit.
    """
    tokens: list[Token] = []
    buf: list[str] = []

    def flush() -> None:
        if buf:
            tokens.append(Literal("".join(buf)))
            buf.clear()

    i = 0
    n = len(template)
    while i < n:
        ch = template[i]
        if ch != "$" or i + 1 == n:
            buf.append(ch)
            i += 1
            continue

        nxt = template[i + 1]
        if nxt == "$":
            buf.append("$")
            i += 2
        elif nxt == "&":
            flush()
            tokens.append(GroupRef(0))
            i += 2
        elif nxt in "`'":
            flush()
            tokens.append(Empty())
            i += 2
        elif nxt.isascii() and nxt.isdigit():
            flush()
            if i + 2 < n and template[i + 2].isascii() and template[i + 2].isdigit():
                two = int(template[i + 1:i + 3])
                if 1 <= two <= group_count:
                    tokens.append(GroupRef(two))
                    i += 3
                    continue
            tokens.append(GroupRef(int(nxt)))
            i += 2
        elif nxt == "<" and group_names:
            close = template.find(">", i + 2)
            if close == -1:
                buf.append("$<")
                i += 2
            else:
                flush()
                tokens.append(NamedRef(template[i + 2:close]))
                i = close + 1
        else:
            buf.append("$")
            i += 1

    flush()
    return tuple(tokens)


def render(tokens: tuple[Token, ...], match: MatchResult) -> str:
    """Assemble output from parsed tokens in a single pass."""
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, Literal):
            parts.append(token.text)
        elif isinstance(token, GroupRef):
            parts.append(match.group(token.index) or "")
        elif isinstance(token, NamedRef):
            parts.append(match.named(token.name) or "")
    return "".join(parts)


def substitute(match: MatchResult, template: str | None = None) -> str:
    """Build the output value for ``match``.

    Without a template the full match is returned verbatim.
    """
    if template is None:
        return match.full_match
    tokens = parse_template(template, len(match.groups), match.named_groups)
    return render(tokens, match)
