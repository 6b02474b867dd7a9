"""Single-search extraction over a document."""

from __future__ import annotations

import logging

from .types import CompiledMatcher, Document, MatchResult

logger = logging.getLogger(__name__)


def extract(matcher: CompiledMatcher, document: Document) -> MatchResult | None:
    """Return the leftmost match of ``matcher`` in ``document``, or None.

    The search is unanchored and runs once; later matches are ignored.
    """
    found = matcher.regex.search(document.text)
    if found is None:
        logger.debug(f"[Extract] no match in {len(document)} chars")
        return None

    start, end = found.span()
    logger.debug(f"[Extract] match at {start}:{end}")
    return MatchResult(
        full_match=found.group(0),
        groups=tuple(found.groups()),
        named_groups=matcher.group_names,
        start=start,
        end=end,
    )
