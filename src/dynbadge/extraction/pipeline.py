"""Extraction pipeline: compile → extract → substitute or fall back."""

from __future__ import annotations

import logging

from .compiler import compile_matcher
from .errors import CompileError, PipelineError
from .extractor import extract
from .template import substitute
from .types import Document, ExtractionResult

logger = logging.getLogger(__name__)


def _as_document(document: Document | str | bytes) -> Document:
    if isinstance(document, Document):
        return document
    if isinstance(document, bytes):
        return Document.from_bytes(document)
    return Document(document)


def run_detailed(
    document: Document | str | bytes,
    pattern: str,
    flags: str | None = "",
    template: str | None = None,
    no_match: str = "",
) -> ExtractionResult:
    """
    Extract a value from a document.

    Args:
        document: Text to search; bytes are decoded as UTF-8
        pattern: RE2 expression, only its first match is used
        flags: Flag characters such as "imsU"
        template: Replacement template; None returns the full match
        no_match: Value returned when the pattern does not match

    Returns:
        ExtractionResult with the value and the match, if any

    Raises:
        PipelineError: If the pattern or flags do not compile
    """
    try:
        matcher = compile_matcher(pattern, flags)
    except CompileError as e:
        raise PipelineError(e) from e

    match = extract(matcher, _as_document(document))
    if match is None:
        return ExtractionResult(value=no_match, matched=False)

    return ExtractionResult(
        value=substitute(match, template),
        matched=True,
        match=match,
    )


def run(
    document: Document | str | bytes,
    pattern: str,
    flags: str | None = "",
    template: str | None = None,
    no_match: str = "",
) -> str:
    """Extract a value from a document and return it as a string."""
    return run_detailed(document, pattern, flags, template, no_match).value
