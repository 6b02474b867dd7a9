"""Safe regex extraction core."""
from .compiler import compile_matcher
from .errors import (
    CompileError,
    InvalidFlagError,
    InvalidPatternError,
    PipelineError,
)
from .extractor import extract
from .flags import Flag, parse_flags
from .pipeline import run, run_detailed
from .template import parse_template, substitute
from .types import CompiledMatcher, Document, ExtractionResult, MatchResult

__all__ = [
    "compile_matcher",
    "extract",
    "parse_flags",
    "parse_template",
    "run",
    "run_detailed",
    "substitute",
    "CompiledMatcher",
    "CompileError",
    "Document",
    "ExtractionResult",
    "Flag",
    "InvalidFlagError",
    "InvalidPatternError",
    "MatchResult",
    "PipelineError",
]
