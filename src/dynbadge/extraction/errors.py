"""Exception types raised by the extraction core."""

from __future__ import annotations

from typing import Literal

CompileErrorKind = Literal["unsupported_flag", "invalid_pattern"]


class CompileError(ValueError):
    """A (pattern, flags) pair could not be turned into a matcher.

    Attributes:
        kind: Which input was rejected.
        detail: Human-readable reason, safe to show to the caller.
    """

    kind: CompileErrorKind

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidFlagError(CompileError):
    """The flags string contains characters outside the supported set."""

    kind = "unsupported_flag"

    def __init__(self, flags: str, unsupported: str) -> None:
        super().__init__(f"unsupported flag(s) {unsupported!r} in {flags!r}")
        self.flags = flags
        self.unsupported = unsupported


class InvalidPatternError(CompileError):
    """The pattern is not expressible in the RE2 grammar."""

    kind = "invalid_pattern"

    def __init__(self, pattern: str, detail: str) -> None:
        super().__init__(detail)
        self.pattern = pattern


class PipelineError(Exception):
    """Terminal failure of an extraction run.

    Only compilation can fail; matching and substitution are total.
    """

    def __init__(self, cause: CompileError) -> None:
        self.kind = "invalid_regex"
        self.cause = cause
        self.pretty_message = f"Invalid re2 regex: {cause.detail}"
        super().__init__(self.pretty_message)
