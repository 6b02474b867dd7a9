"""Compile user-supplied patterns with RE2.

RE2 runs in time linear in the input and rejects constructs that need
backtracking (backreferences, lookaround). Patterns it refuses are reported
as errors; there is no fallback to the ``re`` module.
"""

from __future__ import annotations

import logging

import re2

from .errors import InvalidPatternError
from .flags import inline_prefix, parse_flags
from .types import CompiledMatcher

logger = logging.getLogger(__name__)


def _options() -> re2.Options:
    options = re2.Options()
    # Compile errors are reported through the exception, not stderr.
    options.log_errors = False
    return options


def _engine_message(error: re2.error) -> str:
    message = error.args[0] if error.args else ""
    if isinstance(message, bytes):
        return message.decode("utf-8", errors="replace")
    return str(message)


def _diagnose(pattern: str, prefix: str, error: re2.error) -> str:
    """Engine diagnostic phrased in terms of the pattern the caller wrote."""
    if prefix:
        try:
            re2.compile(pattern, _options())
        except re2.error as bare:
            return _engine_message(bare)
    return _engine_message(error).replace(prefix, "", 1)


def compile_matcher(pattern: str, flags: str | None = "") -> CompiledMatcher:
    """Compile ``pattern`` with ``flags`` into a linear-time matcher.

    Args:
        pattern: Expression in RE2 syntax.
        flags: Flag characters, see :data:`dynbadge.extraction.flags.FLAG_CHARS`.

    Returns:
        A CompiledMatcher for a single run.

    Raises:
        InvalidFlagError: If ``flags`` contains an unsupported character.
        InvalidPatternError: If RE2 rejects the pattern.
    """
    flag_set = parse_flags(flags)
    prefix = inline_prefix(flag_set)

    try:
        regex = re2.compile(prefix + pattern, _options())
    except UnicodeEncodeError as e:
        logger.debug(f"[Compile] pattern is not encodable as UTF-8: {e}")
        raise InvalidPatternError(pattern, "pattern contains characters that are not valid UTF-8") from e
    except re2.error as e:
        detail = _diagnose(pattern, prefix, e)
        logger.debug(f"[Compile] rejected pattern {pattern!r}: {detail}")
        raise InvalidPatternError(pattern, detail) from e

    group_names = tuple(sorted(regex.groupindex.items(), key=lambda item: item[1]))
    logger.debug(
        f"[Compile] pattern={pattern!r} flags={flags!r} groups={regex.groups}"
    )
    return CompiledMatcher(
        pattern=pattern,
        flags=flag_set,
        regex=regex,
        group_count=regex.groups,
        group_names=group_names,
    )
