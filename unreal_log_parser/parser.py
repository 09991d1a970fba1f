"""Unreal Engine log line parser — ordered prefix matchers + compiled regex.

Line shape, every prefix element optional except the category:

    [2024.04.27-12.34.56:789][  1]LogTemp: Warning: This is a warning message.

Matching order:
  1. Timestamp bracket, only when the line starts with '[' (all or nothing)
  2. Frame bracket, only right after a timestamp (spaces stripped)
  3. Category and ':', then a space or end of line (mandatory)
  4. Verbosity and ':' (speculative, unknown words stay in the message)
  5. Message, the rest verbatim
"""

import re

from unreal_log_parser.errors import (
    InvalidFrameNumber,
    InvalidTimestamp,
    ParseError,
)
from unreal_log_parser.models import LogEntry, Timestamp, Verbosity

TIMESTAMP_PATTERN = re.compile(
    r"\[([0-9]+)\.([0-9]+)\.([0-9]+)-([0-9]+)\.([0-9]+)\.([0-9]+):([0-9]+)\]"
)
FRAME_PATTERN = re.compile(r"\[([^\]]*)\]")
FRAME_DIGITS = re.compile(r"[0-9]+")
CATEGORY_PATTERN = re.compile(r"([^\s:\[]+):(?: |\Z)")
VERBOSITY_PATTERN = re.compile(r"([A-Za-z]+):(?: |\Z)")

# Numeric fields are unsigned 32-bit
U32_MAX = 0xFFFFFFFF

_VERBOSITY_NAMES = frozenset(Verbosity.names())


def _to_u32(digits: str, error_cls, line: str) -> int:
    value = int(digits)
    if value > U32_MAX:
        raise error_cls(f"{error_cls.default_message}: {digits} out of range", line=line)
    return value


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def match_timestamp(text: str, line: str) -> tuple[Timestamp | None, str]:
    """Consume a leading ``[Y.M.D-h.m.s:ms]`` bracket.

    Returns ``(None, text)`` when the text does not start with '['. A bracket
    that does not have the full timestamp shape fails the whole line.
    """
    if not text.startswith("["):
        return None, text
    match = TIMESTAMP_PATTERN.match(text)
    if not match:
        raise ParseError("Generic parse error: malformed timestamp bracket", line=line)
    parts = [_to_u32(group, InvalidTimestamp, line) for group in match.groups()]
    return Timestamp(*parts), text[match.end():]


def match_frame_num(text: str, line: str) -> tuple[int | None, str]:
    """Consume a ``[  42]`` frame bracket. Only space characters are ignored."""
    match = FRAME_PATTERN.match(text)
    if not match:
        return None, text
    digits = match.group(1).replace(" ", "")
    if not FRAME_DIGITS.fullmatch(digits):
        raise InvalidFrameNumber(
            f"Invalid frame number: {match.group(1)!r}", line=line
        )
    return _to_u32(digits, InvalidFrameNumber, line), text[match.end():]


def match_category(text: str, line: str) -> tuple[str, str]:
    """Consume ``Category: ``, or a bare ``Category:`` ending the line.

    A line without one has no recognizable structure.
    """
    match = CATEGORY_PATTERN.match(text)
    if not match:
        raise ParseError(line=line)
    return match.group(1), text[match.end():]


def match_verbosity(text: str) -> tuple[Verbosity | None, str]:
    """Speculatively consume ``Verbosity: ``; leaves text untouched on a miss."""
    match = VERBOSITY_PATTERN.match(text)
    if not match or match.group(1) not in _VERBOSITY_NAMES:
        return None, text
    return Verbosity.from_name(match.group(1)), text[match.end():]


def parse_line(line: str) -> LogEntry:
    """Parse a single log line into a LogEntry.

    Raises ParseError, InvalidTimestamp or InvalidFrameNumber for the first
    structural element that fails; never returns a partially filled entry.
    """
    raw = _strip_terminator(line)

    timestamp, rest = match_timestamp(raw, raw)
    frame_num = None
    if timestamp is not None:
        frame_num, rest = match_frame_num(rest, raw)
    category, rest = match_category(rest, raw)
    verbosity, message = match_verbosity(rest)

    return LogEntry(
        timestamp=timestamp or Timestamp(),
        frame_num=frame_num or 0,
        category=category,
        verbosity=verbosity or Verbosity.LOG,
        message=message,
    )
