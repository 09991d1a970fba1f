"""File aggregator — parse every line of a log file, skip and report failures."""

import logging
from dataclasses import dataclass
from typing import Callable

from unreal_log_parser.errors import NoLogEntriesFound, UnrealLogParserError
from unreal_log_parser.models import LogEntry
from unreal_log_parser.parser import parse_line
from unreal_log_parser.reader import read_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineFailure:
    line_number: int  # 1-based
    line: str
    error: UnrealLogParserError


def log_failure(failure: LineFailure) -> None:
    """Default reporter: one WARNING per line that failed to parse."""
    logger.warning(
        "Error parsing line %d: %s (%s)",
        failure.line_number, failure.line, failure.error,
    )


def log_failure_quietly(failure: LineFailure) -> None:
    logger.debug(
        "Error parsing line %d: %s (%s)",
        failure.line_number, failure.line, failure.error,
    )


class LogFile:
    """Entries parsed from one file, in line order.

    Lines that fail are left out of ``entries`` and recorded in ``failures``.
    """

    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding
        self.entries: list[LogEntry] = []
        self.failures: list[LineFailure] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def parse(
        self, on_error: Callable[[LineFailure], None] | None = None
    ) -> "LogFile":
        """Read the file and parse each line.

        Raises:
            NoSuchFile: the file cannot be read.
            NoLogEntriesFound: the file has no lines, or no line parsed.
        """
        report = on_error or log_failure
        lines = read_lines(self.path, self.encoding)

        if not lines:
            raise NoLogEntriesFound(f"No log entries found: {self.path} is empty", path=self.path)

        for number, line in enumerate(lines, start=1):
            try:
                entry = parse_line(line)
            except UnrealLogParserError as e:
                failure = LineFailure(line_number=number, line=line, error=e)
                self.failures.append(failure)
                report(failure)
                continue
            self.entries.append(entry)

        logger.info(
            "Parsed %s: %d entries, %d failed lines",
            self.path, len(self.entries), len(self.failures),
        )

        if not self.entries:
            raise NoLogEntriesFound(
                f"No log entries found: none of {len(lines)} lines in {self.path} parsed",
                path=self.path,
            )
        return self


def parse_file(
    path: str,
    encoding: str = "utf-8",
    on_error: Callable[[LineFailure], None] | None = None,
) -> LogFile:
    """Build a LogFile for *path* and run one parse pass over it."""
    return LogFile(path, encoding=encoding).parse(on_error=on_error)
