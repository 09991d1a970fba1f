"""Report output — one bracketed block per entry."""

import logging
from typing import Iterable

from unreal_log_parser.models import LogEntry

logger = logging.getLogger(__name__)


def format_entry(entry: LogEntry) -> str:
    """Wrap the entry's multi-line rendering in '[' / ']' lines."""
    return f"[\n{entry}\n]"


def write_entries(entries: Iterable[LogEntry], filepath: str, encoding: str = "utf-8") -> int:
    """Write each entry block to *filepath*, replacing it. Returns the count."""
    count = 0
    with open(filepath, "w", encoding=encoding) as f:
        for entry in entries:
            f.write(format_entry(entry) + "\n")
            count += 1
    logger.info("Wrote %d entries to %s", count, filepath)
    return count
