"""Whole-file reading and line splitting."""

import logging
import os

from unreal_log_parser.errors import NoSuchFile

logger = logging.getLogger(__name__)


def read_text(filepath: str, encoding: str = "utf-8") -> str:
    """Return the full contents of *filepath*.

    Raises NoSuchFile if the file is missing or unreadable, if *encoding* is
    unknown, or if the contents are not valid text in it.
    """
    if not os.path.isfile(filepath):
        raise NoSuchFile(f"No such file: {filepath}", path=filepath)
    try:
        with open(filepath, "r", encoding=encoding, newline="") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.debug("Failed to read %s: %s", filepath, e)
        raise NoSuchFile(f"No such file: {filepath} ({e})", path=filepath) from e
    logger.debug("Read %d characters from %s", len(contents), filepath)
    return contents


def split_lines(text: str) -> list[str]:
    """Split on '\\n', dropping one trailing '\\r' per line.

    A final newline does not produce an extra empty line, and empty text
    yields no lines at all.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(filepath: str, encoding: str = "utf-8") -> list[str]:
    """Read *filepath* and return its lines without terminators."""
    return split_lines(read_text(filepath, encoding))
