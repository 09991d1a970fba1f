"""Filter predicates for log entries — verbosity and category."""

import re
from typing import Callable

from unreal_log_parser.errors import InvalidCategory
from unreal_log_parser.models import LogEntry, Verbosity

_CATEGORY_NAME = re.compile(r"[^\s:\[]+")


def validate_category(name: str) -> str:
    """Return *name* if it could appear as a parsed category."""
    if not isinstance(name, str) or not _CATEGORY_NAME.fullmatch(name):
        raise InvalidCategory(f"Invalid category: {name!r}")
    return name


def filter_by_verbosity(entry: LogEntry, verbosity: Verbosity | str) -> bool:
    """True if entry has exactly this verbosity."""
    if isinstance(verbosity, str):
        verbosity = Verbosity.from_name(verbosity)
    return entry.verbosity is verbosity


def filter_by_category(entry: LogEntry, category: str) -> bool:
    """True if entry's category matches (case-sensitive)."""
    return entry.category == category


def build_filter_chain(
    verbosity: Verbosity | str | None = None,
    category: str | None = None,
) -> Callable[[LogEntry], bool]:
    """Combine the active filters into a single callable.

    Returns a function that ANDs all active predicates together.
    """
    predicates = []

    if verbosity is not None:
        if isinstance(verbosity, str):
            verbosity = Verbosity.from_name(verbosity)
        predicates.append(lambda entry, v=verbosity: filter_by_verbosity(entry, v))

    if category is not None:
        predicates.append(lambda entry, c=category: filter_by_category(entry, c))

    if not predicates:
        return lambda entry: True

    def combined(entry: LogEntry) -> bool:
        return all(p(entry) for p in predicates)

    return combined
