"""Log record models — frozen dataclasses + verbosity enum."""

import re
from dataclasses import dataclass, field
from enum import Enum

from unreal_log_parser.errors import InvalidTimestamp, InvalidVerbosity

DISPLAY_PATTERN = re.compile(
    r"^Date: (\d+)\.(\d+)\.(\d+) Time: (\d+)\.(\d+)\.(\d+) (\d+)ms$"
)


class Verbosity(Enum):
    VERBOSE = "Verbose"
    VERY_VERBOSE = "VeryVerbose"
    DISPLAY = "Display"
    LOG = "Log"
    WARNING = "Warning"
    ERROR = "Error"
    FATAL = "Fatal"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Verbosity":
        """Exact, case-sensitive lookup by tag name (e.g. ``"Warning"``)."""
        try:
            return cls(name)
        except ValueError:
            raise InvalidVerbosity(f"Invalid verbosity: {name!r}") from None

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class Timestamp:
    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def __str__(self) -> str:
        return (
            f"Date: {self.year:04d}.{self.month:02d}.{self.day:02d} "
            f"Time: {self.hour:02d}.{self.minute:02d}.{self.second:02d} "
            f"{self.millisecond:03d}ms"
        )

    @classmethod
    def from_display(cls, text: str) -> "Timestamp":
        """Rebuild a Timestamp from its ``str()`` rendering."""
        match = DISPLAY_PATTERN.match(text)
        if not match:
            raise InvalidTimestamp(f"Invalid timestamp: {text!r}")
        return cls(*(int(group) for group in match.groups()))


@dataclass(frozen=True)
class LogEntry:
    """One parsed line.

    Example source line:
        [2024.04.27-12.34.56:789][  1]LogTemp: Warning: This is a warning message.
    """

    timestamp: Timestamp = field(default_factory=Timestamp)
    frame_num: int = 0
    category: str = ""
    verbosity: Verbosity = Verbosity.LOG
    message: str = ""

    def __str__(self) -> str:
        return (
            f"Timestamp: {self.timestamp} \n"
            f"Frame: {self.frame_num} \n"
            f"Category: {self.category} \n"
            f"Verbosity: {self.verbosity} \n"
            f"Message: {self.message}"
        )
