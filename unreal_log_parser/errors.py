"""Exception hierarchy for line parsing and file aggregation."""


class UnrealLogParserError(Exception):
    """Base class for every error raised by the parser.

    Carries the offending ``line`` or ``path`` when one is known.
    """

    default_message = "Unreal log parser error"

    def __init__(self, message: str | None = None, *, line: str | None = None,
                 path: str | None = None):
        super().__init__(message or self.default_message)
        self.line = line
        self.path = path


class NoSuchFile(UnrealLogParserError):
    """The input file could not be opened or read."""

    default_message = "No such file"


class ParseError(UnrealLogParserError):
    """No line-level structure was recognized at all."""

    default_message = "Generic parse error"


class NoLogEntriesFound(UnrealLogParserError):
    """The file was empty, or none of its lines parsed."""

    default_message = "No log entries found"


class InvalidVerbosity(UnrealLogParserError, ValueError):
    default_message = "Invalid verbosity"


class InvalidCategory(UnrealLogParserError, ValueError):
    default_message = "Invalid category"


class InvalidTimestamp(UnrealLogParserError, ValueError):
    default_message = "Invalid timestamp"


class InvalidFrameNumber(UnrealLogParserError, ValueError):
    default_message = "Invalid frame number"
