"""Command-line front end: ``parse`` and ``credits`` subcommands."""

import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace

from unreal_log_parser.config import Config, load_config
from unreal_log_parser.errors import InvalidCategory, InvalidVerbosity, UnrealLogParserError
from unreal_log_parser.filters import build_filter_chain, validate_category
from unreal_log_parser.formatter import write_entries
from unreal_log_parser.log_file import LogFile, log_failure, log_failure_quietly
from unreal_log_parser.models import Verbosity

APP_NAME = "Unreal Engine Log Parser"
APP_SHORT_NAME = "unreal-log-parser"
APP_VERSION = "1.1.1"
APP_AUTHOR = "Kyryl Sydorov"
APP_URL = "https://github.com/KyrylSydorov"

logger = logging.getLogger(__name__)


def _verbosity_arg(value: str) -> Verbosity:
    try:
        return Verbosity.from_name(value)
    except InvalidVerbosity as e:
        raise ArgumentTypeError(f"{e} (choose from {', '.join(Verbosity.names())})")


def _category_arg(value: str) -> str:
    try:
        return validate_category(value)
    except InvalidCategory as e:
        raise ArgumentTypeError(str(e))


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog=APP_SHORT_NAME,
        description="Parse and filter Unreal Engine log files.",
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("credits", help="Print the credits of the program")

    parse = subparsers.add_parser("parse", help="Parse an Unreal Engine log file")
    parse.add_argument(
        "-i", "--input",
        required=True,
        help="Path to the input file",
    )
    parse.add_argument(
        "-o", "--output",
        required=True,
        help="Path to the output file",
    )
    parse.add_argument(
        "-v", "--verbosity",
        type=_verbosity_arg,
        help=f"Verbosity level to include ({', '.join(Verbosity.names())})",
    )
    parse.add_argument(
        "-c", "--category",
        type=_category_arg,
        help="Look for logs with a specific category",
    )
    parse.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    return parser


def print_credits() -> None:
    print(f"{APP_NAME} Credits:")
    print(f"Made by {APP_AUTHOR}")
    print(f"Visit my GitHub: {APP_URL}")
    print(f"Version {APP_VERSION}")


def resolve_filters(args: Namespace, config: Config) -> tuple[Verbosity | None, str | None]:
    """CLI flags win over config defaults. Raises on invalid config values."""
    verbosity = args.verbosity
    if verbosity is None and config.default_verbosity:
        verbosity = Verbosity.from_name(config.default_verbosity)
    category = args.category
    if category is None and config.default_category:
        category = validate_category(config.default_category)
    return verbosity, category


def run_parse(args: Namespace, config: Config) -> int:
    """Parse the input file, filter it, and write the report. Returns exit code."""
    try:
        verbosity, category = resolve_filters(args, config)
    except UnrealLogParserError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_file = LogFile(args.input, encoding=config.encoding)
    reporter = log_failure if config.report_failures else log_failure_quietly
    try:
        log_file.parse(on_error=reporter)
    except UnrealLogParserError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print("Parsed successfully!")

    filter_fn = build_filter_chain(verbosity=verbosity, category=category)
    entries = [e for e in log_file.entries if filter_fn(e)]

    if not entries:
        print("No log entries found with the specified criteria")
        return 0

    write_entries(entries, args.output, encoding=config.encoding)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "credits":
        print_credits()
        return 0

    if args.command == "parse":
        config = load_config(args.config)
        logging.basicConfig(
            level=getattr(logging, config.log_level),
            format="%(asctime)s [UE-LOG] %(levelname)s %(message)s",
            stream=sys.stderr,
        )
        logger.debug("Config: %s", config)
        return run_parse(args, config)

    print("Unknown command!")
    print(f'Use "{APP_SHORT_NAME} --help" to see the list of available commands')
    return 0
