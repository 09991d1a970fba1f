"""unreal-log-parser — parse and filter Unreal Engine log files."""

import sys

from unreal_log_parser.cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
