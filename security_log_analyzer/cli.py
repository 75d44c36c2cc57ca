"""
Command line entry point.

Usage:
    security-log-analyzer <log_directory> <report_file> [--quiet] [--debug]
    python -m security_log_analyzer <log_directory> <report_file>

Arguments after a bare ``--`` are always positional, so paths that start
with ``--`` can still be given.
"""

import sys
from typing import List, Optional

from .analyzer import SecurityLogAnalyzer
from .exceptions import SecurityAnalysisError, UsageError
from .logging_config import configure_logging, level_for_flags

USAGE = "Usage: security-log-analyzer <log_directory> <report_file> [--quiet] [--debug]"

KNOWN_FLAGS = ("--quiet", "--debug")


def parse_args(argv: List[str]):
    """Split argv into (log_directory, report_file, flags).

    Raises:
        UsageError: On an unknown flag or fewer than two positional arguments.
    """
    positional = []
    flags = set()
    options_done = False
    for arg in argv:
        if options_done or not arg.startswith("--"):
            positional.append(arg)
        elif arg == "--":
            options_done = True
        elif arg in KNOWN_FLAGS:
            flags.add(arg)
        else:
            raise UsageError(f"Unknown option: {arg}\n{USAGE}")

    if len(positional) < 2:
        raise UsageError(USAGE)
    return positional[0], positional[1], flags


def main(argv: Optional[List[str]] = None) -> int:
    """Run the analyzer and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        log_directory, report_file, flags = parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    configure_logging(level_for_flags(quiet="--quiet" in flags, debug="--debug" in flags))

    analyzer = SecurityLogAnalyzer()
    try:
        analyzer.analyze(log_directory, report_file)
    except SecurityAnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
