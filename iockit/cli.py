"""The ioctl command line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from iockit import version

_PROG = "ioctl"


class _UsageError(Exception):
    """Raised by the parser instead of exiting on bad arguments."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _build_parser() -> _Parser:
    parser = _Parser(prog=_PROG)
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("version", help="Print the version summary.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    try:
        options = parser.parse_args(args)
    except _UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        print(f"run `{_PROG} {' '.join(args)} -h` for usage", file=sys.stderr)
        return 1
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    if options.command == "version":
        print(version.summary())
        return 0
    print("Welcome to use ioctl...")
    return 0