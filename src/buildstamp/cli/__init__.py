"""Command-line entry point for buildstamp.

Usage:
    buildstamp <source-directory> <output-header-filename>

Writes <source-directory>/<output-header-filename> containing the DATE,
SRC_PREFIX_LENGTH and VERSION_LOGICIEL defines. Exits 0 on success and
1 on any failure.
"""

import argparse
import sys
from typing import NoReturn

from buildstamp.cli.generate import cmd_generate
from buildstamp.errors import UsageError


class _StampArgumentParser(argparse.ArgumentParser):
    """Parser that reports every argument error as a UsageError."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(self.prog)


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    # No -h/--help: any argument count other than two is a usage error.
    parser = _StampArgumentParser(
        prog=prog,
        description="Generate a version.h stamp header for a source tree",
        add_help=False,
    )
    parser.add_argument(
        "source_path", metavar="source-directory",
        help="Build source root; the header is written inside it",
    )
    parser.add_argument(
        "output_name", metavar="output-header-filename",
        help="Header filename, relative to source-directory",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    try:
        if len(argv) != 2:
            raise UsageError(parser.prog)
        # "--" keeps dash-prefixed paths positional.
        args = parser.parse_args(["--", *argv])
    except UsageError as exc:
        print(exc)
        return exc.exit_code

    return cmd_generate(args)


if __name__ == "__main__":
    sys.exit(main())
