"""Header generation CLI command."""

import argparse
import sys

from buildstamp.config import EXIT_OK
from buildstamp.errors import BuildstampError


def cmd_generate(args: argparse.Namespace) -> int:
    from buildstamp.header.generator import generate

    try:
        generate(args.source_path, args.output_name)
    except BuildstampError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code

    return EXIT_OK
