"""Error taxonomy for header generation.

Every error is fatal: the CLI prints ``str(err)`` as a one-line
diagnostic and returns ``err.exit_code``.
"""

from __future__ import annotations

from buildstamp.config import EXIT_DIRECTORY, EXIT_OUTPUT, EXIT_USAGE

USAGE_TEMPLATE = "Usage: {prog} <path to the src directory> <name of the output header file>"


class BuildstampError(Exception):
    """Base class for all generator failures."""

    exit_code = 1


class UsageError(BuildstampError):
    exit_code = EXIT_USAGE

    def __init__(self, prog: str) -> None:
        self.prog = prog
        super().__init__(USAGE_TEMPLATE.format(prog=prog))


class DirectoryAccessError(BuildstampError):
    """The source directory does not exist or cannot be entered."""

    exit_code = EXIT_DIRECTORY

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path
        super().__init__(f'Cannot change the current directory to "{source_path}"')


class OutputWriteError(BuildstampError):
    """The output header cannot be opened or written."""

    exit_code = EXIT_OUTPUT

    def __init__(self, output_name: str, source_path: str) -> None:
        self.output_name = output_name
        self.source_path = source_path
        super().__init__(
            f'Cannot open the file "{output_name}" for writing '
            f'(path to "src": {source_path}).'
        )
