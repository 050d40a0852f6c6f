"""version.h generator.

Renders the stamp header from a captured timestamp and writes it next
to the sources it describes. The output path is the source directory
joined with the output name, which resolves exactly as entering the
directory and opening the name relatively would, without touching the
process working directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from buildstamp.config import INCLUDE_GUARD, VERSION_LOGICIEL
from buildstamp.errors import DirectoryAccessError, OutputWriteError
from buildstamp.header.templates import VERSION_HEADER
from buildstamp.header.timestamp import BuildTimestamp


def render_header(
    source_path: str,
    timestamp: BuildTimestamp,
    version: str = VERSION_LOGICIEL,
) -> str:
    """Render the header text.

    SRC_PREFIX_LENGTH is the length of *source_path* exactly as given,
    not of its resolved form.
    """
    return VERSION_HEADER.format(
        guard=INCLUDE_GUARD,
        date=timestamp.format(),
        src_prefix_length=len(source_path),
        version=version,
    )


def resolve_output_path(source_path: str, output_name: str) -> Path:
    """Resolve *output_name* relative to *source_path*.

    Raises:
        DirectoryAccessError: If *source_path* is not an enterable directory.
    """
    # Checked on the raw string: Path("") would normalise to ".".
    if not os.path.isdir(source_path) or not os.access(source_path, os.X_OK):
        raise DirectoryAccessError(source_path)
    src = Path(source_path)
    # An absolute output_name replaces src, as a relative open after chdir would.
    return src / output_name


def generate(
    source_path: str,
    output_name: str,
    timestamp: BuildTimestamp | None = None,
) -> Path:
    """Write the version header and return its path.

    Args:
        source_path: Build source root, as passed on the command line.
        output_name: Header filename, relative to *source_path*.
        timestamp: Pre-captured sample; the local clock is read once if omitted.

    Raises:
        DirectoryAccessError: If *source_path* cannot be entered.
        OutputWriteError: If the header cannot be opened or written.
    """
    out_path = resolve_output_path(source_path, output_name)
    stamp = timestamp if timestamp is not None else BuildTimestamp.capture()
    content = render_header(source_path, stamp)

    try:
        with open(out_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as exc:
        raise OutputWriteError(output_name, source_path) from exc

    return out_path
