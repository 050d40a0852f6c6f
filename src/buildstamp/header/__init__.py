"""Header module — capture, render, write, and read version.h stamps."""

from buildstamp.header.generator import generate, render_header, resolve_output_path
from buildstamp.header.reader import read_header
from buildstamp.header.timestamp import BuildTimestamp

__all__ = [
    "BuildTimestamp",
    "generate",
    "read_header",
    "render_header",
    "resolve_output_path",
]
