"""Parse generated version.h files."""

import re
from pathlib import Path

from buildstamp.config import INCLUDE_GUARD

_DEFINE_RE = re.compile(r'^#define\s+(\w+)(?:\s+(.*))?$')


def read_header(path: Path | str) -> dict:
    """Read a generated header and return its defines.

    Args:
        path: Path to the header file.

    Returns:
        Dict mapping define names to values. String literals are unquoted,
        SRC_PREFIX_LENGTH is an int.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the include guard is missing or unbalanced, or a
            define appears more than once.
    """
    header_path = Path(path)
    lines = header_path.read_text(encoding="utf-8").splitlines()

    if (
        len(lines) < 3
        or lines[0] != f"#ifndef {INCLUDE_GUARD}"
        or lines[1] != f"#define {INCLUDE_GUARD}"
        or lines[-1] != "#endif"
    ):
        raise ValueError(f"{header_path} is not wrapped in a {INCLUDE_GUARD} include guard")

    defines: dict = {}
    for line in lines[2:-1]:
        m = _DEFINE_RE.match(line)
        if not m:
            continue
        name, raw = m.group(1), (m.group(2) or "").strip()
        if name in defines:
            raise ValueError(f"{header_path} defines {name} more than once")
        if raw.startswith('"') and raw.endswith('"') and len(raw) >= 2:
            defines[name] = raw[1:-1]
        elif raw.isdigit():
            defines[name] = int(raw)
        else:
            defines[name] = raw

    return defines
