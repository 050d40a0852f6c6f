"""C header template for generated version stamps.

Uses str.format() with named placeholders. Line endings are LF.
"""

from __future__ import annotations

VERSION_HEADER = """\
#ifndef {guard}
#define {guard}
#define DATE "{date}"
#define SRC_PREFIX_LENGTH {src_prefix_length}
#define VERSION_LOGICIEL "{version}"
#endif
"""
