"""buildstamp — build-time generator for version.h stamp headers."""

__version__ = "1.0.0"
