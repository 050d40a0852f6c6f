"""Shared test fixtures for buildstamp."""

import pytest

from buildstamp.header.timestamp import BuildTimestamp


@pytest.fixture
def src_root(tmp_path, monkeypatch):
    """An empty source tree at ./srcroot, with cwd set to its parent."""
    root = tmp_path / "srcroot"
    root.mkdir()
    monkeypatch.chdir(tmp_path)
    return root


@pytest.fixture
def fixed_stamp():
    return BuildTimestamp(
        year=2024, month=3, day=5,
        hour=7, minute=8, second=9,
        utc_offset=3600, zone="CET",
    )
