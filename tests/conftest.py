"""Shared fixtures for revision code tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers that setup_logging() attached during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
    root.setLevel(level)


@pytest.fixture
def pi3b_code():
    """Pi 3B rev 1.2, 1GB, Sony UK."""
    return 0x00A02082


@pytest.fixture
def cpuinfo_file(tmp_path):
    """Write a cpuinfo file, optionally with a Revision line, and return its path."""
    def _make(revision=None):
        lines = [
            "processor\t: 0",
            "model name\t: ARMv7 Processor rev 4 (v7l)",
            "",
            "Hardware\t: BCM2835",
        ]
        if revision is not None:
            lines.append(f"Revision\t: {revision}")
        lines.append("Serial\t\t: 00000000deadbeef")
        p = tmp_path / "cpuinfo"
        p.write_text("\n".join(lines) + "\n")
        return p
    return _make
