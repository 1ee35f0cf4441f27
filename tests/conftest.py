"""Shared test fixtures."""

from pathlib import Path

import pytest

from scan_helpers import make_file


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """root{A: 3_000_000 file, B{C: 1_000_000 file}}"""
    root = tmp_path / "root"
    root.mkdir()
    make_file(root / "A", 3_000_000)
    make_file(root / "B" / "C", 1_000_000)
    return root
