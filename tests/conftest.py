"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

import pytest

# Ensure repo root (settings.py, main.py) and this directory (builders.py) are importable
root = Path(__file__).resolve().parent.parent
for p in (root, Path(__file__).resolve().parent):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from builders import place_preview_tree, transit_lines_tree  # noqa: E402


@pytest.fixture
def transit_lines():
    return transit_lines_tree()


@pytest.fixture
def place_preview():
    return place_preview_tree()
