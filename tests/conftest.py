"""Test configuration: local imports without installing, headless plotting."""
from __future__ import annotations

import os
import sys
from pathlib import Path


def pytest_configure():
    """Put src/ on the import path and keep matplotlib off any display."""
    os.environ.setdefault("MPLBACKEND", "Agg")
    root = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(root))
