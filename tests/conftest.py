"""
Pytest bootstrap for src/ layout.

Makes ``import wilson`` resolve to ./src/wilson without an editable install,
including for tests that spawn a fresh interpreter.
"""
from __future__ import annotations

import sys
from pathlib import Path

repo_root = Path(__file__).resolve().parents[1]
src = repo_root / "src"
if src.is_dir():
    src_str = str(src)
    if src_str not in sys.path:
        # Put first so local src wins over any installed copy of `wilson`.
        sys.path.insert(0, src_str)
