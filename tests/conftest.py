"""
Pytest bootstrap for src/ layout.

This ensures ./src is always on sys.path for any pytest invocation, so
`import confi` works from a plain checkout without an editable install.
"""
from __future__ import annotations

import sys
from pathlib import Path

repo_root = Path(__file__).resolve().parents[1]
src = repo_root / "src"
if src.is_dir():
    src_str = str(src)
    if src_str not in sys.path:
        # Put first so local src wins over any installed package named `confi`.
        sys.path.insert(0, src_str)
