"""Launcher shim so ``python -m paperplane`` runs from a source checkout."""

from __future__ import annotations

from pathlib import Path

_src_pkg = Path(__file__).resolve().parent.parent / "src" / "paperplane"
if _src_pkg.is_dir():
    __path__.append(str(_src_pkg))
