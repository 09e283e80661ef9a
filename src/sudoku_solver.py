"""Import facade for the hybrid Sudoku solver living under ``puzzles/sudoku-9x9``."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType

_TARGET_MODULE = "puzzle_sudoku_9x9_solver_hybrid"
_TARGET_PATH = (
    Path(__file__).resolve().parent
    / "puzzles"
    / "sudoku-9x9"
    / "solver"
    / "hybrid"
    / "__init__.py"
)


def _load_target() -> ModuleType:
    cached = sys.modules.get(_TARGET_MODULE)
    if cached is not None:
        return cached

    spec = importlib.util.spec_from_file_location(_TARGET_MODULE, _TARGET_PATH)
    if spec is None or spec.loader is None:  # pragma: no cover - defensive guard
        raise ImportError(f"Unable to load hybrid solver from '{_TARGET_PATH}'")

    module = importlib.util.module_from_spec(spec)
    sys.modules[_TARGET_MODULE] = module
    spec.loader.exec_module(module)
    return module


_module = _load_target()

globals().update({name: getattr(_module, name) for name in _module.__all__})

__all__ = list(_module.__all__)
