from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Permite importar cursor_sequence sin instalación previa
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cursor_sequence import CursorSequence  # noqa: E402


@pytest.fixture()
def three_items() -> CursorSequence[int]:
    return CursorSequence.wrap([10, 20, 30])


@pytest.fixture()
def empty_items() -> CursorSequence[int]:
    return CursorSequence.wrap([])
