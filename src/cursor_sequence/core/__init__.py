"""Contenedor con cursor y sus errores."""

from cursor_sequence.core.cursor_sequence import CursorSequence
from cursor_sequence.core.errors import (
    CursorSequenceError,
    EmptyContainerError,
    IndexOutOfRangeError,
)

__all__ = ["CursorSequence", "CursorSequenceError", "EmptyContainerError", "IndexOutOfRangeError"]
