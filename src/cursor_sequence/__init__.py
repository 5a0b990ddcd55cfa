"""Mutable list wrapper with a single-pass, restartable cursor."""

from cursor_sequence.config.settings import CursorSequenceConfig
from cursor_sequence.core.cursor_sequence import CursorSequence
from cursor_sequence.core.errors import (
    CursorSequenceError,
    EmptyContainerError,
    IndexOutOfRangeError,
)
from cursor_sequence.engine.worklist import WorklistResult, run_worklist

__all__ = [
    "CursorSequence",
    "CursorSequenceConfig",
    "CursorSequenceError",
    "EmptyContainerError",
    "IndexOutOfRangeError",
    "WorklistResult",
    "run_worklist",
]
