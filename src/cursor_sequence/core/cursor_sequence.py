from __future__ import annotations

import copy
import operator
import sys
from collections.abc import MutableSequence
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar, overload

import numpy as np

from cursor_sequence.config.settings import DEFAULT_CONFIG, CursorSequenceConfig
from cursor_sequence.core.errors import EmptyContainerError, IndexOutOfRangeError

T = TypeVar("T")
D = TypeVar("D")

_MISSING: Any = object()


class CursorSequence(MutableSequence, Generic[T]):
    """Mutable list with a cursor that yields each element once.

    The wrapper behaves as a regular mutable sequence (indexing, slicing,
    ``append``, ``insert``, ``del`` ...) delegating straight to the backing
    ``list``. Those operations never look at nor adjust the cursor; after a
    structural edit the caller decides what the cursor should mean.

    On top of that the object is its own iterator: every step returns a copy
    of ``elements[cursor]`` and moves the cursor forward. Length is read on
    each step, so elements appended while iterating are also produced::

        work = CursorSequence.wrap([start])
        for node in work:
            work.extend(children(node))

    The cursor is never clamped. Once exhausted, every further step still
    increments it.
    """

    def __init__(
        self,
        elements: Optional[Iterable[T]] = None,
        *,
        config: Optional[CursorSequenceConfig] = None,
    ) -> None:
        if elements is None:
            elements = []
        elif isinstance(elements, CursorSequence):
            elements = list(elements.as_sequence())
        elif not isinstance(elements, list):
            elements = list(elements)

        self._elements: list[T] = elements
        self._cursor = 0
        self._config = config or DEFAULT_CONFIG
        self._copy: Callable[[T], T] = self._config.copier()

    # ------------------------------------------------------------------
    # Construction / conversion
    # ------------------------------------------------------------------
    @classmethod
    def wrap(
        cls, sequence: Iterable[T], *, config: Optional[CursorSequenceConfig] = None
    ) -> "CursorSequence[T]":
        """Adopt ``sequence`` with the cursor at zero.

        A ``list`` is adopted as-is, without copying; from then on the wrapper
        owns it. Any other iterable is materialised into a new list.
        """

        return cls(sequence, config=config)

    @classmethod
    def from_array(
        cls, array: np.ndarray, *, config: Optional[CursorSequenceConfig] = None
    ) -> "CursorSequence[Any]":
        """Wrap the elements of a NumPy array as native Python values.

        The first axis becomes the sequence; 0-d arrays have no axis to
        iterate and raise ``ValueError``.
        """

        array = np.asarray(array)
        if array.ndim == 0:
            raise ValueError("El array debe tener al menos una dimensión")
        return cls(array.tolist(), config=config)

    def unwrap(self) -> list[T]:
        """Return the backing list (the same object given to :meth:`wrap`)."""

        return self._elements

    def as_sequence(self) -> list[T]:
        """Explicit read/write access to the backing list, without copying."""

        return self._elements

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        return np.asarray(self._elements, dtype=dtype)

    @property
    def config(self) -> CursorSequenceConfig:
        return self._config

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------
    @overload
    def advance(self) -> Optional[T]: ...

    @overload
    def advance(self, default: D) -> T | D: ...

    def advance(self, default: Any = None) -> Any:
        """Produce a copy of the element under the cursor and move forward.

        Returns ``default`` when the cursor is at or past the end. The cursor
        is incremented in both cases.
        """

        index = self._cursor
        self._cursor += 1
        if index < len(self._elements):
            return self._copy(self._elements[index])
        return default

    def position(self) -> int:
        """Current cursor. Raises :class:`EmptyContainerError` if empty."""

        if not self._elements:
            raise EmptyContainerError("La secuencia contenida está vacía")
        return self._cursor

    def set_position(self, new_position: int) -> None:
        """Move the cursor to ``new_position``, which must be in ``[0, len - 1]``.

        Any integer type is accepted (``operator.index``) except ``bool``.
        """

        if isinstance(new_position, (bool, np.bool_)):
            raise TypeError("La posición debe ser un entero, no un booleano")
        new_position = operator.index(new_position)
        if not 0 <= new_position < len(self._elements):
            raise IndexOutOfRangeError(
                f"Posición {new_position} fuera de rango para una secuencia de "
                f"longitud {len(self._elements)}"
            )
        self._cursor = new_position

    def restart(self) -> None:
        """Reset the cursor so iteration starts again from index zero."""

        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Raw cursor value, including any overshoot past the end."""

        return self._cursor

    @property
    def exhausted(self) -> bool:
        return self._cursor >= len(self._elements)

    def remaining(self) -> int:
        return max(len(self._elements) - self._cursor, 0)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value = self.advance(_MISSING)
        if value is _MISSING:
            raise StopIteration
        return value

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def clone(self) -> "CursorSequence[T]":
        """Independent copy of elements (per ``copy_mode``) and cursor."""

        duplicate = type(self)(
            [self._copy(item) for item in self._elements], config=self._config
        )
        duplicate._cursor = self._cursor
        return duplicate

    def __copy__(self) -> "CursorSequence[T]":
        """New backing list and cursor; the elements themselves are shared."""

        duplicate = type(self)(list(self._elements), config=self._config)
        duplicate._cursor = self._cursor
        return duplicate

    def __deepcopy__(self, memo: dict[int, Any]) -> "CursorSequence[T]":
        duplicate = type(self)(copy.deepcopy(self._elements, memo), config=self._config)
        duplicate._cursor = self._cursor
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CursorSequence):
            return NotImplemented
        return self._cursor == other._cursor and self._elements == other._elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r}, cursor={self._cursor})"

    # ------------------------------------------------------------------
    # Sequence passthrough (cursor-agnostic)
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __setitem__(self, index, value) -> None:
        self._elements[index] = value

    def __delitem__(self, index) -> None:
        del self._elements[index]

    def __contains__(self, value: object) -> bool:
        return value in self._elements

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._elements)

    def insert(self, index: int, value: T) -> None:
        self._elements.insert(index, value)

    def append(self, value: T) -> None:
        self._elements.append(value)

    def extend(self, values: Iterable[T]) -> None:
        # Iterating a CursorSequence would consume its cursor.
        if isinstance(values, CursorSequence):
            values = list(values.as_sequence())
        self._elements.extend(values)

    def __iadd__(self, values: Iterable[T]) -> "CursorSequence[T]":
        self.extend(values)
        return self

    def pop(self, index: int = -1) -> T:
        return self._elements.pop(index)

    def remove(self, value: T) -> None:
        self._elements.remove(value)

    def clear(self) -> None:
        self._elements.clear()

    def reverse(self) -> None:
        self._elements.reverse()

    def sort(self, *, key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> None:
        self._elements.sort(key=key, reverse=reverse)

    def index(self, value: Any, start: int = 0, stop: int = sys.maxsize) -> int:
        return self._elements.index(value, start, stop)

    def count(self, value: Any) -> int:
        return self._elements.count(value)
