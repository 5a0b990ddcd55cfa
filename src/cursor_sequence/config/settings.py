"""Configuration dataclasses for cursor sequences."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Literal, get_args

CopyMode = Literal["deep", "shallow", "none"]

_COPIERS: dict[str, Callable[[Any], Any]] = {
    "deep": copy.deepcopy,
    "shallow": copy.copy,
    "none": lambda value: value,
}


@dataclass(frozen=True)
class CursorSequenceConfig:
    """Element duplication settings for a :class:`CursorSequence`.

    Attributes
    ----------
    copy_mode : Literal["deep", "shallow", "none"]
        How produced and cloned elements are duplicated. ``"deep"`` uses
        :func:`copy.deepcopy`, so a produced value never shares state with the
        container. ``"shallow"`` uses :func:`copy.copy`. ``"none"`` hands out
        the stored object itself; mutating it then mutates the container.
    """

    copy_mode: CopyMode = "deep"

    def __post_init__(self) -> None:
        if self.copy_mode not in get_args(CopyMode):
            raise ValueError(
                f"copy_mode must be one of {get_args(CopyMode)}, got {self.copy_mode!r}"
            )

    def copier(self) -> Callable[[Any], Any]:
        """Return the callable used to duplicate a single element."""

        return _COPIERS[self.copy_mode]


DEFAULT_CONFIG = CursorSequenceConfig()
