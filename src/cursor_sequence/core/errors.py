"""Errores del contenedor con cursor.

Ambos representan un uso incorrecto por parte del llamador (precondición
incumplida), no un fallo del entorno: se lanzan al momento y nunca se
capturan dentro del paquete.
"""

from __future__ import annotations


class CursorSequenceError(Exception):
    """Base de los errores de :class:`CursorSequence`."""


class EmptyContainerError(CursorSequenceError, LookupError):
    """Se consultó la posición del cursor sobre una secuencia vacía."""


class IndexOutOfRangeError(CursorSequenceError, IndexError):
    """Se intentó colocar el cursor fuera de ``[0, len - 1]``."""
