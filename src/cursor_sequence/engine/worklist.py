"""Procesado de listas de trabajo sobre una :class:`CursorSequence`.

El manejador recibe cada elemento junto con la propia secuencia, de modo que
puede añadir trabajo nuevo (o retirar pendiente) mientras se recorre. Los
elementos añadidos se procesan en la misma pasada.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from cursor_sequence.core.cursor_sequence import CursorSequence
from cursor_sequence.utils.timing import timed_step

logger = logging.getLogger(__name__)

T = TypeVar("T")

WorklistHandler = Callable[[Any, CursorSequence], None]

_MISSING: Any = object()


@dataclass
class WorklistResult:
    """Resumen de una ejecución de :func:`run_worklist`.

    Attributes:
        processed: Elementos entregados al manejador.
        final_length: Longitud de la secuencia al terminar.
        exhausted: ``False`` si la ejecución se cortó por ``max_steps``
            quedando elementos pendientes.
        timings: Segundos por fase (``total`` y ``handler`` acumulado).
    """

    processed: int
    final_length: int
    exhausted: bool
    timings: Dict[str, float] = field(default_factory=dict)


def run_worklist(
    items: CursorSequence[T],
    handler: WorklistHandler,
    *,
    restart: bool = False,
    max_steps: Optional[int] = None,
) -> WorklistResult:
    """Despacha los elementos pendientes de ``items`` hasta agotarla.

    - ``restart``: reinicia el cursor antes de empezar.
    - ``max_steps``: límite de elementos procesados; evita bucles infinitos
      cuando el manejador siempre añade trabajo.

    Al agotarse, el cursor queda una posición más allá del final, igual que
    tras un ``for`` sobre la secuencia.
    """

    if max_steps is not None and max_steps < 1:
        raise ValueError(f"max_steps debe ser positivo, recibido {max_steps}")

    if restart:
        items.restart()

    timings: Dict[str, float] = {}
    processed = 0
    exhausted = True

    logger.debug(
        "Iniciando worklist: longitud=%d cursor=%d max_steps=%s",
        len(items),
        items.cursor,
        max_steps,
    )

    with timed_step(timings, "total"):
        while True:
            if max_steps is not None and processed >= max_steps:
                exhausted = items.exhausted
                if not exhausted:
                    logger.warning(
                        "Worklist detenida tras %d pasos con %d elementos pendientes",
                        processed,
                        items.remaining(),
                    )
                break

            item = items.advance(_MISSING)
            if item is _MISSING:
                break

            with timed_step(timings, "handler", accumulate=True):
                handler(item, items)
            processed += 1

    logger.debug("Worklist finalizada: procesados=%d longitud=%d", processed, len(items))
    return WorklistResult(
        processed=processed,
        final_length=len(items),
        exhausted=exhausted,
        timings=timings,
    )
