from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timed_step(timings: Dict[str, float], key: str, accumulate: bool = False) -> Iterator[None]:
    """Mide el bloque y guarda los segundos en ``timings[key]``.

    Con ``accumulate=True`` suma al valor previo, útil cuando la misma fase
    se repite dentro de un bucle.
    """

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if accumulate:
            timings[key] = timings.get(key, 0.0) + elapsed
        else:
            timings[key] = elapsed
