"""Benchmark runner for cursor sequence workloads.

Builds synthetic integer data with NumPy, drives a few representative
workloads (plain single pass per copy mode, a growing worklist) and records
timing and peak memory with ``time.perf_counter`` and ``tracemalloc``.
Results land under ``bench/results``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
import tracemalloc
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Dict, List

import numpy as np

# Allow running from repo root without installing as a package
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.append(str(REPO_ROOT / "src"))

from cursor_sequence import CursorSequence, CursorSequenceConfig, run_worklist  # noqa: E402

logger = logging.getLogger("bench")


@dataclass
class BenchmarkResult:
    name: str
    seconds: float
    peak_mb: float
    notes: str

    def to_dict(self) -> Dict[str, float | str]:
        data = asdict(self)
        data["seconds"] = round(self.seconds, 4)
        data["peak_mb"] = round(self.peak_mb, 2)
        return data


def synthetic_values(n: int, seed: int = 42) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 1_000, size=n)


def _benchmark(name: str, func: Callable[[], object], warmup: int = 1, notes: str = "") -> BenchmarkResult:
    for _ in range(max(0, warmup)):
        func()

    tracemalloc.start()
    start = time.perf_counter()
    func()
    elapsed = time.perf_counter() - start
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    peak_mb = peak / (1024 * 1024)
    return BenchmarkResult(name=name, seconds=elapsed, peak_mb=peak_mb, notes=notes)


def run_benchmarks(size: int) -> List[BenchmarkResult]:
    data = synthetic_values(size)
    results: List[BenchmarkResult] = []

    for mode in ("deep", "shallow", "none"):
        items = CursorSequence.from_array(data, config=CursorSequenceConfig(copy_mode=mode))

        def _single_pass(items: CursorSequence[int] = items) -> None:
            items.restart()
            for _ in items:
                pass

        results.append(
            _benchmark(f"single_pass_{mode}", _single_pass, notes=f"for-loop over {size} items, copy_mode={mode}")
        )

    def _worklist() -> None:
        # Cada valor par genera un hijo hasta alcanzar el doble de elementos
        items = CursorSequence.from_array(data)
        limit = 2 * size

        def handler(value: int, work: CursorSequence[int]) -> None:
            if value % 2 == 0 and len(work) < limit:
                work.append(value // 2)

        run_worklist(items, handler)

    results.append(_benchmark("worklist_growth", _worklist, notes="Handler appends while iterating"))
    return results


def _write_outputs(results: List[BenchmarkResult], size: int, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    payload = {
        "size": size,
        "python": sys.version.split()[0],
        "results": [r.to_dict() for r in results],
    }

    json_path = output_dir / "benchmark_results.json"
    with json_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    logger.info("Wrote %s", json_path)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark cursor sequence workloads")
    parser.add_argument("--size", type=int, default=200_000, help="Number of synthetic elements")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("bench/results"),
        help="Directory to write benchmark artifacts",
    )
    return parser.parse_args()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    args = parse_args()
    bench_results = run_benchmarks(size=args.size)
    _write_outputs(bench_results, size=args.size, output_dir=args.output_dir)
    for result in bench_results:
        logger.info(
            "%s: %.4fs, peak %.2f MB (%s)", result.name, result.seconds, result.peak_mb, result.notes
        )
