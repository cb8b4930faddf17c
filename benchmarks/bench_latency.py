"""Benchmark: catalog query latency (p50/p95/mean).

Measures per-call latency for list, search and info against the
built-in catalog with a default configuration.
"""
from __future__ import annotations

import json
import sys
import time
from collections.abc import Callable
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from integration_catalog.config import Config
from integration_catalog.query import QueryEngine

_WARMUP: int = 100
_ITERATIONS: int = 3_000


def _measure(operation: str, call: Callable[[], object], iterations: int) -> dict[str, object]:
    for _ in range(_WARMUP):
        call()

    latencies_ms: list[float] = []
    for _ in range(iterations):
        t0 = time.perf_counter()
        call()
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_list_latency(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark an unfiltered grouped listing.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    engine = QueryEngine(Config())
    return _measure("catalog_list_latency", engine.list, iterations)


def bench_search_latency(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark a filtered substring search."""
    engine = QueryEngine(Config())
    return _measure(
        "catalog_search_latency",
        lambda: engine.search("ai", status="available"),
        iterations,
    )


def bench_info_latency(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark a case-insensitive info lookup."""
    engine = QueryEngine(Config())
    return _measure("catalog_info_latency", lambda: engine.info("TELEGRAM"), iterations)


if __name__ == "__main__":
    results = [bench_list_latency(), bench_search_latency(), bench_info_latency()]
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
