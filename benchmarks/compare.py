"""Comparison visualiser for integration-catalog benchmark results."""
from __future__ import annotations

import json
from pathlib import Path


def _load(path: Path) -> list[dict[str, object]] | None:
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)  # type: ignore[no-any-return]


def main() -> None:
    results_dir = Path(__file__).parent / "results"

    print(f"\n{'=' * 80}")
    print("  integration-catalog Benchmark Results")
    print(f"{'=' * 80}")
    print(f"{'Operation':<40} {'Ops/sec':>12} {'p50':>12} {'p95':>12}")
    print("-" * 80)

    data = _load(results_dir / "latency_baseline.json")
    if data is None:
        print("  (no results for latency_baseline.json — run benchmark first)")
    else:
        for row in data:
            operation = str(row.get("operation", "?"))
            ops_sec = float(row.get("ops_per_second", 0))  # type: ignore[arg-type]
            p50 = float(row.get("p50_ms", 0))  # type: ignore[arg-type]
            p95 = float(row.get("p95_ms", 0))  # type: ignore[arg-type]
            ops_str = f"{ops_sec:,.0f}" if ops_sec > 0 else "n/a"
            print(f"{operation:<40} {ops_str:>12} {p50:>10.4f}ms {p95:>10.4f}ms")

    print(f"{'=' * 80}")
    print("  Run the benchmark:")
    print("    python benchmarks/bench_latency.py")
    print(f"{'=' * 80}")


if __name__ == "__main__":
    main()
