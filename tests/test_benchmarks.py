"""Structural tests for the integration-catalog benchmark module."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_latency_importable() -> None:
    """Verify bench_latency module can be imported."""
    mod = importlib.import_module("bench_latency")
    assert hasattr(mod, "bench_list_latency")
    assert hasattr(mod, "bench_search_latency")
    assert hasattr(mod, "bench_info_latency")


def test_list_latency_returns_expected_keys() -> None:
    """Verify bench_list_latency returns expected result keys."""
    from bench_latency import bench_list_latency

    result = bench_list_latency(iterations=50)
    assert result["operation"] == "catalog_list_latency"
    assert result["iterations"] == 50
    assert "p50_ms" in result
    assert "p95_ms" in result
    assert float(result["ops_per_second"]) > 0  # type: ignore[arg-type]


def test_info_latency_returns_expected_keys() -> None:
    """Verify bench_info_latency returns expected result keys."""
    from bench_latency import bench_info_latency

    result = bench_info_latency(iterations=50)
    assert "avg_latency_ms" in result
