"""Ensure the project root is on sys.path and provide criterion input helpers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def benchmark_message(bench_id: str, estimate: float, unit: str = "ns") -> dict:
    interval = {
        "estimate": estimate,
        "lower_bound": estimate * 0.99,
        "upper_bound": estimate * 1.01,
        "unit": unit,
    }
    return {
        "reason": "benchmark-complete",
        "id": bench_id,
        "report_directory": f"target/criterion/reports/{bench_id}",
        "iteration_count": [10, 20, 30],
        "measured_values": [estimate * 10, estimate * 20, estimate * 30],
        "unit": unit,
        "throughput": [],
        "typical": interval,
        "mean": interval,
        "median": interval,
        "median_abs_dev": interval,
        "slope": interval,
        "change": None,
    }


def group_message(group_name: str, benchmarks: Iterable[str]) -> dict:
    return {
        "reason": "group-complete",
        "group_name": group_name,
        "benchmarks": list(benchmarks),
        "report_directory": f"target/criterion/reports/{group_name}",
    }


@pytest.fixture
def criterion_stream() -> Callable[..., str]:
    """Build cargo-criterion output from ``(id, estimate_ns)`` pairs.

    A group-complete marker is appended after the benchmarks.
    """

    def build(measurements: Iterable[Tuple[str, float]], group: str = "Fib") -> str:
        measurements = list(measurements)
        messages = [benchmark_message(bench_id, value) for bench_id, value in measurements]
        messages.append(group_message(group, [bench_id for bench_id, _ in measurements]))
        return "\n".join(json.dumps(message) for message in messages) + "\n"

    return build
