"""Decoding of ``cargo criterion --message-format=json`` output."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator

from table_errors import RecordDecodeError
from time_units import to_nanoseconds

BENCHMARK_COMPLETE = "benchmark-complete"
GROUP_COMPLETE = "group-complete"

_WHITESPACE = " \t\r\n"


@dataclass(frozen=True)
class BenchmarkRecord:
    """A completed benchmark: its id and typical point estimate in nanoseconds."""

    id: str
    estimate_ns: float


def iter_messages(text: str) -> Iterator[Dict[str, Any]]:
    """Yield each JSON object of a whitespace separated message stream."""
    decoder = json.JSONDecoder()
    pos = 0
    end = len(text)

    while True:
        while pos < end and text[pos] in _WHITESPACE:
            pos += 1
        if pos >= end:
            return

        try:
            message, pos = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            raise RecordDecodeError(f"Invalid JSON: {e.msg}", e.pos) from e

        if not isinstance(message, dict):
            raise RecordDecodeError(
                f"Expected a JSON object, got {type(message).__name__}", pos
            )
        yield message


def _is_benchmark(message: Dict[str, Any]) -> bool:
    reason = message.get("reason")
    if reason == BENCHMARK_COMPLETE:
        return True
    if reason == GROUP_COMPLETE:
        return False
    if reason is None:
        # Messages without a reason tag are told apart by their fields
        if "id" in message:
            return True
        if "group_name" in message:
            return False
    raise RecordDecodeError(f"Unrecognized message: reason={reason!r}")


def decode_benchmark(message: Dict[str, Any]) -> BenchmarkRecord:
    """Build a :class:`BenchmarkRecord` from one benchmark message."""
    bench_id = message.get("id")
    if not isinstance(bench_id, str):
        raise RecordDecodeError("Benchmark message is missing a string 'id'")

    typical = message.get("typical")
    if not isinstance(typical, dict):
        raise RecordDecodeError(f"Benchmark '{bench_id}' is missing 'typical'")

    estimate = typical.get("estimate")
    unit = typical.get("unit")
    if isinstance(estimate, bool) or not isinstance(estimate, (int, float)):
        raise RecordDecodeError(
            f"Benchmark '{bench_id}' has a non-numeric typical estimate: {estimate!r}"
        )
    if not isinstance(unit, str):
        raise RecordDecodeError(f"Benchmark '{bench_id}' has no typical unit")

    return BenchmarkRecord(bench_id, to_nanoseconds(float(estimate), unit))


def read_records(text: str) -> Iterator[BenchmarkRecord]:
    """Yield completed benchmark records from raw criterion output.

    Group markers are skipped; records keep their order in ``text``.
    """
    for message in iter_messages(text):
        if not _is_benchmark(message):
            logging.debug(f"Skipping group message: {message.get('group_name')}")
            continue
        record = decode_benchmark(message)
        logging.debug(f"Read benchmark {record.id}: {record.estimate_ns} ns")
        yield record
