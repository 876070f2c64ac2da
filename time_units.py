"""Time unit conversion and display helpers."""

from typing import Dict, List, Tuple

from table_errors import RecordDecodeError

# criterion unit suffix -> nanoseconds
NANOS_PER_UNIT: Dict[str, float] = {
    "s": 1_000_000_000.0,
    "ms": 1_000_000.0,
    "us": 1_000.0,
    "ns": 1.0,
    "ps": 0.001,
}

# Largest first: (lower bound in ns, divisor, suffix)
DISPLAY_UNITS: List[Tuple[float, float, str]] = [
    (1_000_000_000.0, 1_000_000_000.0, "s"),
    (1_000_000.0, 1_000_000.0, "ms"),
    (1_000.0, 1_000.0, "us"),
]


def to_nanoseconds(value: float, unit: str) -> float:
    """Convert a criterion estimate in ``unit`` to nanoseconds."""
    try:
        return value * NANOS_PER_UNIT[unit]
    except KeyError:
        raise RecordDecodeError(f"Unrecognized time unit: {unit}") from None


def pick_unit(nanos: float) -> Tuple[float, str]:
    """Return ``(divisor, suffix)`` of the largest unit with a scaled value >= 1."""
    for lower_bound, divisor, suffix in DISPLAY_UNITS:
        if nanos >= lower_bound:
            return divisor, suffix
    return 1.0, "ns"


def format_duration(nanos: float) -> str:
    """Format a duration in nanoseconds, e.g. ``1730000`` -> ``"1.73 ms"``."""
    divisor, suffix = pick_unit(nanos)
    return f"{nanos / divisor:.2f} {suffix}"


def format_factor(factor: float) -> str:
    """Format a comparison factor, e.g. ``2.0`` -> ``"2.00x"``."""
    return f"{factor:.2f}x"
