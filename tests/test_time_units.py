import pytest

from table_errors import RecordDecodeError
from time_units import format_duration, format_factor, to_nanoseconds


@pytest.mark.parametrize(
    "nanos, expected",
    [
        (111.67, "111.67 ns"),
        (1.38, "1.38 ns"),
        (0.5, "0.50 ns"),
        (999.0, "999.00 ns"),
        (1_000.0, "1.00 us"),
        (14_010.0, "14.01 us"),
        (1_730_000.0, "1.73 ms"),
        (1_000_000_000.0, "1.00 s"),
        (125_000_000_000.0, "125.00 s"),
    ],
)
def test_format_duration_picks_largest_unit(nanos: float, expected: str) -> None:
    assert format_duration(nanos) == expected


def test_format_factor_two_decimals() -> None:
    assert format_factor(1.0) == "1.00x"
    assert format_factor(111.67 / 1.38) == "80.92x"


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        (2.0, "s", 2_000_000_000.0),
        (1.5, "ms", 1_500_000.0),
        (14.01, "us", 14_010.0),
        (111.67, "ns", 111.67),
        (500.0, "ps", 0.5),
    ],
)
def test_to_nanoseconds(value: float, unit: str, expected: float) -> None:
    assert to_nanoseconds(value, unit) == pytest.approx(expected)


def test_unknown_unit_is_a_decode_error() -> None:
    with pytest.raises(RecordDecodeError, match="Unrecognized time unit: min"):
        to_nanoseconds(1.0, "min")
