"""Comparison of every measurement in a row against the table baseline."""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from table_data import RowKey, TableData
from time_units import format_duration, format_factor

FASTER = "faster"
SLOWER = "slower"


@dataclass(frozen=True)
class Comparison:
    """Relative speed of a measurement versus its row baseline.

    ``factor`` is always >= 1: how many times faster or slower the
    measurement is. ``faster`` is False both for slower and for equal
    measurements; use :attr:`direction` to tell those apart.
    """

    factor: float
    faster: bool

    @property
    def direction(self) -> Optional[str]:
        if self.faster:
            return FASTER
        if self.factor > 1.0:
            return SLOWER
        return None

    def __str__(self) -> str:
        text = format_factor(self.factor)
        if self.direction:
            text = f"{text} {self.direction}"
        return text


BASELINE_COMPARISON = Comparison(1.0, False)


@dataclass(frozen=True)
class Cell:
    measurement: float
    is_baseline: bool = False
    comparison: Optional[Comparison] = None

    @property
    def time_text(self) -> str:
        return format_duration(self.measurement)

    @property
    def factor_text(self) -> Optional[str]:
        """``"1.00x"`` for the baseline, the comparison text, or None."""
        if self.is_baseline:
            return str(BASELINE_COMPARISON)
        if self.comparison is not None:
            return str(self.comparison)
        return None


@dataclass(frozen=True)
class Row:
    """Compared cells of one row keyed by column. ``cells`` is read-only."""

    name: RowKey
    cells: Mapping[str, Cell]

    def __post_init__(self):
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    @property
    def has_baseline(self) -> bool:
        return any(cell.is_baseline for cell in self.cells.values())


def compare(measurement: float, baseline: float) -> Comparison:
    """Compare ``measurement`` to ``baseline`` (both durations, smaller is faster)."""
    if measurement == baseline:
        return Comparison(1.0, False)
    if measurement < baseline:
        factor = baseline / measurement if measurement else math.inf
        return Comparison(factor, True)
    factor = measurement / baseline if baseline else math.inf
    return Comparison(factor, False)


def compare_row(table: TableData, row: RowKey) -> Row:
    """Build the cells of ``row`` with comparisons against the baseline column."""
    baseline_column = table.baseline_column
    baseline = table.get(baseline_column, row) if baseline_column else None

    cells: Dict[str, Cell] = {}
    for column in table.column_names:
        measurement = table.get(column, row)
        if measurement is None:
            continue
        if baseline is None:
            cells[column] = Cell(measurement)
        elif column == baseline_column:
            cells[column] = Cell(measurement, is_baseline=True)
        else:
            cells[column] = Cell(measurement, comparison=compare(measurement, baseline))

    return Row(row, cells)


def compare_table(table: TableData) -> List[Row]:
    """Compare every row of a fully aggregated table, in row order."""
    return [compare_row(table, row) for row in table.row_keys]
