"""Order-preserving aggregation of benchmark measurements into tables."""

import logging
from typing import Dict, Iterable, List, Optional

from bench_id import parse_identifier
from criterion_data import BenchmarkRecord

RowKey = Optional[str]


class TableData:
    """Measurements of one table, keyed by column then row.

    Columns and rows keep the order in which they were first seen. The first
    column ever added is the table's baseline.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.columns: Dict[str, Dict[RowKey, float]] = {}
        self.row_order: Dict[RowKey, None] = {}

    @property
    def baseline_column(self) -> Optional[str]:
        """Name of the first column added to this table."""
        return next(iter(self.columns), None)

    @property
    def column_names(self) -> List[str]:
        return list(self.columns)

    @property
    def row_keys(self) -> List[RowKey]:
        return list(self.row_order)

    def add(self, column: str, row: RowKey, measurement: float) -> None:
        """Store ``measurement`` at (column, row), replacing any earlier value."""
        cells = self.columns.setdefault(column, {})
        self.row_order.setdefault(row, None)

        if row in cells:
            logging.warning(
                f"Duplicate measurement for {self.name}/{column}/{row}: "
                f"replacing {cells[row]} with {measurement}"
            )
        cells[row] = measurement

    def get(self, column: str, row: RowKey) -> Optional[float]:
        return self.columns.get(column, {}).get(row)


class TableAggregator:
    """Fold a stream of benchmark records into ordered :class:`TableData`."""

    def __init__(self) -> None:
        self.tables: Dict[str, TableData] = {}
        self.record_count = 0

    def add(self, identifier: str, measurement: float) -> None:
        """Parse ``identifier`` and file ``measurement`` under it."""
        ident = parse_identifier(identifier)

        table = self.tables.get(ident.table)
        if table is None:
            table = TableData(ident.table)
            self.tables[ident.table] = table

        table.add(ident.column, ident.row, measurement)
        self.record_count += 1

    def add_records(self, records: Iterable[BenchmarkRecord]) -> "TableAggregator":
        """Consume every record in arrival order."""
        for record in records:
            self.add(record.id, record.estimate_ns)
        logging.info(
            f"Aggregated {self.record_count} measurements into {len(self.tables)} table(s)"
        )
        return self

    def table_list(self) -> List[TableData]:
        return list(self.tables.values())
