"""Assembly of compared tables and comments into a :class:`Report`."""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from bench_id import table_key
from comparison import Row, compare_table
from criterion_data import BenchmarkRecord
from table_data import TableAggregator, TableData
from tables_config import TablesConfig


@dataclass(frozen=True)
class Table:
    name: str
    comment: Optional[str]
    columns: Tuple[str, ...]
    rows: Tuple[Row, ...]

    @property
    def baseline_column(self) -> Optional[str]:
        return self.columns[0] if self.columns else None


@dataclass(frozen=True)
class Report:
    top_comments: Mapping[str, str]
    tables: Tuple[Table, ...]

    def __post_init__(self):
        object.__setattr__(
            self, "top_comments", MappingProxyType(dict(self.top_comments))
        )

    @property
    def table_names(self) -> List[str]:
        return [table.name for table in self.tables]


def build_report(
    tables: Iterable[TableData], config: Optional[TablesConfig] = None
) -> Report:
    """Compare every aggregated table and attach comments from ``config``.

    Parameters
    ----------
    tables : iterable of TableData
        Fully aggregated tables, in report order.
    config : TablesConfig, optional
        Comment lookups. ``None`` behaves like an empty config.
    """
    config = config or TablesConfig()

    top_comments: Dict[str, str] = {}
    report_tables = []
    for data in tables:
        if data.name in config.top_comments:
            top_comments[data.name] = config.top_comments[data.name]

        report_tables.append(
            Table(
                name=data.name,
                comment=config.table_comments.get(table_key(data.name)),
                columns=tuple(data.column_names),
                rows=tuple(compare_table(data)),
            )
        )

    for name in config.top_comments:
        if name not in top_comments:
            logging.warning(f"Top comment for unknown table '{name}' ignored")

    return Report(top_comments=top_comments, tables=tuple(report_tables))


def make_report(
    records: Iterable[BenchmarkRecord], config: Optional[TablesConfig] = None
) -> Report:
    """Aggregate ``records`` then compare and assemble them into a report."""
    aggregator = TableAggregator().add_records(records)
    return build_report(aggregator.table_list(), config)
