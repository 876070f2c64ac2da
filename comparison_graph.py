"""Bar chart export of comparison reports."""

import logging
from pathlib import Path
from typing import List, Optional, Set, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from bench_id import BLANK_ROW, table_key  # noqa: E402
from table_report import Report, Table  # noqa: E402
from time_units import pick_unit  # noqa: E402


def _row_label(name: Optional[str]) -> str:
    if name is BLANK_ROW:
        return "(all)"
    return name or '""'


def generate_table_graph(table: Table, graph_path: Path) -> str:
    """Write a grouped bar chart of ``table`` to ``graph_path`` and return it.

    One bar series per column, one group per row. Bars above non-baseline
    cells are labelled with their comparison factor.
    """
    measurements = [
        cell.measurement for row in table.rows for cell in row.cells.values()
    ]

    # Scale every bar by the unit that fits the largest value
    divisor, suffix = pick_unit(max(measurements))

    labels = [_row_label(row.name) for row in table.rows]
    x = np.arange(len(labels))
    width = 0.8 / len(table.columns)

    _, ax = plt.subplots(figsize=(max(8, 2 * len(labels)), 6))

    for idx, column in enumerate(table.columns):
        values = []
        annotations = []
        for row in table.rows:
            cell = row.cells.get(column)
            values.append(cell.measurement / divisor if cell else 0.0)
            annotations.append(
                str(cell.comparison) if cell and cell.comparison else ""
            )

        offset = (idx - (len(table.columns) - 1) / 2) * width
        bars = ax.bar(
            x + offset,
            values,
            width,
            label=f"{column} (baseline)" if idx == 0 else column,
            alpha=0.8,
        )

        for bar, text in zip(bars, annotations):
            if text:
                ax.text(
                    bar.get_x() + bar.get_width() / 2.0,
                    bar.get_height(),
                    text,
                    ha="center",
                    va="bottom",
                    fontsize=8,
                )

    ax.set_xlabel("Row")
    ax.set_ylabel(f"Time ({suffix})")
    ax.set_title(f"{table.name} (baseline: {table.baseline_column})")
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)

    plt.tight_layout()

    plt.savefig(graph_path, dpi=150, bbox_inches="tight")
    plt.close()

    logging.info(f"Comparison graph for '{table.name}' saved to: {graph_path}")
    return str(graph_path)


def generate_comparison_graphs(
    report: Report, output_dir: Union[str, Path] = "."
) -> List[str]:
    """Write one chart per table of ``report`` into ``output_dir``.

    Returns the list of generated file paths.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    generated_files = []
    used: Set[str] = set()
    for table in report.tables:
        stem = table_key(table.name)
        unique, n = stem, 1
        while unique in used:
            n += 1
            unique = f"{stem}-{n}"
        if unique != stem:
            logging.warning(
                f"Graph name '{stem}' already used, "
                f"writing '{table.name}' as '{unique}'"
            )
        used.add(unique)
        generated_files.append(
            generate_table_graph(table, output_path / f"{unique}.png")
        )
    return generated_files
