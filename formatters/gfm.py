"""GitHub Flavored Markdown renderer."""

from typing import List, Optional

from bench_id import BLANK_ROW
from comparison import FASTER, SLOWER, Cell, Row
from formatters.base import Formatter
from table_report import Report, Table

PROJECT_URL = "https://github.com/nu11ptr/criterion-table"

NOT_AVAILABLE = "`N/A`"


def encode_link(name: str) -> str:
    """Return the heading anchor GitHub generates for ``name``."""
    return name.lower().replace(" ", "-")


def format_cell(cell: Optional[Cell]) -> str:
    """Render one measurement with its comparison, if any."""
    if cell is None:
        return NOT_AVAILABLE

    time_text = f"`{cell.time_text}`"
    factor_text = cell.factor_text
    if factor_text is None:
        return time_text

    direction = None if cell.is_baseline else cell.comparison.direction
    # Faster = bold, slower = italics, baseline and even = plain
    if direction == FASTER:
        return f"{time_text} (✅ **{factor_text}**)"
    if direction == SLOWER:
        return f"{time_text} (❌ *{factor_text}*)"
    return f"{time_text} ({factor_text})"


def format_row_name(row: Row) -> str:
    # Only a two segment id leaves the name cell blank
    if row.name is BLANK_ROW:
        return ""
    return f"**`{row.name}`**"


class GFMFormatter(Formatter):
    """Markdown tables with a table of contents, one section per table."""

    name = "gfm"

    def render(self, report: Report) -> str:
        lines: List[str] = ["# Benchmarks", ""]

        for table in report.tables:
            comment = report.top_comments.get(table.name)
            if comment:
                lines.extend([comment, ""])

        for name in report.table_names:
            lines.append(f"- [{name}](#{encode_link(name)})")
        lines.append("")

        for table in report.tables:
            lines.extend(self.render_table(table))

        lines.append(f"Made with [criterion-table]({PROJECT_URL})")
        return "\n".join(lines) + "\n"

    def render_table(self, table: Table) -> List[str]:
        lines = [f"## {table.name}", ""]
        if table.comment:
            lines.extend([table.comment, ""])

        grid = [[""] + [f"`{column}`" for column in table.columns]]
        for row in table.rows:
            grid.append(
                [format_row_name(row)]
                + [format_cell(row.cells.get(column)) for column in table.columns]
            )

        widths = [max(len(line[idx]) for line in grid) for idx in range(len(grid[0]))]

        lines.append(self._line(grid[0], widths))
        # Everything is left justified
        lines.append("|" + "|".join(":" + "-" * (width + 1) for width in widths) + "|")
        for cells in grid[1:]:
            lines.append(self._line(cells, widths))
        lines.append("")
        return lines

    @staticmethod
    def _line(cells: List[str], widths: List[int]) -> str:
        padded = [text.ljust(width) for text, width in zip(cells, widths)]
        return "| " + " | ".join(padded) + " |"
