"""Renderer interface for comparison reports."""

from table_report import Report


class Formatter:
    """Interface report renderers implement.

    Implementations must keep the report's table, column and row order,
    mark the baseline cell distinctly, show a comparison only where a cell
    has one, and print comments verbatim next to the heading they belong to.
    """

    name = ""

    def render(self, report: Report) -> str:
        """Return the full rendered report."""
        raise NotImplementedError
