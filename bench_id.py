"""Parsing of hierarchical benchmark ids (``table/column[/row]``)."""

from dataclasses import dataclass
from typing import Optional

from table_errors import IdentifierFormatError

# Row key used when an id has no row segment
BLANK_ROW = None

ID_SEPARATOR = "/"


@dataclass(frozen=True)
class Identifier:
    """Location of one measurement inside the report."""

    table: str
    column: str
    row: Optional[str] = BLANK_ROW


def parse_identifier(identifier: str) -> Identifier:
    """Split ``identifier`` into table, column and optional row.

    ``"Fib/Recursive/10"`` -> ``Identifier("Fib", "Recursive", "10")``
    ``"Group/Col"``        -> ``Identifier("Group", "Col", BLANK_ROW)``

    Raises
    ------
    IdentifierFormatError
        If the id has fewer than two or more than three segments.
    """
    parts = identifier.split(ID_SEPARATOR)
    if len(parts) == 2:
        return Identifier(parts[0], parts[1])
    if len(parts) == 3:
        return Identifier(parts[0], parts[1], parts[2])
    raise IdentifierFormatError(identifier)


def table_key(name: str) -> str:
    """Return the lookup key for per-table comments (lowercase, dash separated)."""
    return name.lower().replace(" ", "-")
