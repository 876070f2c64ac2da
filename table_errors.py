"""Error types raised while building benchmark comparison tables."""

from typing import Optional


class CriterionTableError(Exception):
    """Base class for every error that aborts a report run."""


class IdentifierFormatError(CriterionTableError):
    """Benchmark id does not split into ``table/column[/row]``."""

    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"Malformed benchmark id '{identifier}': expected 'table/column' or 'table/column/row'"
        )
        self.identifier = identifier


class RecordDecodeError(CriterionTableError):
    """Input record could not be decoded.

    Attributes
    ----------
    offset : int | None
        Offset into the input where decoding failed, when known. Characters
        for JSON errors, bytes for text that is not valid UTF-8.
    """

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class ConfigDecodeError(CriterionTableError):
    """Comments configuration document is malformed."""
