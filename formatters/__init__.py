"""Report renderers selectable by name."""

from typing import Dict, Type

from formatters.base import Formatter
from formatters.gfm import GFMFormatter

FORMATTERS: Dict[str, Type[Formatter]] = {
    GFMFormatter.name: GFMFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Return a new formatter instance registered under ``name``."""
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown format '{name}'. Must be one of: {', '.join(FORMATTERS)}"
        ) from None


__all__ = ["FORMATTERS", "Formatter", "GFMFormatter", "get_formatter"]
