"""Loading of the optional ``tables.toml`` comments document.

Example document::

    [top_comments]
    Fibonacci = "Recursive vs iterative implementations."

    [table_comments]
    fibonacci = "Lower is better."

``top_comments`` is keyed by the exact table name, ``table_comments`` by the
lowercase, dash separated table key (see :func:`bench_id.table_key`).
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Union

from table_errors import ConfigDecodeError

DEFAULT_CONFIG_PATH = Path("tables.toml")

CONFIG_SECTIONS = ("top_comments", "table_comments")


@dataclass(frozen=True)
class TablesConfig:
    """Comment lookups. Both mappings are read-only copies."""

    top_comments: Mapping[str, str] = field(default_factory=dict)
    table_comments: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for section in CONFIG_SECTIONS:
            object.__setattr__(
                self, section, MappingProxyType(dict(getattr(self, section)))
            )


def _validate_section(data: Dict[str, Any], section: str) -> Dict[str, str]:
    value = data.get(section, {})
    if not isinstance(value, dict):
        raise ConfigDecodeError(f"'{section}' must be a table of strings")
    for key, comment in value.items():
        if not isinstance(comment, str):
            raise ConfigDecodeError(f"'{section}.{key}' must be a string")
    return dict(value)


def parse_config(text: str) -> TablesConfig:
    """Parse a comments document from TOML text."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigDecodeError(f"Invalid TOML: {e}") from e

    unknown = sorted(set(data) - set(CONFIG_SECTIONS))
    if unknown:
        logging.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    return TablesConfig(
        top_comments=_validate_section(data, "top_comments"),
        table_comments=_validate_section(data, "table_comments"),
    )


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> TablesConfig:
    """Load the comments document at ``path``.

    A missing file yields an empty config. A file that exists but cannot be
    decoded raises :class:`ConfigDecodeError`; other I/O errors propagate.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logging.info(f"No config at {path}, using no comments")
        return TablesConfig()
    except UnicodeDecodeError as e:
        raise ConfigDecodeError(f"Config {path} is not valid UTF-8: {e}") from e

    config = parse_config(text)
    logging.info(
        f"Loaded {len(config.top_comments)} top comment(s) and "
        f"{len(config.table_comments)} table comment(s) from {path}"
    )
    return config
