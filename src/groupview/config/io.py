# groupview:header:start
#
#   project      : GroupView
#   file         : io.py
#   file_relpath : src/groupview/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""TOML I/O and value getters for GroupView configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

The getters never raise: a missing key yields the default, and a value of the
wrong shape is logged as a warning before the default is used, so a typo in a
config file never breaks a projection.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from groupview.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from groupview.config.logging import GroupviewLogger

TomlTable = dict[str, Any]

logger: GroupviewLogger = get_logger(__name__)


# --- Type guards ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(obj, dict)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a ``list[str]`` value."""
    return isinstance(obj, list) and all(isinstance(x, str) for x in cast("list[object]", obj))


# --- Getters ---


def get_string_value(table: TomlTable, key: str, default: str = "") -> str:
    """Extract a string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (str): Default value if the key is missing or not a string.

    Returns:
        str: The string value, or ``default``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; using %r", key, value, default)
    return default


def get_str_list_value(
    table: TomlTable,
    key: str,
    default: tuple[str, ...] = (),
) -> tuple[str, ...]:
    """Extract a list of strings from a TOML table.

    A comma-separated string is accepted as a shorthand (``groups = "a,b"``).

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (tuple[str, ...]): Default when the key is missing or malformed.

    Returns:
        tuple[str, ...]: Stripped, non-empty entries, or ``default``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        value = value.split(",")
    if is_str_list(value):
        return tuple(s for s in (v.strip() for v in value) if s)
    logger.warning("Expected a list of strings for '%s', got %r; using %r", key, value, default)
    return default


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table (empty dict when missing or malformed)."""
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if is_toml_table(value):
        return value
    logger.warning("Expected a table for '%s', got %r; ignoring", key, value)
    return {}


# --- File I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``groupview.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def to_toml(toml_dict: Mapping[str, Any]) -> str:
    """Serialize a TOML mapping to a string.

    TOML has no ``null``: keys whose value is None are dropped.
    """
    cleaned: Any = _strip_none(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cleaned))


def _strip_none(value: object) -> object:
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none(v) for k, v in m.items() if v is not None}
    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return [_strip_none(v) for v in seq if v is not None]
    return value
