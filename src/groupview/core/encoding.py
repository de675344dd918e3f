# groupview:header:start
#
#   project      : GroupView
#   file         : encoding.py
#   file_relpath : src/groupview/core/encoding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

r"""JSON/NDJSON serialization of projected values.

The projector leaves native passthrough values (dates, UUIDs, enums, bytes,
stringifiable objects) untouched; this module teaches `json` how to render
them through the `encode_native` ``default=`` hook.

Conventions:
- `serialize_json()` does not append a trailing newline.
- `serialize_ndjson()` returns a string that *does* end with a final `\\n`,
  which is convenient for printing and piping.
"""

from __future__ import annotations

import base64
import json
from enum import Enum
from typing import TYPE_CHECKING

from groupview.core.capabilities import is_native, text_of

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def encode_native(obj: object) -> object:
    """``json`` ``default=`` hook for native passthrough values.

    Args:
        obj: A value `json` cannot encode by itself.

    Returns:
        A JSON-encodable replacement: enum values, base64 text for bytes,
        ISO 8601 for dates and times, ``str()`` for other native values.

    Raises:
        TypeError: If ``obj`` is not a native passthrough value.
    """
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if is_native(obj):
        return text_of(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize_json(obj: object, *, indent: int | None = 2) -> str:
    """Serialize a projected value to JSON (no trailing newline).

    Args:
        obj: Output of `groupview.project` (or `groupview.api.to_encodable`).
        indent: Indentation width; None for compact output.

    Returns:
        The JSON text.
    """
    return json.dumps(obj, indent=indent, default=encode_native)


def iter_ndjson_strings(objs: Iterable[object]) -> Iterator[str]:
    """Serialize projected values into per-line JSON strings.

    Args:
        objs: Projected values.

    Yields:
        One compact JSON string per value (no trailing newline).
    """
    for obj in objs:
        yield json.dumps(obj, default=encode_native)


def serialize_ndjson(objs: Iterable[object]) -> str:
    """Serialize projected values into a newline-delimited string.

    Args:
        objs: Projected values.

    Returns:
        One JSON document per line, ending with a trailing newline.
    """
    return "\n".join(iter_ndjson_strings(objs)) + "\n"
