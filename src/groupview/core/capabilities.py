# groupview:header:start
#
#   project      : GroupView
#   file         : capabilities.py
#   file_relpath : src/groupview/core/capabilities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Value capabilities consulted by the projector, in priority order.

1. Self-projection (`SelfProjecting`): the value renders itself via ``to_view(options)``.
2. Native passthrough (`is_native`): the value is handed to the downstream
   encoder untouched because its container shape would be misleading
   (``bytes`` would otherwise become a list of integers, an ``IPv4Address``
   has no useful structure, ...).
3. Structural handling, done by the projector itself.

The module also hosts the two value predicates the projector needs outside
that chain: `is_empty` (omit-on-empty) and `text_of` (text form of a native
value, shared by map key coercion and the JSON encoder).
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import decimal
import ipaddress
import uuid
from collections.abc import Sized
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from groupview.core.tags import is_record

if TYPE_CHECKING:
    from groupview.core.options import Options


@runtime_checkable
class SelfProjecting(Protocol):
    """Protocol for values that render their own view.

    The returned object is used verbatim in the output, so it should already be
    made of mappings, lists and scalars. Implementations that only want to add
    to the default rendering can call `groupview.project_fields` on themselves.
    """

    def to_view(self, options: Options) -> object:
        """Return the projected representation of ``self`` for ``options``."""
        ...


NATIVE_TYPES: Final[tuple[type, ...]] = (
    dt.date,  # also covers datetime
    dt.time,
    dt.timedelta,
    uuid.UUID,
    decimal.Decimal,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    ipaddress.IPv4Interface,
    ipaddress.IPv6Interface,
    PurePath,
    Enum,
    bytes,
    bytearray,
)


def is_self_projecting(value: object) -> bool:
    """Return True if ``value`` (not its class) implements ``to_view``."""
    return not isinstance(value, type) and isinstance(value, SelfProjecting)


def defines_str(cls: type) -> bool:
    """Return True if a non-builtin class in ``cls``'s MRO defines ``__str__``.

    Builtins (``str``, ``int``, ``dict``, ...) are ignored so that plain
    containers are never mistaken for stringifiable values.
    """
    return any(
        "__str__" in vars(klass) for klass in cls.__mro__ if klass.__module__ != "builtins"
    )


def is_native(value: object) -> bool:
    """Return True if ``value`` must reach the encoder as-is."""
    if isinstance(value, NATIVE_TYPES):
        return True
    return not isinstance(value, type) and defines_str(type(value))


def text_of(value: object) -> str:
    """Return the text form of a native value.

    Dates and times use ISO 8601, enums the text of their value, bytes are
    decoded as UTF-8 (with replacement); everything else goes through ``str()``.
    """
    if isinstance(value, Enum):
        inner: object = value.value
        return inner if isinstance(inner, str) else text_of(inner)
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def is_empty(value: object) -> bool:
    """Return True if ``value`` is the empty value for its type.

    Empty values are ``None``, ``False``, numeric zero, zero-length strings,
    bytes and containers, and records whose every field is empty.
    Other objects (dates, UUIDs, ...) are never empty.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float, complex, decimal.Decimal)):
        return value == 0
    if is_record(value):
        return all(is_empty(getattr(value, f.name)) for f in dataclasses.fields(value))
    if isinstance(value, Sized) and not isinstance(value, Enum):
        return len(value) == 0
    return False
