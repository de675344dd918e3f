# groupview:header:start
#
#   project      : GroupView
#   file         : test_capabilities.py
#   file_relpath : tests/core/test_capabilities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Tests for value capabilities: self-projection, native passthrough, emptiness."""

from __future__ import annotations

import datetime as dt
import decimal
import ipaddress
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

from groupview import Options, SelfProjecting
from groupview.core.capabilities import defines_str, is_empty, is_native, is_self_projecting, text_of
from tests.conftest import parametrize


class Level(Enum):
    LOW = "low"
    HIGH = 10


class Version:
    """Plain class with a text form."""

    def __init__(self, major: int, minor: int) -> None:
        self.major = major
        self.minor = minor

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class TaggedList(list):  # type: ignore[type-arg]
    """List subclass defined outside builtins, without ``__str__``."""


class Viewable:
    def to_view(self, options: Options) -> object:
        return "view"


@dataclass
class Pair:
    a: int = 0
    b: str = ""


@parametrize(
    "value",
    [
        dt.datetime(2020, 1, 1),
        dt.date(2020, 1, 1),
        dt.time(12, 0),
        dt.timedelta(seconds=3),
        uuid.UUID(int=0),
        decimal.Decimal("1.5"),
        ipaddress.ip_address("10.0.0.1"),
        ipaddress.ip_network("10.0.0.0/8"),
        PurePosixPath("/tmp"),
        Level.LOW,
        b"raw",
        bytearray(b"raw"),
        Version(1, 2),
    ],
)
def test_native_values(value: object) -> None:
    """Library value types and classes with their own ``__str__`` pass through."""
    assert is_native(value)


@parametrize("value", ["text", 1, 1.5, True, [1], {"a": 1}, (1,), Pair(), TaggedList(), Version])
def test_non_native_values(value: object) -> None:
    """Builtins, containers, records and classes themselves are not native."""
    assert not is_native(value)


def test_defines_str_ignores_builtins() -> None:
    """Only non-builtin classes in the MRO count."""
    assert defines_str(Version)
    assert not defines_str(dict)
    assert not defines_str(TaggedList)


def test_self_projecting_protocol() -> None:
    """Any object with ``to_view`` qualifies; classes themselves do not."""
    assert is_self_projecting(Viewable())
    assert isinstance(Viewable(), SelfProjecting)
    assert not is_self_projecting(Viewable)
    assert not is_self_projecting(Pair())


@parametrize(
    "value, expected",
    [
        (Level.LOW, "low"),
        (Level.HIGH, "10"),
        (dt.datetime(2020, 1, 2, 3, 4, 5), "2020-01-02T03:04:05"),
        (dt.time(7, 30), "07:30:00"),
        (b"caf\xc3\xa9", "café"),
        (uuid.UUID(int=255), "00000000-0000-0000-0000-0000000000ff"),
        (Version(2, 0), "2.0"),
    ],
)
def test_text_of(value: object, expected: str) -> None:
    """Text forms: enum value, ISO 8601, UTF-8, then ``str()``."""
    assert text_of(value) == expected


@parametrize(
    "value",
    [None, False, 0, 0.0, decimal.Decimal(0), "", b"", [], {}, (), set(), Pair()],
)
def test_empty_values(value: object) -> None:
    """Zero values of every kind are empty, including an all-zero record."""
    assert is_empty(value)


@parametrize(
    "value",
    [True, 1, -0.5, "x", [None], {"a": None}, Pair(a=1), dt.date(1970, 1, 1), Level.LOW, Viewable()],
)
def test_non_empty_values(value: object) -> None:
    """Any non-zero value, and any opaque object, is non-empty."""
    assert not is_empty(value)
