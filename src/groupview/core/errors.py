# groupview:header:start
#
#   project      : GroupView
#   file         : errors.py
#   file_relpath : src/groupview/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Exceptions raised by GroupView.

Usage:
    Catch `GroupviewError` to handle every failure the library itself raises.
    Errors raised by a value's own ``to_view()`` hook are *not* wrapped; they
    reach the caller of `groupview.project` unchanged.
"""

from __future__ import annotations


class GroupviewError(Exception):
    """Base class for all GroupView errors."""


class UnsupportedKeyTypeError(GroupviewError, TypeError):
    """A mapping key cannot be coerced to a string.

    Keys must be strings, text-capable values (enums, UUIDs, dates, ...) or
    integers. Anything else aborts the projection.

    Attributes:
        kind: Name of the offending key's type.
        value: The raw key.
    """

    def __init__(self, kind: str, value: object) -> None:
        super().__init__(f"groupview: unable to project mapping key of type {kind}: {value!r}")
        self.kind: str = kind
        self.value: object = value


class UnknownViewError(GroupviewError, KeyError):
    """A named view was requested that the configuration does not define."""

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        choices: str = ", ".join(known) if known else "<none>"
        super().__init__(f"Unknown view '{name}' - valid choices: {choices}")
        self.name: str = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
