# groupview:header:start
#
#   project      : GroupView
#   file         : options.py
#   file_relpath : src/groupview/core/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Projection options.

`Options` holds the active groups for one projection request. It is immutable
and carries no per-call state: the inherited-group bookkeeping lives on the
`groupview.core.projector.Projector` created for each top-level call, so a
single `Options` instance can be reused across calls and threads.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def split_groups(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize a group declaration into a tuple of group names.

    Strings are split on commas. Entries are stripped and empty entries dropped,
    so ``""``, ``None`` and ``()`` all mean "no groups".

    Args:
        raw: Comma-separated string, iterable of names, or None.

    Returns:
        The group names in declaration order.
    """
    if raw is None:
        return ()
    items: Iterable[str] = raw.split(",") if isinstance(raw, str) else raw
    return tuple(s for s in (item.strip() for item in items) if s)


@dataclass(frozen=True, slots=True)
class Options:
    """Active groups for a projection.

    Attributes:
        groups (tuple[str, ...]): Names of the active groups. A field is visible when it
            declares no groups or when one of its groups appears here.
    """

    groups: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (or CSV) and freeze it
        object.__setattr__(self, "groups", split_groups(self.groups))

    @classmethod
    def from_csv(cls, groups: str) -> Options:
        """Build options from a comma-separated group list (e.g. ``"public,admin"``)."""
        return cls(groups=split_groups(groups))

    def intersects(self, groups: Iterable[str]) -> bool:
        """Return True if any of ``groups`` is active."""
        active: tuple[str, ...] = self.groups
        return any(g in active for g in groups)
