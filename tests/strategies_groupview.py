# groupview:header:start
#
#   project      : GroupView
#   file         : strategies_groupview.py
#   file_relpath : tests/strategies_groupview.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

# pyright: strict

"""Hypothesis strategies for generating annotated records and plain data.

Group names are drawn from a deliberately small pool so that generated field
groups and active groups overlap often enough to exercise both branches of
the visibility check.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, make_dataclass
from typing import Any

from hypothesis import strategies as st

from groupview import viewfield

Draw = Callable[[st.SearchStrategy[Any]], Any]

GROUP_POOL: tuple[str, ...] = ("public", "private", "admin", "audit")


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one generated record field."""

    name: str
    groups: tuple[str, ...]
    omit_empty: bool
    value: object


def s_groups() -> st.SearchStrategy[tuple[str, ...]]:
    """Zero or more distinct group names from `GROUP_POOL`."""
    return st.lists(st.sampled_from(GROUP_POOL), unique=True, max_size=len(GROUP_POOL)).map(
        tuple
    )


def s_scalar() -> st.SearchStrategy[object]:
    """Scalars that include every flavour of empty value."""
    return st.one_of(
        st.none(),
        st.booleans(),
        st.integers(min_value=-3, max_value=3),
        st.text(max_size=3),
    )


@st.composite
def s_field_specs(draw: Draw) -> list[FieldSpec]:
    """A list of field declarations with unique names ``f0``, ``f1``, ..."""
    count: int = draw(st.integers(min_value=0, max_value=6))
    return [
        FieldSpec(
            name=f"f{i}",
            groups=draw(s_groups()),
            omit_empty=draw(st.booleans()),
            value=draw(s_scalar()),
        )
        for i in range(count)
    ]


def build_record(specs: list[FieldSpec]) -> object:
    """Create a dataclass from ``specs`` and return an instance holding their values."""
    cls: type = make_dataclass(
        "Generated",
        [
            (
                spec.name,
                object,
                viewfield(spec.name, groups=spec.groups, omit_empty=spec.omit_empty, default=None),
            )
            for spec in specs
        ],
    )
    return cls(**{spec.name: spec.value for spec in specs})


def s_plain_data() -> st.SearchStrategy[object]:
    """JSON-like values: scalars, lists and string-keyed dicts."""
    leaves: st.SearchStrategy[object] = st.one_of(
        st.none(),
        st.booleans(),
        st.integers(),
        st.floats(allow_nan=False),
        st.text(max_size=5),
    )
    return st.recursive(
        leaves,
        lambda children: st.one_of(
            st.lists(children, max_size=4),
            st.dictionaries(st.text(max_size=5), children, max_size=4),
        ),
        max_leaves=20,
    )
