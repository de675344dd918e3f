# groupview:header:start
#
#   project      : GroupView
#   file         : test_api_convenience.py
#   file_relpath : tests/api/test_api_convenience.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Tests for the convenience entry points in `groupview.api`."""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType

import pytest

import groupview
from groupview import UnknownViewError, UnsupportedKeyTypeError, api, viewfield
from groupview.config import ViewConfig, ViewProfile


@dataclass
class Audit:
    created_by: str = "system"


@dataclass
class User:
    id: int = viewfield("id", default=1)
    email: str = viewfield("email", groups="private", default="a@b.c")
    password: str = viewfield(exclude=True, default="hunter2")
    audit: Audit = viewfield(embed=True, groups="admin", default_factory=Audit)


def test_to_encodable_without_root() -> None:
    """Empty root means no wrapping."""
    assert api.to_encodable(User(), groups="public") == {"id": 1}


def test_to_encodable_wraps_under_root() -> None:
    """A root key wraps the projection."""
    assert api.to_encodable(User(), "user", "private") == {
        "user": {"id": 1, "email": "a@b.c"}
    }


def test_to_encodable_parses_csv_groups() -> None:
    """Spaces and empty entries in the CSV are ignored."""
    assert api.to_encodable(User(), groups=" private , ,admin ") == {
        "id": 1,
        "email": "a@b.c",
        "created_by": "system",
    }


def test_to_encodable_wraps_none() -> None:
    """Wrapping is applied even to a None projection."""
    assert api.to_encodable(None, root="data") == {"data": None}


def test_to_encodable_propagates_errors() -> None:
    """Projection errors reach the caller; nothing is returned."""
    with pytest.raises(UnsupportedKeyTypeError):
        api.to_encodable({1.5: "x"}, root="data")


def test_wrap_root() -> None:
    """`wrap_root` is the identity for an empty root."""
    payload = {"a": 1}

    assert api.wrap_root(payload, "") is payload
    assert api.wrap_root(payload, "r") == {"r": payload}


def test_to_json() -> None:
    """JSON output is compact by default and honours ``indent``."""
    text = api.to_json(User(), root="user", groups="private")

    assert text == '{"user": {"id": 1, "email": "a@b.c"}}'
    assert json.loads(api.to_json(User(), indent=2)) == {"id": 1}


def test_render_uses_profile() -> None:
    """`render` picks groups and root from the configured view."""
    config = ViewConfig(
        default=ViewProfile(groups=("private",)),
        views=MappingProxyType({"admin": ViewProfile(groups=("admin",), root="user")}),
    )

    assert api.render(User(), config=config) == {"id": 1, "email": "a@b.c"}
    assert api.render(User(), config=config, view="admin") == {
        "user": {"id": 1, "created_by": "system"}
    }


def test_render_unknown_view() -> None:
    """Unknown views raise `UnknownViewError` listing the valid ones."""
    config = ViewConfig(views=MappingProxyType({"b": ViewProfile(), "a": ViewProfile()}))

    with pytest.raises(UnknownViewError) as excinfo:
        api.render(User(), config=config, view="missing")

    assert str(excinfo.value) == "Unknown view 'missing' - valid choices: a, b"
    assert excinfo.value.name == "missing"
    assert isinstance(excinfo.value, KeyError)


def test_public_exports() -> None:
    """Every name in ``__all__`` is importable from the package."""
    for name in groupview.__all__:
        assert hasattr(groupview, name), name
