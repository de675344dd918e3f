# groupview:header:start
#
#   project      : GroupView
#   file         : model.py
#   file_relpath : src/groupview/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""View configuration model.

This module defines:
    - `ViewProfile`: the groups and root key of one named view.
    - `ViewConfig`: an immutable snapshot holding the default profile, the named
      views, and the files it was loaded from.

Sources and precedence (highest first):
    1. Environment: ``GROUPVIEW_GROUPS`` (CSV) and ``GROUPVIEW_ROOT`` override
       the default profile (named views are file-only).
    2. A config file: ``groupview.toml`` (top-level keys) or the
       ``[tool.groupview]`` table of ``pyproject.toml``.
    3. Built-in defaults: no groups, no root key.

Example ``groupview.toml``:

    ```toml
    groups = ["public"]

    [views.admin]
    groups = ["public", "admin"]
    root = "user"
    ```
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from groupview.config.io import (
    get_str_list_value,
    get_string_value,
    get_table_value,
    is_toml_table,
    load_toml_dict,
    to_toml,
)
from groupview.config.keys import Env, Toml
from groupview.config.logging import get_logger
from groupview.core.errors import UnknownViewError
from groupview.core.options import Options, split_groups

if TYPE_CHECKING:
    from groupview.config.io import TomlTable
    from groupview.config.logging import GroupviewLogger

logger: GroupviewLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ViewProfile:
    """Groups and root key used to render one view.

    Attributes:
        groups (tuple[str, ...]): Active groups.
        root (str): Root key to wrap the output under; empty for no wrapping.
    """

    groups: tuple[str, ...] = ()
    root: str = ""

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, base: ViewProfile | None = None) -> ViewProfile:
        """Build a profile from a TOML table, inheriting missing keys from ``base``."""
        fallback: ViewProfile = base or cls()
        return cls(
            groups=get_str_list_value(table, Toml.KEY_GROUPS, fallback.groups),
            root=get_string_value(table, Toml.KEY_ROOT, fallback.root),
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this profile into a TOML-serializable dict."""
        return {Toml.KEY_GROUPS: list(self.groups), Toml.KEY_ROOT: self.root}

    def options(self) -> Options:
        """Return projection options for this profile."""
        return Options(groups=self.groups)


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """Immutable GroupView configuration.

    Attributes:
        default (ViewProfile): Profile used when no view name is given.
        views (Mapping[str, ViewProfile]): Named views.
        config_files (tuple[Path, ...]): Files this configuration was read from.
    """

    default: ViewProfile = ViewProfile()
    views: Mapping[str, ViewProfile] = field(default_factory=lambda: MappingProxyType({}))
    config_files: tuple[Path, ...] = ()

    @property
    def groups(self) -> tuple[str, ...]:
        """Default active groups."""
        return self.default.groups

    @property
    def root(self) -> str:
        """Default root key."""
        return self.default.root

    @classmethod
    def from_defaults(cls) -> ViewConfig:
        """Return the built-in defaults with environment overrides applied."""
        return cls().with_env_overrides()

    @classmethod
    def from_toml_dict(
        cls,
        table: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> ViewConfig:
        """Build a configuration from a ``groupview`` table (no env overrides).

        Named views inherit the default root when they do not set their own;
        groups are never inherited.

        Args:
            table: The ``groupview.toml`` document or the ``[tool.groupview]`` table.
            config_file: Source file, recorded for provenance.

        Returns:
            The configuration snapshot.
        """
        default = ViewProfile.from_toml_dict(table)
        views: dict[str, ViewProfile] = {}
        for name, view_tbl in get_table_value(table, Toml.SECTION_VIEWS).items():
            if not is_toml_table(view_tbl):
                logger.warning("Ignoring view '%s': expected a table, got %r", name, view_tbl)
                continue
            views[name] = ViewProfile.from_toml_dict(
                view_tbl, base=ViewProfile(root=default.root)
            )
        logger.debug("Loaded %d view(s) from %s", len(views), config_file or "<dict>")
        return cls(
            default=default,
            views=MappingProxyType(views),
            config_files=(config_file,) if config_file is not None else (),
        )

    @classmethod
    def load(cls, path: Path) -> ViewConfig:
        """Load a configuration file and apply environment overrides.

        ``pyproject.toml`` files are read from their ``[tool.groupview]`` table;
        any other file is read from its top level.

        Args:
            path: Path to ``groupview.toml`` or ``pyproject.toml``.

        Returns:
            The configuration snapshot.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == Toml.FILE_PYPROJECT:
            data = _tool_table(data) or {}
        return cls.from_toml_dict(data, config_file=path).with_env_overrides()

    @classmethod
    def discover(cls, start: Path | None = None) -> ViewConfig:
        """Find the nearest configuration file walking upward from ``start``.

        In each directory ``groupview.toml`` wins over ``pyproject.toml``; a
        ``pyproject.toml`` only counts when it has a ``[tool.groupview]`` table.
        Without any file, the defaults (plus environment overrides) are returned.

        Args:
            start: Directory or file to start from; defaults to the CWD.

        Returns:
            The configuration snapshot.
        """
        path: Path | None = cls.find_config_file(start or Path.cwd())
        if path is None:
            logger.debug("No GroupView configuration found; using defaults")
            return cls.from_defaults()
        return cls.load(path)

    @staticmethod
    def find_config_file(start: Path) -> Path | None:
        """Return the nearest config file at or above ``start``, or None."""
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent
        while True:
            candidate: Path = cur / Toml.FILE_GROUPVIEW
            if candidate.is_file():
                logger.debug("Discovered config file: %s", candidate)
                return candidate
            pyproject: Path = cur / Toml.FILE_PYPROJECT
            if pyproject.is_file() and _tool_table(load_toml_dict(pyproject)) is not None:
                logger.debug("Discovered config file: %s", pyproject)
                return pyproject
            if cur.parent == cur:
                return None
            cur = cur.parent

    def with_env_overrides(self, environ: Mapping[str, str] | None = None) -> ViewConfig:
        """Return a copy whose default profile honours ``GROUPVIEW_*`` variables."""
        env: Mapping[str, str] = os.environ if environ is None else environ
        default: ViewProfile = self.default
        if Env.GROUPS in env:
            default = replace(default, groups=split_groups(env[Env.GROUPS]))
        if Env.ROOT in env:
            default = replace(default, root=env[Env.ROOT].strip())
        if default is self.default:
            return self
        logger.debug("Applied environment overrides: %s", default)
        return replace(self, default=default)

    def profile(self, view: str | None = None) -> ViewProfile:
        """Return the named profile, or the default profile when ``view`` is None.

        Raises:
            UnknownViewError: If ``view`` is not defined.
        """
        if view is None:
            return self.default
        try:
            return self.views[view]
        except KeyError:
            raise UnknownViewError(view, tuple(sorted(self.views))) from None

    def options(self, view: str | None = None) -> Options:
        """Return projection options for ``view`` (default profile when None)."""
        return self.profile(view).options()

    def root_for(self, view: str | None = None) -> str:
        """Return the root key for ``view`` (default profile when None)."""
        return self.profile(view).root

    def to_toml_dict(self) -> TomlTable:
        """Convert this configuration into a ``groupview.toml``-shaped dict."""
        out: TomlTable = self.default.to_toml_dict()
        if self.views:
            out[Toml.SECTION_VIEWS] = {
                name: profile.to_toml_dict() for name, profile in self.views.items()
            }
        return out

    def to_toml(self) -> str:
        """Render this configuration as ``groupview.toml`` text."""
        return to_toml(self.to_toml_dict())


def _tool_table(data: TomlTable) -> TomlTable | None:
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not is_toml_table(tool):
        return None
    table: Any = tool.get(Toml.SECTION_GROUPVIEW)
    return table if is_toml_table(table) else None
