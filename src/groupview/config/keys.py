# groupview:header:start
#
#   project      : GroupView
#   file         : keys.py
#   file_relpath : src/groupview/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Canonical TOML section and key names for GroupView configuration.

This module defines the authoritative string constants used when reading and
writing GroupView configuration from TOML sources (``groupview.toml`` and
``[tool.groupview]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by GroupView configuration."""

    # File names
    FILE_GROUPVIEW: Final[str] = "groupview.toml"
    FILE_PYPROJECT: Final[str] = "pyproject.toml"

    # [tool.groupview] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_GROUPVIEW: Final[str] = "groupview"

    # Top-level defaults
    KEY_GROUPS: Final[str] = "groups"
    KEY_ROOT: Final[str] = "root"

    # [views.<name>] tables (each accepts KEY_GROUPS and KEY_ROOT)
    SECTION_VIEWS: Final[str] = "views"


class Env:
    """Environment variables that override file configuration."""

    GROUPS: Final[str] = "GROUPVIEW_GROUPS"
    ROOT: Final[str] = "GROUPVIEW_ROOT"
