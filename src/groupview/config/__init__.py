# groupview:header:start
#
#   project      : GroupView
#   file         : __init__.py
#   file_relpath : src/groupview/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Configuration handling for GroupView.

Named views (groups + root key) are read from ``groupview.toml`` or the
``[tool.groupview]`` table of ``pyproject.toml`` and can be overridden from
the environment. See `groupview.config.model` for the precedence rules.
"""

from __future__ import annotations

from groupview.config.model import ViewConfig, ViewProfile

__all__: list[str] = [
    "ViewConfig",
    "ViewProfile",
]
