# groupview:header:start
#
#   project      : GroupView
#   file         : __init__.py
#   file_relpath : src/groupview/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""GroupView package.

GroupView projects dataclass-based models into plain dicts and lists,
keeping only the fields whose groups intersect the active ones. One model
can then expose several views (public, private, admin, ...) without
per-view serialization code.
"""

from __future__ import annotations

from groupview.core.capabilities import SelfProjecting
from groupview.core.errors import GroupviewError, UnknownViewError, UnsupportedKeyTypeError
from groupview.core.options import Options
from groupview.core.projector import Projector, project, project_fields
from groupview.core.tags import ViewTag, viewfield

__all__: list[str] = [
    "GroupviewError",
    "Options",
    "Projector",
    "SelfProjecting",
    "UnknownViewError",
    "UnsupportedKeyTypeError",
    "ViewTag",
    "project",
    "project_fields",
    "viewfield",
]
