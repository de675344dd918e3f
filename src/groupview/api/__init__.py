# groupview:header:start
#
#   project      : GroupView
#   file         : __init__.py
#   file_relpath : src/groupview/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Convenience entry points built on `groupview.project`.

These helpers take groups as a comma-separated string, optionally wrap the
projection under a root key, and optionally encode it to JSON:

```python
from groupview import api

api.to_encodable(user, root="user", groups="public")
# {"user": {"id": 7, "name": "Ada"}}

api.render(user, config=ViewConfig.discover(), view="admin")
```

Errors from the projection (e.g. `groupview.core.errors.UnsupportedKeyTypeError`)
propagate to the caller; nothing here terminates the process.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from groupview.config.logging import get_logger
from groupview.core.encoding import serialize_json
from groupview.core.options import Options
from groupview.core.projector import project

if TYPE_CHECKING:
    from groupview.config.logging import GroupviewLogger
    from groupview.config.model import ViewConfig

logger: GroupviewLogger = get_logger(__name__)

__all__: list[str] = [
    "render",
    "to_encodable",
    "to_json",
    "wrap_root",
]


def wrap_root(projected: object, root: str) -> object:
    """Wrap ``projected`` as ``{root: projected}``, or return it as-is when ``root`` is empty."""
    if not root:
        return projected
    return {root: projected}


def to_encodable(value: object, root: str = "", groups: str = "") -> object:
    """Project ``value`` for a comma-separated group list and wrap it under ``root``.

    Args:
        value: The value to project.
        root: Key to wrap the result under; empty for no wrapping.
        groups: Active groups, comma-separated (e.g. ``"public,admin"``).

    Returns:
        The projected value, wrapped as ``{root: ...}`` when ``root`` is set.

    Raises:
        UnsupportedKeyTypeError: If a mapping key cannot be coerced to a string.
    """
    options: Options = Options.from_csv(groups)
    logger.debug("Projecting %s for groups %s", type(value).__name__, options.groups)
    return wrap_root(project(options, value), root)


def to_json(
    value: object,
    *,
    root: str = "",
    groups: str = "",
    indent: int | None = None,
) -> str:
    """Project ``value`` like `to_encodable` and encode the result as JSON.

    Args:
        value: The value to project.
        root: Key to wrap the result under; empty for no wrapping.
        groups: Active groups, comma-separated.
        indent: JSON indentation; None for compact output.

    Returns:
        JSON text without a trailing newline.
    """
    return serialize_json(to_encodable(value, root=root, groups=groups), indent=indent)


def render(value: object, *, config: ViewConfig, view: str | None = None) -> object:
    """Project ``value`` using the groups and root key of a configured view.

    Args:
        value: The value to project.
        config: Loaded configuration.
        view: Named view; None selects the default profile.

    Returns:
        The projected (and possibly root-wrapped) value.

    Raises:
        UnknownViewError: If ``view`` is not defined in ``config``.
    """
    profile = config.profile(view)
    logger.debug("Rendering view %s with groups %s", view or "<default>", profile.groups)
    return wrap_root(project(profile.options(), value), profile.root)
