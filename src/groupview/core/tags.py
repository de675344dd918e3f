# groupview:header:start
#
#   project      : GroupView
#   file         : tags.py
#   file_relpath : src/groupview/core/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Field annotations and the per-class field descriptor table.

A record is a dataclass instance. Each of its fields may be annotated through
``dataclasses.field(metadata=...)`` in one of two ways:

- the `viewfield` helper, which stores a `ViewTag` under ``METADATA_KEY``:

    ```python
    @dataclass
    class User:
        id: int = viewfield("id")
        email: str = viewfield("email", groups="private,admin", omit_empty=True)
        password: str = viewfield(exclude=True)
        audit: Audit = viewfield(embed=True, groups="admin")
    ```

- terse string tags under the ``"name"`` and ``"groups"`` metadata keys:

    ```python
    email: str = field(default="", metadata={"name": "email,omitempty", "groups": "private"})
    ```

  The name tag holds ``"<external>[,omitempty]"``; an external name of ``"-"``
  excludes the field. An empty external name keeps the declared name.

`describe_fields` turns a record class into a tuple of `FieldDescriptor`
objects, computed once per class and cached.
"""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Final

from groupview.core.options import split_groups

METADATA_KEY: Final[str] = "groupview"
NAME_TAG_KEY: Final[str] = "name"
GROUPS_TAG_KEY: Final[str] = "groups"

EXCLUDE_MARKER: Final[str] = "-"
OMIT_EMPTY_OPTION: Final[str] = "omitempty"


@dataclass(frozen=True, slots=True)
class ViewTag:
    """Annotation attached to a dataclass field.

    Attributes:
        name (str | None): External name; None keeps the declared attribute name.
        groups (tuple[str, ...]): Groups the field belongs to; empty means always visible.
        omit_empty (bool): Skip the field when its value is empty.
        exclude (bool): Never project the field.
        embed (bool): Flatten the field's record value into the parent mapping.
    """

    name: str | None = None
    groups: tuple[str, ...] = ()
    omit_empty: bool = False
    exclude: bool = False
    embed: bool = False


def viewfield(
    name: str | None = None,
    *,
    groups: str | Iterable[str] | None = None,
    omit_empty: bool = False,
    exclude: bool = False,
    embed: bool = False,
    **field_kwargs: Any,
) -> Any:
    """Declare a dataclass field with GroupView annotations.

    Remaining keyword arguments (``default``, ``default_factory``, ``repr``, ...)
    are forwarded to `dataclasses.field`. Existing ``metadata`` is preserved.

    Args:
        name: External name. ``"-"`` is equivalent to ``exclude=True``.
        groups: Comma-separated string or iterable of group names.
        omit_empty: Skip the field when its value is empty.
        exclude: Never project the field.
        embed: Flatten a record value into the parent's mapping.
        **field_kwargs: Forwarded to `dataclasses.field`.

    Returns:
        A `dataclasses.Field` (typed as Any so it can be assigned to annotated attributes).
    """
    tag = ViewTag(
        name=name or None,
        groups=split_groups(groups),
        omit_empty=omit_empty,
        exclude=exclude or name == EXCLUDE_MARKER,
        embed=embed,
    )
    metadata: dict[str, Any] = dict(field_kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = tag
    return dataclasses.field(metadata=metadata, **field_kwargs)


def parse_name_tag(raw: str) -> tuple[str, frozenset[str]]:
    """Split a terse name tag into its name and option set.

    Args:
        raw: Tag text such as ``"email,omitempty"``, ``",omitempty"`` or ``"-"``.

    Returns:
        The (possibly empty) external name and the set of options.
    """
    name, _, rest = raw.partition(",")
    options: frozenset[str] = frozenset(o.strip() for o in rest.split(",") if o.strip())
    return name.strip(), options


def tag_from_metadata(metadata: Mapping[str, Any]) -> ViewTag:
    """Return the `ViewTag` described by a field's metadata mapping.

    A `ViewTag` stored under ``METADATA_KEY`` wins; otherwise the terse
    ``"name"`` / ``"groups"`` string tags are parsed. Fields with neither get
    an empty tag.
    """
    tag: Any = metadata.get(METADATA_KEY)
    if isinstance(tag, ViewTag):
        return tag

    name_raw: Any = metadata.get(NAME_TAG_KEY)
    name: str = ""
    opts: frozenset[str] = frozenset()
    if isinstance(name_raw, str):
        name, opts = parse_name_tag(name_raw)

    groups_raw: Any = metadata.get(GROUPS_TAG_KEY)
    return ViewTag(
        name=name or None,
        groups=split_groups(groups_raw) if isinstance(groups_raw, (str, list, tuple)) else (),
        omit_empty=OMIT_EMPTY_OPTION in opts,
        exclude=name == EXCLUDE_MARKER,
    )


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Everything the projector needs to know about one record field.

    Attributes:
        attr (str): Declared attribute name (also the key for inherited groups).
        name (str): External name used in the output mapping.
        groups (tuple[str, ...]): Explicit groups; empty means "no own groups".
        omit_empty (bool): Skip when the value is empty.
        excluded (bool): Never project.
        embedded (bool): Candidate for flattening (composed when the value is a record).
        private (bool): Attribute is not part of the public surface (leading underscore).
    """

    attr: str
    name: str
    groups: tuple[str, ...]
    omit_empty: bool
    excluded: bool
    embedded: bool
    private: bool

    @classmethod
    def from_field(cls, f: dataclasses.Field[Any]) -> FieldDescriptor:
        """Build a descriptor from a dataclass field."""
        tag: ViewTag = tag_from_metadata(f.metadata)
        return cls(
            attr=f.name,
            name=tag.name or f.name,
            groups=tag.groups,
            omit_empty=tag.omit_empty,
            excluded=tag.exclude,
            embedded=tag.embed,
            private=f.name.startswith("_"),
        )


@functools.lru_cache(maxsize=None)
def describe_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return the cached descriptor table for a dataclass type, in declaration order.

    Args:
        cls: A dataclass type.

    Returns:
        One `FieldDescriptor` per dataclass field.
    """
    return tuple(FieldDescriptor.from_field(f) for f in dataclasses.fields(cls))


def is_record(value: object) -> bool:
    """Return True if ``value`` is a dataclass instance (not a dataclass type)."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)
