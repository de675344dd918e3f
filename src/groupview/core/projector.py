# groupview:header:start
#
#   project      : GroupView
#   file         : projector.py
#   file_relpath : src/groupview/core/projector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Group-based projection of arbitrary values into plain data.

The projector walks a value and produces a fresh structure made only of
``dict[str, object]``, ``list``, scalars, ``None`` and native passthrough
values (see `groupview.core.capabilities`), ready for a JSON-like encoder.

Records (dataclass instances) are projected field by field:

- excluded fields, private fields and empty ``omit_empty`` fields are skipped;
- an ``embed`` field holding a record is *composed*: its own projection is merged
  into the parent mapping (later fields win on name clashes) and, if the
  embed field declares groups, those groups are inherited by every child
  field that declares none of its own;
- any other field is kept only if its groups (explicit, else inherited) are
  empty or intersect the active groups.

Containers are rebuilt: sequences and sets become lists, mappings become
dicts with string keys. ``None`` stays ``None`` and an empty mapping stays
``{}``; the two are never conflated.

Reference cycles are not detected. A value that contains itself recurses
until Python raises `RecursionError`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import TYPE_CHECKING, Any

from groupview.config.logging import get_logger
from groupview.core.capabilities import is_empty, is_native, is_self_projecting, text_of
from groupview.core.errors import UnsupportedKeyTypeError
from groupview.core.options import Options
from groupview.core.tags import describe_fields, is_record

if TYPE_CHECKING:
    from groupview.config.logging import GroupviewLogger
    from groupview.core.tags import FieldDescriptor

logger: GroupviewLogger = get_logger(__name__)

_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)

__all__: list[str] = [
    "Projector",
    "coerce_key",
    "project",
    "project_fields",
]


class Projector:
    """Single-use projection context for one top-level call.

    The projector owns the inherited-group map: entries recorded while
    flattening a grouped ``embed`` field stay in effect for the remainder of
    the traversal. Create a new projector (or use `project`) per request.

    Args:
        options (Options): Active groups.
    """

    __slots__ = ("options", "inherited_groups")

    def __init__(self, options: Options) -> None:
        self.options: Options = options
        self.inherited_groups: dict[str, tuple[str, ...]] = {}

    def project(self, value: object) -> object:
        """Project any value.

        Records honour ``to_view`` first and are walked field by field
        otherwise; every other value goes through `normalize`.
        """
        if value is None:
            return None
        if is_record(value) and not is_self_projecting(value):
            return self.project_fields(value)
        return self.normalize(value)

    def project_fields(self, record: object) -> dict[str, object]:
        """Project a record into a mapping, ignoring any ``to_view`` hook on ``record``.

        Args:
            record: A dataclass instance.

        Returns:
            The visible fields keyed by external name, with composed fields flattened.
        """
        dest: dict[str, object] = {}
        for desc in describe_fields(type(record)):
            value: Any = getattr(record, desc.attr)

            if desc.excluded:
                continue
            if desc.omit_empty and is_empty(value):
                logger.trace("skip %s.%s: empty", type(record).__name__, desc.attr)
                continue
            if desc.private:
                continue

            composed: bool = desc.embedded and is_record(value)
            if composed:
                if desc.groups:
                    self._inherit(value, desc.groups)
                nested: object = self.normalize(value)
                if isinstance(nested, dict):
                    dest.update(nested)
                continue

            if not self.is_visible(desc):
                logger.trace(
                    "skip %s.%s: groups %s not in %s",
                    type(record).__name__,
                    desc.attr,
                    self.effective_groups(desc),
                    self.options.groups,
                )
                continue

            dest[desc.name] = self.normalize(value)
        return dest

    def effective_groups(self, desc: FieldDescriptor) -> tuple[str, ...]:
        """Return the field's own groups, else the groups inherited for its name."""
        if desc.groups:
            return desc.groups
        return self.inherited_groups.get(desc.attr, ())

    def is_visible(self, desc: FieldDescriptor) -> bool:
        """Return True if the field passes the group check."""
        groups: tuple[str, ...] = self.effective_groups(desc)
        return not groups or self.options.intersects(groups)

    def normalize(self, value: object) -> object:
        """Convert a field value (or container element) into plain data.

        Raises:
            UnsupportedKeyTypeError: If a mapping key cannot be coerced to a string.
        """
        if value is None:
            return None
        if is_self_projecting(value):
            return value.to_view(self.options)  # type: ignore[attr-defined]
        if is_native(value):
            return value
        if is_record(value):
            return self.project_fields(value)
        if isinstance(value, Mapping):
            return self._normalize_mapping(value)
        if isinstance(value, (Sequence, Set)) and not isinstance(value, _TEXT_TYPES):
            return [self.normalize(item) for item in value]
        return value

    def _normalize_mapping(self, mapping: Mapping[Any, Any]) -> dict[str, object]:
        dest: dict[str, object] = {}
        for key, item in mapping.items():
            projected: object = self.normalize(item)
            dest[coerce_key(key)] = projected
        return dest

    def _inherit(self, record: object, groups: tuple[str, ...]) -> None:
        for child in describe_fields(type(record)):
            self.inherited_groups[child.attr] = groups


def coerce_key(key: object) -> str:
    """Coerce a mapping key to a string.

    Plain strings are used as-is, enums contribute their value, other
    text-capable values (UUIDs, dates, paths, ...) their text form and integers
    their base-10 representation.

    Args:
        key: The mapping key.

    Returns:
        The string key.

    Raises:
        UnsupportedKeyTypeError: For any other key type (including ``bool`` and ``float``).
    """
    if isinstance(key, str) and not isinstance(key, Enum):
        return str.__str__(key)
    if isinstance(key, Enum):
        return coerce_key(key.value)
    if is_native(key) and not isinstance(key, (bytes, bytearray)):
        return text_of(key)
    if isinstance(key, int) and not isinstance(key, bool):
        return str(int(key))
    logger.debug("unsupported mapping key %r (%s)", key, type(key).__name__)
    raise UnsupportedKeyTypeError(type(key).__name__, key)


def project(options: Options, value: object) -> object:
    """Project ``value`` for the groups in ``options``.

    Each call starts from an empty inherited-group map, so repeated calls with
    the same options are independent.

    Args:
        options: Active groups.
        value: Any value: record, container, scalar or self-projecting object.

    Returns:
        A mapping for records, a list for sequences, the value itself for
        scalars and passthrough types, None for None.

    Raises:
        UnsupportedKeyTypeError: If a mapping key cannot be coerced to a string.
    """
    return Projector(options).project(value)


def project_fields(options: Options, record: object) -> dict[str, object]:
    """Walk ``record``'s fields with a fresh projector, bypassing its ``to_view``.

    Intended for ``to_view`` implementations that want the default rendering
    of themselves as a starting point.
    """
    return Projector(options).project_fields(record)
