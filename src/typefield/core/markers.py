"""
Override markers and the metadata lookups that read them.

Markers are small frozen values that carry per-member overrides. The same
marker can be attached four ways, whichever reads best at the declaration:

- as a decorator on a getter/setter method or on a class::

    @SchemaCaseFormat(CaseFormat.UPPER_UNDERSCORE)
    class Account: ...

- as ``Annotated`` metadata: ``user_id: Annotated[int, SchemaFieldName("uid")]``
- in dataclass field metadata: ``field(metadata={"typefield": SchemaFieldNumber("2")})``
- as pydantic ``Field``/``Annotated`` metadata (pydantic keeps it in ``FieldInfo.metadata``).

Nullability markers are recognized by their bare class name only (see
``is_nullable_marker``), so ``Nullable`` from any library counts.

Examples:
    >>> from typefield.core.markers import SchemaFieldName, attached_markers
    >>> @SchemaFieldName("uid")
    ... def get_user_id(self) -> int: ...
    >>> attached_markers(get_user_id)
    (SchemaFieldName(value='uid'),)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Annotated, Any, TypeVar, get_origin

from .casing import CaseFormat
from .constants import MARKERS_ATTR, METADATA_KEY, NULLABLE_DESIGNATOR

__all__ = [
    "SchemaFieldName",
    "SchemaCaseFormat",
    "SchemaFieldNumber",
    "SchemaFieldDescription",
    "SchemaIgnore",
    "Nullable",
    "attached_markers",
    "annotated_markers",
    "metadata_markers",
    "find_marker",
    "is_nullable_marker",
]

M = TypeVar("M")


class _Marker:
    """Lets a marker instance decorate a function or a class."""

    __slots__ = ()

    def __call__(self, target: Any) -> Any:
        if isinstance(target, type):
            own = tuple(vars(target).get(MARKERS_ATTR, ()))
        else:
            own = tuple(getattr(target, MARKERS_ATTR, ()))
        setattr(target, MARKERS_ATTR, own + (self,))
        return target


@dataclass(frozen=True, slots=True)
class SchemaFieldName(_Marker):
    """Use ``value`` verbatim as the external field name."""

    value: str


@dataclass(frozen=True, slots=True)
class SchemaCaseFormat(_Marker):
    """Convert the natural name to ``value``; on a class it sets the default for all members."""

    value: CaseFormat


@dataclass(frozen=True, slots=True)
class SchemaFieldNumber(_Marker):
    """Explicit position; string literals are parsed as integers."""

    value: str | int


@dataclass(frozen=True, slots=True)
class SchemaFieldDescription(_Marker):
    """Human-readable description copied onto the descriptor."""

    value: str


@dataclass(frozen=True, slots=True)
class SchemaIgnore(_Marker):
    """Exclude the member from supplier enumeration."""


@dataclass(frozen=True, slots=True)
class Nullable(_Marker):
    """The member, return value, or parameter may hold None."""


def attached_markers(target: Any) -> tuple[Any, ...]:
    """
    Markers attached to a function or class by decorators.

    Notes:
        Class markers are read from the class's own namespace only; a subclass
        does not inherit its parent's SchemaCaseFormat.
    """
    if isinstance(target, type):
        return tuple(vars(target).get(MARKERS_ATTR, ()))
    return tuple(getattr(target, MARKERS_ATTR, ()))


def annotated_markers(tp: Any) -> tuple[Any, ...]:
    """Top-level ``Annotated`` metadata of a type expression (empty otherwise)."""
    if get_origin(tp) is Annotated:
        return tuple(tp.__metadata__)
    return ()


def metadata_markers(metadata: Mapping[str, Any] | None) -> tuple[Any, ...]:
    """Markers stored under the ``typefield`` key of dataclass field metadata."""
    if not metadata or METADATA_KEY not in metadata:
        return ()
    value = metadata[METADATA_KEY]
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def find_marker(markers: Iterable[Any], kind: type[M]) -> M | None:
    """Return the first marker of ``kind`` or None."""
    for marker in markers:
        if isinstance(marker, kind):
            return marker
    return None


def is_nullable_marker(marker: Any) -> bool:
    """
    Duck-typed nullability check on the marker's bare class name.

    Accepts both instances (``Nullable()``) and bare marker classes
    (``Annotated[str, Nullable]``), regardless of the defining module.

    Examples:
        >>> class Nullable: ...
        >>> is_nullable_marker(Nullable()), is_nullable_marker(Nullable)
        (True, True)
    """
    designator = marker.__name__ if isinstance(marker, type) else type(marker).__name__
    return designator == NULLABLE_DESIGNATOR
