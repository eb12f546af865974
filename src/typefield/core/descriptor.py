"""
Frozen field descriptors for schema inference.

A FieldDescriptor describes one field of a record-like type: its external
name and position, nullability, the resolved declared type and its erasure,
where it was declared, and, for containers, mappings and tagged unions, the
recursively built descriptors of its element, key/value, or variant types.

Notes:
    - Descriptors are immutable; ``rename`` returns a copy.
    - Exactly one shape holds: sequence (``element_type``), map (``key_type`` and
      ``value_type``), tagged union (non-empty ``variants``), or scalar/record.
    - Sub-descriptors built during decomposition carry a ``Synthesized`` source,
      an empty name, no position, and ``nullable=False``.
    - Construction lives in typefield.infer.build; this module is zero-IO and
      depends on the standard library only.

Examples:
    >>> from typefield.core.descriptor import FieldDescriptor, Synthesized
    >>> d = FieldDescriptor(name="count", position=0, nullable=False,
    ...                     declared_type=int, raw_type=int, source=Synthesized())
    >>> d.rename("total").name
    'total'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .errors import DescriptorShapeError

if TYPE_CHECKING:
    from typefield.reflect.members import Accessor, Member

__all__ = [
    "OneOfValue",
    "FromMember",
    "FromAccessor",
    "Synthesized",
    "FieldSource",
    "FieldDescriptor",
]


class OneOfValue:
    """Sentinel type identity for tagged-union (one-of) fields."""


@dataclass(frozen=True, slots=True)
class FromMember:
    """Descriptor built from a directly declared member."""

    member: Member


@dataclass(frozen=True, slots=True)
class FromAccessor:
    """Descriptor built from a getter or setter method."""

    accessor: Accessor


@dataclass(frozen=True, slots=True)
class Synthesized:
    """Descriptor with no backing declaration (sub-descriptors, unions)."""


FieldSource = FromMember | FromAccessor | Synthesized


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Normalized, recursive description of one schema field.

    Attributes:
        name (str): Externally visible field name ("" for sub-descriptors).
        position (int | None): Declared or inferred ordinal.
        nullable (bool): Whether the field may hold None.
        declared_type (Any): Resolved type expression.
        raw_type (Any): Erasure of declared_type (origin class).
        source (FieldSource): Declaration the descriptor was built from.
        variants (Mapping[str, FieldDescriptor]): Tagged-union members, read-only.
        element_type (FieldDescriptor | None): Element shape of a sequence.
        key_type (FieldDescriptor | None): Key shape of a map.
        value_type (FieldDescriptor | None): Value shape of a map.
        description (str | None): Optional human-readable text.

    Raises:
        typefield.core.errors.DescriptorShapeError: If only one of key_type/value_type
            is set, if more than one shape is populated, or if position is negative.
    """

    name: str
    position: int | None
    nullable: bool
    declared_type: Any
    raw_type: Any
    source: FieldSource = field(default_factory=Synthesized)
    variants: Mapping[str, FieldDescriptor] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    element_type: FieldDescriptor | None = None
    key_type: FieldDescriptor | None = None
    value_type: FieldDescriptor | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.variants, MappingProxyType):
            object.__setattr__(self, "variants", MappingProxyType(dict(self.variants)))
        if (self.key_type is None) != (self.value_type is None):
            raise DescriptorShapeError(
                f"field {self.name!r}: key_type and value_type must be set together"
            )
        shapes = [
            self.element_type is not None,
            self.key_type is not None,
            bool(self.variants),
        ]
        if sum(shapes) > 1:
            raise DescriptorShapeError(
                f"field {self.name!r} describes more than one shape (sequence, map, union)"
            )
        if self.position is not None and self.position < 0:
            raise DescriptorShapeError(
                f"field {self.name!r}: position must be non-negative, got {self.position}"
            )

    @property
    def member(self) -> Member | None:
        return self.source.member if isinstance(self.source, FromMember) else None

    @property
    def accessor(self) -> Accessor | None:
        return self.source.accessor if isinstance(self.source, FromAccessor) else None

    @property
    def is_sequence(self) -> bool:
        return self.element_type is not None

    @property
    def is_map(self) -> bool:
        return self.key_type is not None

    @property
    def is_one_of(self) -> bool:
        return bool(self.variants)

    def rename(self, name: str) -> FieldDescriptor:
        """Return a copy with only ``name`` replaced."""
        return replace(self, name=name)
