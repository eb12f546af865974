"""
Field descriptor construction entry points.

Every entry point runs the same pipeline: resolve the declared type against
the binding map -> resolve name and position -> detect nullability ->
decompose containers and maps -> read the description -> build one frozen
FieldDescriptor. Construction either succeeds completely or raises; no
partial descriptors are returned.

Entry points
- for_member(member, index, bindings): position defaults to ``index``.
- for_getter(accessor, index, bindings, prefixes): name from the method name
  minus its ``get``/``is`` prefix; type from the return annotation.
- for_setter(accessor, bindings, prefix): name from the method name minus
  ``prefix``; type from the sole parameter; position is always None.
- for_one_of(name, nullable, variants): tagged union over pre-built variant
  descriptors; typed as OneOfValue, never decomposed.

Examples:
    >>> from dataclasses import dataclass
    >>> from typefield.reflect.members import list_members
    >>> @dataclass
    ... class Row:
    ...     scores: list[dict[str, int]]
    >>> d = for_member(list_members(Row)[0], 0, {})
    >>> d.raw_type, d.element_type.raw_type, d.element_type.value_type.raw_type
    (<class 'list'>, <class 'dict'>, <class 'int'>)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from typefield.core.casing import CaseFormat
from typefield.core.constants import DEFAULT_SETTER_PREFIX, GETTER_PREFIXES
from typefield.core.descriptor import (
    FieldDescriptor,
    FromAccessor,
    FromMember,
    OneOfValue,
    Synthesized,
)
from typefield.core.typing import EMPTY_BINDINGS, BindingMap
from typefield.reflect.members import Accessor, Member
from typefield.reflect.types import raw_type_of, resolve_type, unwrap_optional

from .decompose import decompose
from .naming import accessor_natural_name, resolve_description, resolve_name, resolve_number
from .nullability import getter_is_nullable, member_is_nullable, setter_is_nullable, setter_parameter

__all__ = [
    "for_member",
    "for_getter",
    "for_setter",
    "for_one_of",
]

logger = logging.getLogger(__name__)


def for_member(
    member: Member,
    index: int,
    bindings: BindingMap = EMPTY_BINDINGS,
    *,
    case_format: CaseFormat | None = None,
) -> FieldDescriptor:
    """
    Build the descriptor of a directly declared member.

    Args:
        member (Member): Member handle from typefield.reflect.members.
        index (int): Zero-based declaration index, used when no SchemaFieldNumber is set.
        bindings (BindingMap): TypeVar bindings of the enclosing class.
        case_format (CaseFormat | None): Default format when no marker sets one.

    Raises:
        ConfigurationConflict: SchemaFieldName and SchemaCaseFormat on the same member.
        InvalidFieldNumber: SchemaFieldNumber is not a non-negative integer.
        RecursiveTypeError: The declared type re-enters its own decomposition.
    """
    resolved = resolve_type(member.annotation, bindings)
    declared = unwrap_optional(resolved)
    sub = decompose(declared, bindings)
    descriptor = FieldDescriptor(
        name=resolve_name(member.name, member, case_format),
        position=resolve_number(index, member),
        nullable=member_is_nullable(member, resolved),
        declared_type=declared,
        raw_type=raw_type_of(declared),
        source=FromMember(member),
        element_type=sub.element_type,
        key_type=sub.key_type,
        value_type=sub.value_type,
        description=resolve_description(member),
    )
    logger.debug("member %s -> %r", member.qualname, descriptor.name)
    return descriptor


def for_getter(
    accessor: Accessor,
    index: int,
    bindings: BindingMap = EMPTY_BINDINGS,
    prefixes: Sequence[str] = GETTER_PREFIXES,
    *,
    case_format: CaseFormat | None = None,
) -> FieldDescriptor:
    """
    Build the descriptor of a zero-argument getter.

    Raises:
        InvalidAccessorName: The method name has none of ``prefixes``.
        ConfigurationConflict, InvalidFieldNumber, RecursiveTypeError: As for members.
    """
    natural = accessor_natural_name(accessor, prefixes)
    resolved = resolve_type(accessor.return_annotation, bindings)
    declared = unwrap_optional(resolved)
    sub = decompose(declared, bindings)
    descriptor = FieldDescriptor(
        name=resolve_name(natural, accessor, case_format),
        position=resolve_number(index, accessor),
        nullable=getter_is_nullable(accessor, resolved),
        declared_type=declared,
        raw_type=raw_type_of(declared),
        source=FromAccessor(accessor),
        element_type=sub.element_type,
        key_type=sub.key_type,
        value_type=sub.value_type,
        description=resolve_description(accessor),
    )
    logger.debug("getter %s -> %r", accessor.qualname, descriptor.name)
    return descriptor


def for_setter(
    accessor: Accessor,
    bindings: BindingMap = EMPTY_BINDINGS,
    prefix: str = DEFAULT_SETTER_PREFIX,
    *,
    case_format: CaseFormat | None = None,
) -> FieldDescriptor:
    """
    Build the descriptor of a single-argument setter.

    Setters are not assigned an ordinal, so ``position`` is always None.

    Raises:
        InvalidAccessorName: The method name does not start with ``prefix``.
        InvalidSetterArity: The method does not take exactly one argument.
        ConfigurationConflict, RecursiveTypeError: As for members.
    """
    natural = accessor_natural_name(accessor, (prefix,))
    param = setter_parameter(accessor)
    resolved = resolve_type(accessor.parameter_annotation(param), bindings)
    declared = unwrap_optional(resolved)
    sub = decompose(declared, bindings)
    descriptor = FieldDescriptor(
        name=resolve_name(natural, accessor, case_format),
        position=None,
        nullable=setter_is_nullable(accessor, resolved),
        declared_type=declared,
        raw_type=raw_type_of(declared),
        source=FromAccessor(accessor),
        element_type=sub.element_type,
        key_type=sub.key_type,
        value_type=sub.value_type,
        description=resolve_description(accessor),
    )
    logger.debug("setter %s -> %r", accessor.qualname, descriptor.name)
    return descriptor


def for_one_of(
    name: str, nullable: bool, variants: Mapping[str, FieldDescriptor]
) -> FieldDescriptor:
    """
    Build a tagged-union descriptor from pre-built variant descriptors.

    The variants mapping is copied verbatim; no decomposition is attempted.
    """
    return FieldDescriptor(
        name=name,
        position=None,
        nullable=nullable,
        declared_type=OneOfValue,
        raw_type=OneOfValue,
        source=Synthesized(),
        variants=dict(variants),
    )
