"""
Recursive container and map decomposition.

Given a resolved type, derive the synthesized sub-descriptors that describe
its shape: one element descriptor for sequence/iterable shapes, key and value
descriptors for mapping shapes, nothing otherwise. Each sub-descriptor is
decomposed in turn, one generic layer per call.

Notes:
    - Shape classification is delegated to typefield.reflect.types.
    - Sub-descriptors have an empty name, no position, ``nullable=False`` and a
      Synthesized source.
    - A type that reappears on its own decomposition path (for example a
      binding ``T -> list[T]``) raises RecursiveTypeError instead of looping.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from typefield.core.descriptor import FieldDescriptor, Synthesized
from typefield.core.errors import RecursiveTypeError
from typefield.core.typing import EMPTY_BINDINGS, BindingMap
from typefield.reflect.types import (
    map_key_value_types,
    raw_type_of,
    sequence_element_type,
    unwrap_optional,
)

__all__ = [
    "Decomposition",
    "decompose",
    "element_descriptor",
    "map_descriptors",
]


class Decomposition(NamedTuple):
    element_type: FieldDescriptor | None = None
    key_type: FieldDescriptor | None = None
    value_type: FieldDescriptor | None = None


def decompose(
    declared: Any, bindings: BindingMap = EMPTY_BINDINGS, path: tuple[Any, ...] = ()
) -> Decomposition:
    """
    Sub-descriptors of ``declared``.

    Args:
        declared: Resolved type of the field being built.
        bindings: TypeVar bindings of the enclosing context.
        path: Types already being decomposed above this call.

    Returns:
        Decomposition: Element or key/value descriptors; all None for scalars and records.
    """
    path = path + (declared,)
    element = element_descriptor(declared, bindings, path)
    key_value = map_descriptors(declared, bindings, path)
    if key_value is None:
        return Decomposition(element_type=element)
    return Decomposition(element_type=element, key_type=key_value[0], value_type=key_value[1])


def element_descriptor(
    tp: Any, bindings: BindingMap = EMPTY_BINDINGS, path: tuple[Any, ...] = ()
) -> FieldDescriptor | None:
    """Element sub-descriptor when ``tp`` is a sequence shape."""
    element = sequence_element_type(tp, bindings)
    if element is None:
        return None
    return _synthesize(element, bindings, path)


def map_descriptors(
    tp: Any, bindings: BindingMap = EMPTY_BINDINGS, path: tuple[Any, ...] = ()
) -> tuple[FieldDescriptor, FieldDescriptor] | None:
    """Key and value sub-descriptors when ``tp`` is a mapping shape."""
    key_value = map_key_value_types(tp, bindings)
    if key_value is None:
        return None
    key, value = key_value
    return _synthesize(key, bindings, path), _synthesize(value, bindings, path)


def _synthesize(tp: Any, bindings: BindingMap, path: tuple[Any, ...]) -> FieldDescriptor:
    # Shape arguments arrive already resolved against ``bindings``.
    # TODO: carry element nullability (list[int | None]) once sub-descriptors may be nullable.
    declared = unwrap_optional(tp)
    if any(declared == seen for seen in path):
        chain = " -> ".join(repr(t) for t in path + (declared,))
        raise RecursiveTypeError(f"recursive container type: {chain}")
    sub = decompose(declared, bindings, path)
    return FieldDescriptor(
        name="",
        position=None,
        nullable=False,
        declared_type=declared,
        raw_type=raw_type_of(declared),
        source=Synthesized(),
        element_type=sub.element_type,
        key_type=sub.key_type,
        value_type=sub.value_type,
    )
