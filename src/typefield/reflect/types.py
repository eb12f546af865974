"""
Type resolution and container-shape introspection over Python typing objects.

Responsibilities
- Substitute TypeVar bindings through arbitrarily nested type expressions.
- Compute the erasure (raw class) of a resolved type expression.
- Derive binding maps from parametrized aliases and generic subclasses.
- Classify a type as a sequence shape or a mapping shape and report its
  element or key/value type arguments, following ``__orig_bases__`` so that
  ``class Tags(list[str])`` decomposes like ``list[str]``.

Notes
- Zero-IO; pydantic is used only to recognize models. Every function is pure
  and thread-safe.
- Unbound TypeVars are returned unchanged; that is best effort, not an error.
- Strings, bytes and record types (dataclasses, pydantic models, NamedTuple
  and TypedDict classes) are iterable at runtime but are never reported as
  sequence shapes.

Examples
--------
>>> from typing import TypeVar
>>> from typefield.reflect.types import resolve_type, raw_type_of
>>> T = TypeVar("T")
>>> resolve_type(list[dict[str, T]], {T: int})
list[dict[str, int]]
>>> raw_type_of(list[dict[str, int]])
<class 'list'>
"""

from __future__ import annotations

import collections.abc
import dataclasses
import types
import typing
from typing import Annotated, Any, Literal, TypeVar, get_args, get_origin, is_typeddict

from pydantic import BaseModel

from typefield.core.typing import EMPTY_BINDINGS, BindingMap, TypeExpr

__all__ = [
    "resolve_type",
    "raw_type_of",
    "strip_annotated",
    "is_optional",
    "unwrap_optional",
    "bound_types",
    "is_record_type",
    "sequence_element_type",
    "map_key_value_types",
]

_NoneType = type(None)
_UNION_ORIGINS: tuple[Any, ...] = (typing.Union, types.UnionType)
_SCALAR_ITERABLES: tuple[type, ...] = (str, bytes, bytearray, memoryview)


def resolve_type(tp: TypeExpr, bindings: BindingMap = EMPTY_BINDINGS) -> TypeExpr:
    """
    Substitute bound TypeVars inside ``tp``.

    Args:
        tp: Declared type expression, possibly containing TypeVars.
        bindings: TypeVar -> concrete type.

    Returns:
        The substituted type expression. Variables missing from ``bindings``
        are left in place.
    """
    if isinstance(tp, TypeVar):
        return bindings.get(tp, tp)
    if not bindings:
        return tp

    origin = get_origin(tp)
    # Literal arguments are values; callables are never schema fields.
    if origin is None or origin is Literal or origin is collections.abc.Callable:
        return tp
    args = get_args(tp)
    if origin is Annotated:
        return Annotated[(resolve_type(args[0], bindings), *tp.__metadata__)]  # type: ignore[return-value]

    resolved = tuple(resolve_type(a, bindings) for a in args)
    if resolved == args:
        return tp
    if origin in _UNION_ORIGINS:
        return typing.Union[resolved]
    if isinstance(tp, types.GenericAlias):
        return types.GenericAlias(origin, resolved)
    copy_with = getattr(tp, "copy_with", None)
    if copy_with is not None:
        return copy_with(resolved)
    return tp


def strip_annotated(tp: TypeExpr) -> TypeExpr:
    """Drop any ``Annotated`` wrapper and return the underlying type."""
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def is_optional(tp: TypeExpr) -> bool:
    """True for unions that include None (``X | None``, ``Optional[X]``)."""
    tp = strip_annotated(tp)
    return get_origin(tp) in _UNION_ORIGINS and _NoneType in get_args(tp)


def unwrap_optional(tp: TypeExpr) -> TypeExpr:
    """
    Remove ``Annotated`` wrappers and the None arm of an optional union.

    Examples:
        >>> unwrap_optional(int | None)
        <class 'int'>
    """
    tp = strip_annotated(tp)
    if not is_optional(tp):
        return tp
    rest = tuple(strip_annotated(a) for a in get_args(tp) if a is not _NoneType)
    if len(rest) == 1:
        return rest[0]
    return typing.Union[rest]


def raw_type_of(tp: TypeExpr) -> Any:
    """
    Erasure of a type expression.

    Returns:
        The origin class for parametrized types, the bound (or ``object``) for
        an unbound TypeVar, ``object`` for ``Any``, the erased supertype for a
        ``NewType``, and ``tp`` itself for plain classes.
    """
    tp = strip_annotated(tp)
    if tp is Any:
        return object
    if isinstance(tp, TypeVar):
        bound = tp.__bound__
        return raw_type_of(bound) if bound is not None else object
    supertype = getattr(tp, "__supertype__", None)
    if supertype is not None:
        return raw_type_of(supertype)
    origin = get_origin(tp)
    if origin is not None:
        return origin
    return tp


def bound_types(tp: TypeExpr) -> dict[TypeVar, TypeExpr]:
    """
    Binding map for a parametrized alias or a generic subclass.

    Follows ``__orig_bases__`` transitively so that variables of every
    ancestor are bound in the context of ``tp``. Parametrized pydantic models
    (``Page[int]``) are real subclasses and are read from their generic metadata.

    Examples:
        >>> from typing import Generic, TypeVar
        >>> K = TypeVar("K"); V = TypeVar("V")
        >>> class Pair(Generic[K, V]): ...
        >>> class Named(Pair[str, V]): ...
        >>> bound_types(Named[int]) == {V: int, K: str}
        True
    """
    bindings: dict[TypeVar, TypeExpr] = {}
    _collect_bindings(strip_annotated(tp), bindings, seen=set())
    return bindings


def _collect_bindings(tp: TypeExpr, bindings: dict[TypeVar, TypeExpr], seen: set[int]) -> None:
    origin = get_origin(tp) or tp
    if not isinstance(origin, type) or id(origin) in seen:
        return
    seen.add(id(origin))
    params = getattr(origin, "__parameters__", ())
    args = get_args(tp)
    bases = getattr(origin, "__orig_bases__", ())
    metadata = getattr(origin, "__pydantic_generic_metadata__", None)
    if metadata is not None:
        # Page[int] is a real subclass; its arguments live in the generic metadata.
        generic = metadata["origin"]
        if generic is not None:
            params = generic.__pydantic_generic_metadata__["parameters"]
            args = metadata["args"]
            bases = (generic,)
        else:
            bases = origin.__bases__
    _bind(params, args, bindings)
    for base in bases:
        base_origin = get_origin(base)
        if base_origin is typing.Generic or base_origin is typing.Protocol:
            continue
        _collect_bindings(base, bindings, seen)


def _bind(
    params: tuple[TypeVar, ...], args: tuple[Any, ...], bindings: dict[TypeVar, TypeExpr]
) -> None:
    if args and params and len(args) == len(params):
        for param, arg in zip(params, args):
            value = resolve_type(arg, bindings)
            if value is not param:
                bindings.setdefault(param, value)


def is_record_type(tp: TypeExpr) -> bool:
    """True for dataclasses, pydantic models, NamedTuples and TypedDicts."""
    raw = raw_type_of(tp)
    if not isinstance(raw, type):
        return False
    if issubclass(raw, tuple) and hasattr(raw, "_fields"):
        return True
    return dataclasses.is_dataclass(raw) or issubclass(raw, BaseModel) or is_typeddict(raw)


def _is_subclass(raw: Any, target: type) -> bool:
    try:
        return isinstance(raw, type) and issubclass(raw, target)
    except TypeError:
        return False


def _supertype_args(tp: TypeExpr, target: type, bindings: BindingMap) -> tuple[Any, ...] | None:
    """Type arguments of ``tp`` viewed as a ``target`` subtype, or None if not one."""
    raw = raw_type_of(tp)
    if not _is_subclass(raw, target):
        return None
    # User subclasses (class KV(dict[str, V])) carry the container arguments on a base.
    local = dict(bindings)
    local.update(bound_types(tp))
    for base in getattr(raw, "__orig_bases__", ()):
        if _is_subclass(raw_type_of(base), target):
            found = _supertype_args(resolve_type(base, local), target, local)
            if found is not None:
                return found
    return tuple(resolve_type(a, bindings) for a in get_args(strip_annotated(tp)))


def sequence_element_type(tp: TypeExpr, bindings: BindingMap = EMPTY_BINDINGS) -> TypeExpr | None:
    """
    Element type when ``tp`` is a sequence/iterable shape, else None.

    Notes:
        - ``tuple[X, ...]`` and ``tuple[X]`` are sequences of X; heterogeneous
          fixed tuples are not sequence shapes.
        - Unparametrized containers report ``Any``.
    """
    tp = unwrap_optional(tp)
    raw = raw_type_of(tp)
    if not isinstance(raw, type) or issubclass(raw, _SCALAR_ITERABLES):
        return None
    if issubclass(raw, collections.abc.Mapping) or is_record_type(raw):
        return None
    args = _supertype_args(tp, collections.abc.Iterable, bindings)
    if args is None:
        return None
    if issubclass(raw, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        if len(args) == 1:
            return args[0]
        # tuple[()] is a fixed tuple too; only a bare tuple has no origin.
        if args or get_origin(tp) is not None:
            return None
    return args[0] if args else Any


def map_key_value_types(
    tp: TypeExpr, bindings: BindingMap = EMPTY_BINDINGS
) -> tuple[TypeExpr, TypeExpr] | None:
    """
    (key, value) types when ``tp`` is a mapping shape, else None.

    Unparametrized mappings report ``(Any, Any)``.
    """
    tp = unwrap_optional(tp)
    if is_record_type(tp):
        return None
    args = _supertype_args(tp, collections.abc.Mapping, bindings)
    if args is None:
        return None
    if len(args) >= 2:
        return args[0], args[1]
    return Any, Any
