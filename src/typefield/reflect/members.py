"""
Member and accessor enumeration for record-like classes.

Provides hashable handles for the two declaration shapes that become schema
fields (directly declared members and getter/setter methods) and functions
that list them in declaration order.

Supported record shapes
- dataclasses: ``dataclasses.fields`` order; markers from ``field(metadata=...)``.
- pydantic models: ``model_fields`` order; markers from ``FieldInfo.metadata``
  and the description from ``Field(description=...)``.
- plain annotated classes: ``typing.get_type_hints`` order (bases first).

Notes
- ``ClassVar`` members and ``_private`` names are skipped.
- Accessors are plain functions found in the class namespaces, base classes
  first; an override keeps the position of the method it overrides.
- Annotations are evaluated with ``typing.get_type_hints(include_extras=True)``
  so string annotations must be resolvable from the defining module.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar, get_origin, get_type_hints

from pydantic import BaseModel

from typefield.core.constants import DEFAULT_SETTER_PREFIX, GETTER_PREFIXES
from typefield.core.markers import annotated_markers, attached_markers, metadata_markers

from .types import raw_type_of, strip_annotated

__all__ = [
    "Member",
    "Accessor",
    "strip_accessor_prefix",
    "list_members",
    "list_getters",
    "list_setters",
]

_SKIPPED_MODULES = frozenset({"builtins", "typing", "abc", "_collections_abc", "collections.abc"})


@dataclass(frozen=True)
class Member:
    """
    Handle for a directly declared member of a record-like class.

    Attributes:
        name (str): Attribute name as declared.
        owner (type): Class whose body declares the member.
        annotation (Any): Declared annotation, ``Annotated`` extras included.
        extra_markers (tuple): Markers from dataclass/pydantic field metadata.
        description (str | None): pydantic ``Field(description=...)`` text.
    """

    name: str
    owner: type
    annotation: Any = field(compare=False)
    extra_markers: tuple[Any, ...] = field(default=(), compare=False)
    description: str | None = field(default=None, compare=False)

    @property
    def markers(self) -> tuple[Any, ...]:
        """Declaration-site markers: field metadata, then top-level Annotated metadata."""
        return self.extra_markers + annotated_markers(self.annotation)

    @property
    def qualname(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


@dataclass(frozen=True)
class Accessor:
    """Handle for a getter or setter method defined on ``owner``."""

    name: str
    owner: type
    function: Callable[..., Any]

    @property
    def markers(self) -> tuple[Any, ...]:
        return attached_markers(self.function)

    @property
    def qualname(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"

    def type_hints(self) -> dict[str, Any]:
        return get_type_hints(self.function, include_extras=True)

    @property
    def parameters(self) -> list[inspect.Parameter]:
        """Parameters after ``self``."""
        params = list(inspect.signature(self.function).parameters.values())
        return params[1:]

    @property
    def return_annotation(self) -> Any:
        return self.type_hints().get("return", Any)

    def parameter_annotation(self, param: inspect.Parameter) -> Any:
        return self.type_hints().get(param.name, Any)


def strip_accessor_prefix(name: str, prefix: str) -> str | None:
    """
    Natural field name of an accessor, or None when ``name`` lacks ``prefix``.

    Snake-case accessors drop the separating underscore; camel-case accessors
    lower-case the first remaining letter. The prefix must end at a word
    boundary, so ``getter`` is not a getter of ``ter``.

    Examples:
        >>> strip_accessor_prefix("getUserId", "get")
        'userId'
        >>> strip_accessor_prefix("get_user_id", "get")
        'user_id'
        >>> strip_accessor_prefix("getter", "get") is None
        True
    """
    if not prefix or not name.startswith(prefix):
        return None
    rest = name[len(prefix):]
    if rest.startswith("_"):
        return rest.lstrip("_") or None
    if rest[:1].isupper():
        return rest[0].lower() + rest[1:]
    return None


def _declaring_class(cls: type, name: str) -> type:
    for klass in cls.__mro__:
        if name in inspect.get_annotations(klass):
            return klass
    return cls


def _is_class_var(annotation: Any) -> bool:
    return get_origin(strip_annotated(annotation)) is ClassVar


def list_members(tp: Any, *, include_private: bool = False) -> list[Member]:
    """
    Directly declared members of a record-like class in declaration order.

    Args:
        tp: Class or parametrized alias (``Pair[int, str]``).
        include_private: Keep ``_private`` names.

    Returns:
        list[Member]: One handle per member.
    """
    cls = raw_type_of(tp)
    hints = get_type_hints(cls, include_extras=True)
    members: list[Member] = []

    if isinstance(cls, type) and issubclass(cls, BaseModel):
        for name, info in cls.model_fields.items():
            members.append(
                Member(
                    name=name,
                    owner=_declaring_class(cls, name),
                    annotation=hints.get(name, info.annotation),
                    extra_markers=tuple(info.metadata),
                    description=info.description,
                )
            )
    elif dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            members.append(
                Member(
                    name=f.name,
                    owner=_declaring_class(cls, f.name),
                    annotation=hints.get(f.name, f.type),
                    extra_markers=metadata_markers(f.metadata),
                )
            )
    else:
        for name, annotation in hints.items():
            if _is_class_var(annotation):
                continue
            members.append(Member(name=name, owner=_declaring_class(cls, name), annotation=annotation))

    if not include_private:
        members = [m for m in members if not m.name.startswith("_")]
    return members


def _user_functions(cls: type) -> Iterator[tuple[str, type, Callable[..., Any]]]:
    seen: dict[str, tuple[type, Callable[..., Any]]] = {}
    for klass in reversed(cls.__mro__):
        module = klass.__module__ or ""
        if module in _SKIPPED_MODULES or module.startswith("pydantic"):
            continue
        for name, value in vars(klass).items():
            if inspect.isfunction(value) and not name.startswith("_"):
                seen[name] = (klass, value)
    for name, (klass, function) in seen.items():
        yield name, klass, function


def list_getters(tp: Any, prefixes: tuple[str, ...] = GETTER_PREFIXES) -> list[Accessor]:
    """Zero-argument methods named with one of ``prefixes``, base classes first."""
    cls = raw_type_of(tp)
    getters: list[Accessor] = []
    for name, klass, function in _user_functions(cls):
        if not any(strip_accessor_prefix(name, p) for p in prefixes):
            continue
        accessor = Accessor(name=name, owner=klass, function=function)
        required = [
            p
            for p in accessor.parameters
            if p.default is inspect.Parameter.empty
            and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]
        if not required:
            getters.append(accessor)
    return getters


def list_setters(tp: Any, prefix: str = DEFAULT_SETTER_PREFIX) -> list[Accessor]:
    """
    Methods named with ``prefix``, base classes first.

    Arity is not filtered here; building a descriptor from a setter that does not
    take exactly one argument raises InvalidSetterArity.
    """
    cls = raw_type_of(tp)
    return [
        Accessor(name=name, owner=klass, function=function)
        for name, klass, function in _user_functions(cls)
        if strip_accessor_prefix(name, prefix)
    ]
