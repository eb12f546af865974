"""
Lightweight typing aliases used across descriptors, resolvers and suppliers.

This module contains no runtime logic and is zero-IO.

Notes:
    - TypeExpr is deliberately broad: classes, typing aliases, TypeVars,
      unions and Annotated forms all flow through the same code paths.
    - BindingMap is read-only from the point of view of every consumer.

Examples:
    >>> from typing import TypeVar
    >>> from typefield.core.typing import BindingMap
    >>> T = TypeVar("T")
    >>> bindings: BindingMap = {T: int}
    >>> bindings[T]
    <class 'int'>
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

__all__ = [
    "TypeExpr",
    "BindingMap",
    "EMPTY_BINDINGS",
]

# Anything that can appear in an annotation after string evaluation.
TypeExpr = Any

# TypeVar -> concrete type substituted for it in one context.
BindingMap = Mapping[TypeVar, TypeExpr]

EMPTY_BINDINGS: BindingMap = {}
