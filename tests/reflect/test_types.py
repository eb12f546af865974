import collections.abc
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    Generic,
    Literal,
    NamedTuple,
    NewType,
    Optional,
    TypedDict,
    TypeVar,
    get_args,
)

import pytest
from pydantic import BaseModel

from typefield.reflect.types import (
    bound_types,
    is_optional,
    is_record_type,
    map_key_value_types,
    raw_type_of,
    resolve_type,
    sequence_element_type,
    unwrap_optional,
)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
B = TypeVar("B", bound=str)

UserId = NewType("UserId", int)


class Box(Generic[T]):
    pass


class Pair(Generic[K, V]):
    pass


class Named(Pair[str, V]):
    pass


class IntNamed(Named[int]):
    pass


class Tags(list[str]):
    pass


class Registry(dict[str, V], Generic[V]):
    pass


@dataclass
class Point:
    x: int


class Model(BaseModel):
    x: int


class Coord(NamedTuple):
    x: float
    y: float


class Movie(TypedDict):
    title: str
    year: int


class Page(BaseModel, Generic[T]):
    items: list[T]


class IntPage(Page[int]):
    pass


# ---------------------------------------------------------------------------
# resolve_type
# ---------------------------------------------------------------------------


def test_bound_variable_resolves_to_binding() -> None:
    assert resolve_type(T, {T: int}) is int


def test_unbound_variable_is_returned_unchanged() -> None:
    assert resolve_type(T, {K: int}) is T
    assert resolve_type(list[T], {K: int}) == list[T]
    assert resolve_type(T, {}) is T


@pytest.mark.parametrize(
    "declared,expected",
    [
        (list[T], list[int]),
        (dict[str, list[T]], dict[str, list[int]]),
        (tuple[T, ...], tuple[int, ...]),
        (Box[T], Box[int]),
        (list[Box[dict[T, T]]], list[Box[dict[int, int]]]),
        (collections.abc.Mapping[T, str], collections.abc.Mapping[int, str]),
    ],
)
def test_nested_variables_are_substituted(declared: Any, expected: Any) -> None:
    assert resolve_type(declared, {T: int}) == expected


def test_optional_and_annotated_are_rebuilt() -> None:
    resolved = resolve_type(Optional[T], {T: int})
    assert is_optional(resolved)
    assert unwrap_optional(resolved) is int

    resolved = resolve_type(Annotated[list[T], "meta"], {T: str})
    assert get_args(resolved)[0] == list[str]
    assert resolved.__metadata__ == ("meta",)


def test_literal_arguments_are_values() -> None:
    lit = Literal["T", 1]
    assert resolve_type(lit, {T: int}) is lit


# ---------------------------------------------------------------------------
# raw_type_of
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "tp,expected",
    [
        (int, int),
        (list[int], list),
        (dict[str, list[int]], dict),
        (Box[int], Box),
        (Annotated[list[int], "m"], list),
        (UserId, int),
        (T, object),
        (B, str),
        (Any, object),
    ],
)
def test_raw_type_of(tp: Any, expected: Any) -> None:
    assert raw_type_of(tp) is expected


# ---------------------------------------------------------------------------
# bound_types
# ---------------------------------------------------------------------------


def test_bound_types_of_parametrized_alias() -> None:
    assert bound_types(Pair[int, str]) == {K: int, V: str}


def test_bound_types_follow_generic_bases() -> None:
    assert bound_types(Named[float]) == {V: float, K: str}
    assert bound_types(IntNamed) == {V: int, K: str}


def test_bound_types_of_plain_class_is_empty() -> None:
    assert bound_types(Point) == {}
    assert bound_types(int) == {}


def test_bound_types_of_parametrized_pydantic_model() -> None:
    assert bound_types(Page[str]) == {T: str}
    assert bound_types(IntPage) == {T: int}
    assert bound_types(Page) == {}


# ---------------------------------------------------------------------------
# container shapes
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "tp,expected",
    [
        (list[int], int),
        (set[str], str),
        (frozenset[bytes], bytes),
        (collections.abc.Iterable[float], float),
        (collections.abc.Sequence[list[int]], list[int]),
        (tuple[int, ...], int),
        (tuple[str], str),
        (list, Any),
        (Tags, str),
        (Optional[list[int]], int),
    ],
)
def test_sequence_element_type(tp: Any, expected: Any) -> None:
    assert sequence_element_type(tp) == expected


@pytest.mark.parametrize(
    "tp",
    [
        int,
        str,
        bytes,
        dict[str, int],
        tuple[int, str],
        tuple[()],
        Point,
        Model,
        Coord,
        Movie,
        Box[int],
        UserId,
    ],
)
def test_not_sequence_shapes(tp: Any) -> None:
    assert sequence_element_type(tp) is None


def test_records_are_not_containers() -> None:
    assert is_record_type(Coord)
    assert is_record_type(Movie)
    assert not is_record_type(tuple[int, ...])
    assert not is_record_type(dict[str, int])


def test_sequence_element_type_applies_bindings() -> None:
    assert sequence_element_type(list[T], {T: str}) is str


@pytest.mark.parametrize(
    "tp,expected",
    [
        (dict[str, int], (str, int)),
        (collections.abc.Mapping[int, list[str]], (int, list[str])),
        (Registry[float], (str, float)),
        (dict, (Any, Any)),
    ],
)
def test_map_key_value_types(tp: Any, expected: Any) -> None:
    assert map_key_value_types(tp) == expected


@pytest.mark.parametrize("tp", [int, list[int], set[str], Point, Model, Coord, Movie, str])
def test_not_map_shapes(tp: Any) -> None:
    assert map_key_value_types(tp) is None
