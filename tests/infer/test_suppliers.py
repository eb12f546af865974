from dataclasses import dataclass
from typing import Annotated, Generic, NamedTuple, TypedDict, TypeVar

import pytest
from pydantic import BaseModel

from typefield.core.casing import CaseFormat
from typefield.core.errors import InvalidFieldNumber, InvalidSetterArity
from typefield.core.markers import SchemaCaseFormat, SchemaFieldNumber, SchemaIgnore
from typefield.infer.config import InferenceSettings
from typefield.infer.suppliers import (
    getter_fields,
    member_fields,
    setter_fields,
    validate_field_numbers,
)

T = TypeVar("T")


@dataclass
class Shipment:
    shipment_id: int
    items: list[str]
    internal: Annotated[str, SchemaIgnore()] = ""
    weight: float | None = None


@dataclass
class Swapped:
    a: Annotated[int, SchemaFieldNumber("1")]
    b: Annotated[int, SchemaFieldNumber("0")]


@dataclass
class Gapped:
    a: Annotated[int, SchemaFieldNumber(0)]
    b: Annotated[int, SchemaFieldNumber(2)]


@dataclass
class Partial:
    a: int
    b: Annotated[int, SchemaFieldNumber(0)]


@dataclass
class Page(Generic[T]):
    items: list[T]
    total: int


class Listing(BaseModel, Generic[T]):
    items: list[T]
    total: int


class IntListing(Listing[int]):
    pass


class Coord(NamedTuple):
    x: float
    y: float


class Movie(TypedDict):
    title: str
    year: int


@dataclass
class Scene:
    where: Coord
    movie: Movie
    path: list[Coord]


@dataclass
class WithPrivate:
    visible: int
    _hidden: int = 0


@SchemaCaseFormat(CaseFormat.LOWER_CAMEL)
@dataclass
class Camel:
    user_id: int
    created_at: str


class Account:
    def get_id(self) -> int:
        return 0

    def is_open(self) -> bool:
        return True

    @SchemaIgnore()
    def get_secret(self) -> str:
        return ""

    def get_balance(self) -> float:
        return 0.0


class Box(Generic[T]):
    def get_item(self) -> T:
        raise NotImplementedError


class StrBox(Box[str]):
    pass


class Remote:
    def fetch_name(self) -> str:
        return ""


class Builder:
    def with_name(self, name: str) -> None:
        pass

    def with_size(self, size: int | None) -> None:
        pass

    def set_ignored(self, x: int) -> None:
        pass


class BadSetter:
    def set_pair(self, a: int, b: int) -> None:
        pass


# ---------------------------------------------------------------------------
# member_fields
# ---------------------------------------------------------------------------


def test_ignored_members_are_skipped_and_positions_stay_contiguous() -> None:
    fields = member_fields(Shipment)
    assert [f.name for f in fields] == ["shipment_id", "items", "weight"]
    assert [f.position for f in fields] == [0, 1, 2]
    assert fields[2].nullable is True


def test_numbered_members_sorted_by_position() -> None:
    fields = member_fields(Swapped)
    assert [(f.name, f.position) for f in fields] == [("b", 0), ("a", 1)]


def test_gap_in_field_numbers_is_rejected() -> None:
    with pytest.raises(InvalidFieldNumber, match="Expected field number 1 for field 'b' instead got 2"):
        member_fields(Gapped)


def test_gap_allowed_when_validation_disabled() -> None:
    fields = member_fields(Gapped, InferenceSettings(validate_numbers=False))
    assert [(f.name, f.position) for f in fields] == [("a", 0), ("b", 2)]


def test_duplicate_implicit_and_explicit_number_is_rejected() -> None:
    with pytest.raises(InvalidFieldNumber):
        member_fields(Partial)


def test_generic_alias_binds_type_parameters() -> None:
    items, total = member_fields(Page[str])
    assert items.element_type.raw_type is str
    assert total.raw_type is int


def test_parametrized_pydantic_model_binds_type_parameters() -> None:
    items, total = member_fields(Listing[str])
    assert items.declared_type == list[str]
    assert items.element_type.raw_type is str
    assert total.raw_type is int

    (items, _) = member_fields(IntListing)
    assert items.element_type.raw_type is int


def test_named_tuple_and_typed_dict_fields_are_records() -> None:
    where, movie, path = member_fields(Scene)
    assert where.raw_type is Coord
    assert where.element_type is None
    assert movie.raw_type is Movie
    assert movie.key_type is None and movie.value_type is None
    assert path.element_type.raw_type is Coord
    assert path.element_type.element_type is None


def test_private_members_follow_settings() -> None:
    assert [f.name for f in member_fields(WithPrivate)] == ["visible"]
    settings = InferenceSettings(include_private=True)
    assert [f.name for f in member_fields(WithPrivate, settings)] == ["visible", "_hidden"]


def test_class_case_format_applies_to_every_member() -> None:
    assert [f.name for f in member_fields(Camel)] == ["userId", "createdAt"]


# ---------------------------------------------------------------------------
# getter_fields / setter_fields
# ---------------------------------------------------------------------------


def test_getter_fields_skip_ignored() -> None:
    fields = getter_fields(Account)
    assert [f.name for f in fields] == ["id", "open", "balance"]
    assert [f.position for f in fields] == [0, 1, 2]


def test_getter_fields_of_generic_subclass() -> None:
    (item,) = getter_fields(StrBox)
    assert item.name == "item"
    assert item.raw_type is str


def test_getter_fields_with_configured_prefixes() -> None:
    assert getter_fields(Remote) == []
    settings = InferenceSettings(getter_prefixes=("fetch",))
    assert [f.name for f in getter_fields(Remote, settings)] == ["name"]


def test_setter_fields_with_configured_prefix() -> None:
    fields = setter_fields(Builder, InferenceSettings(setter_prefix="with"))
    assert [(f.name, f.nullable, f.position) for f in fields] == [
        ("name", False, None),
        ("size", True, None),
    ]
    assert [f.name for f in setter_fields(Builder)] == ["ignored"]


def test_setter_fields_propagate_arity_errors() -> None:
    with pytest.raises(InvalidSetterArity):
        setter_fields(BadSetter)


def test_validate_field_numbers_accepts_empty() -> None:
    validate_field_numbers([])


def test_settings_case_format_is_the_default_format() -> None:
    settings = InferenceSettings(case_format=CaseFormat.UPPER_UNDERSCORE)
    assert [f.name for f in member_fields(Shipment, settings)] == [
        "SHIPMENT_ID",
        "ITEMS",
        "WEIGHT",
    ]
    assert [f.name for f in getter_fields(Account, settings)] == ["ID", "OPEN", "BALANCE"]
    assert [f.name for f in setter_fields(Builder, settings)] == ["IGNORED"]


def test_class_case_format_beats_settings_case_format() -> None:
    settings = InferenceSettings(case_format=CaseFormat.UPPER_UNDERSCORE)
    assert [f.name for f in member_fields(Camel, settings)] == ["userId", "createdAt"]
