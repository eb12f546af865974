import pytest

from typefield.core.casing import CaseFormat, case_format_from_value, convert_case, split_words


@pytest.mark.parametrize(
    "name,target,expected",
    [
        ("userId", CaseFormat.UPPER_UNDERSCORE, "USER_ID"),
        ("userId", CaseFormat.LOWER_UNDERSCORE, "user_id"),
        ("userId", CaseFormat.UPPER_CAMEL, "UserId"),
        ("userId", CaseFormat.LOWER_HYPHEN, "user-id"),
        ("user_id", CaseFormat.LOWER_CAMEL, "userId"),
        ("user_id", CaseFormat.UPPER_SNAKE, "USER_ID"),
        ("USER_ID", CaseFormat.LOWER_CAMEL, "userId"),
        ("HTTPServerPort", CaseFormat.LOWER_UNDERSCORE, "http_server_port"),
        ("amount", CaseFormat.UPPER_CAMEL, "Amount"),
        ("line2Total", CaseFormat.LOWER_UNDERSCORE, "line2_total"),
    ],
)
def test_convert_case(name: str, target: CaseFormat, expected: str) -> None:
    assert convert_case(name, target) == expected


def test_convert_case_empty_name() -> None:
    assert convert_case("", CaseFormat.UPPER_CAMEL) == ""


def test_split_words_mixed_conventions() -> None:
    assert split_words("getHTTPServer_port") == ["get", "http", "server", "port"]
    assert split_words("user-id") == ["user", "id"]


def test_snake_aliases_are_the_underscore_members() -> None:
    assert CaseFormat.UPPER_SNAKE is CaseFormat.UPPER_UNDERSCORE
    assert CaseFormat.LOWER_SNAKE is CaseFormat.LOWER_UNDERSCORE


@pytest.mark.parametrize(
    "value,expected",
    [
        ("upper_underscore", CaseFormat.UPPER_UNDERSCORE),
        ("UPPER_SNAKE", CaseFormat.UPPER_UNDERSCORE),
        ("lower_camel", CaseFormat.LOWER_CAMEL),
        (" lower_hyphen ", CaseFormat.LOWER_HYPHEN),
    ],
)
def test_case_format_from_value(value: str, expected: CaseFormat) -> None:
    assert case_format_from_value(value) is expected


@pytest.mark.parametrize("bad", ["kebab", "Upper Camel", ""])
def test_case_format_from_value_rejects_unknown(bad: str) -> None:
    with pytest.raises(ValueError):
        case_format_from_value(bad)
