import pytest

from jsonconftool.values import JsonConfigError, JsonType, type_of


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, JsonType.NULL),
        (True, JsonType.BOOL),
        (False, JsonType.BOOL),
        (3.5, JsonType.NUMBER),
        (7, JsonType.NUMBER),
        ("text", JsonType.STRING),
        ("", JsonType.STRING),
        ([1, 2], JsonType.ARRAY),
        ([], JsonType.ARRAY),
        ({"a": 1}, JsonType.OBJECT),
        ({}, JsonType.OBJECT),
    ],
)
def test_type_of(value, expected):
    assert type_of(value) is expected


def test_bool_is_not_number():
    assert type_of(True) is not JsonType.NUMBER
    assert type_of(0) is JsonType.NUMBER


@pytest.mark.parametrize("value", [object(), (1, 2), {1, 2}, b"bytes"])
def test_type_of_rejects_unsupported(value):
    with pytest.raises(TypeError):
        type_of(value)


def test_config_error_carries_message():
    error = JsonConfigError("boom")
    assert issubclass(JsonConfigError, Exception)
    assert str(error) == "boom"
    assert error.args == ("boom",)


def test_kinds_are_distinct():
    kinds = {type_of(v) for v in (None, True, 1.0, "s", [], {})}
    assert kinds == set(JsonType)