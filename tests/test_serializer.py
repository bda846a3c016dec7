import pytest

from jsonconftool.parser import parse_json_string
from jsonconftool.serializer import (
    MAX_DEPTH,
    MAX_INDENT,
    escape_string,
    format_number,
    json_to_string,
)


@pytest.mark.parametrize("number", [0.0, 1.0, -3.0, 0.5, 2.25, 42.0, 1e20])
def test_format_number_round_trips(number):
    assert float(format_number(number)) == number


def test_format_number_drops_trailing_zero_for_whole_numbers():
    assert format_number(8080.0) == "8080"


def test_escape_string_escapes_specials():
    assert escape_string('a"b\\c\nd\te') == 'a\\"b\\\\c\\nd\\te'


def test_escape_string_leaves_plain_text():
    assert escape_string("server.host") == "server.host"


@pytest.mark.parametrize("value", [None, True, False])
def test_literals(value):
    assert parse_json_string(json_to_string(value)) is value


def test_compact_array():
    assert json_to_string([1.0, True, None, "x"]) == '[1,true,null,"x"]'


def test_object_members_most_recent_first():
    assert json_to_string({"a": 1, "b": 2}) == '{"b":2,"a":1}'


def test_pretty_array_layout():
    assert json_to_string([1, 2], True) == "[\n  1, \n  2\n]"


@pytest.mark.parametrize("pretty", [False, True])
def test_empty_containers(pretty):
    assert json_to_string([], pretty) == "[]"
    assert json_to_string({}, pretty) == "{}"


@pytest.mark.parametrize("pretty", [False, True])
def test_round_trip_through_parser(pretty):
    value = {
        "server": {"host": "localhost", "port": 8080.0},
        "flags": [True, False, None],
        "ratio": 0.5,
        "nested": [{"a": [1.0, 2.0]}, []],
    }
    assert parse_json_string(json_to_string(value, pretty)) == value


def test_deep_nesting_is_cut_with_null():
    value: list = []
    for _ in range(MAX_DEPTH + 100):
        value = [value]
    result = json_to_string(value)
    assert result.count("[") == MAX_DEPTH + 1
    assert "null" in result


def test_pretty_indent_is_capped():
    value: list = [1]
    for _ in range(80):
        value = [value]
    lines = json_to_string(value, True).split("\n")
    widths = [len(line) - len(line.lstrip(" ")) for line in lines]
    assert max(widths) == MAX_INDENT


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        json_to_string({"a": object()})