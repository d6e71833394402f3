"""
JSON text rendering tests.

Validates the exact text produced by every value variant, the object
layout rules and string escaping.
"""

import math

import pytest

from jsonvalue import FALSE
from jsonvalue import NULL
from jsonvalue import TRUE
from jsonvalue import JSONArray
from jsonvalue import JSONNumber
from jsonvalue import JSONObject
from jsonvalue import JSONString
from jsonvalue import RenderConfig
from jsonvalue import escape_value

from .conftest import RenderCase


def test_render_cases(render_cases: list[RenderCase]) -> None:
    """
    Validates each variant renders itself exactly.
    """
    for case in render_cases:
        assert case.value.to_text() == case.expected_text, case.description
        assert str(case.value) == case.expected_text, case.description


def test_empty_object() -> None:
    """
    Validates the empty object has no separators.
    """
    assert JSONObject().to_text() == "{}"


def test_single_property_layout() -> None:
    """
    Validates no space after the colon.
    """
    obj = JSONObject()
    obj.put("x", JSONNumber(5))
    assert obj.to_text() == '{"x":5}'


def test_end_to_end_record(person: JSONObject) -> None:
    """
    Validates insertion order and comma-space separators.
    """
    assert person.to_text() == '{"name":"Ann", "age":30, "active":true}'


def test_keys_are_escaped() -> None:
    """
    Validates keys go through string escaping.
    """
    obj = JSONObject([('say "hi"\n', NULL)])
    assert obj.to_text() == '{"say \\"hi\\"\\n":null}'


def test_unset_values_render_as_null() -> None:
    """
    Validates None values and array gaps render as null.
    """
    obj = JSONObject()
    obj.put("missing", None)  # type: ignore[arg-type]
    assert obj.to_text() == '{"missing":null}'

    arr = JSONArray()
    arr.set(2, TRUE)
    assert arr.to_text() == "[null, null, true]"


def test_ensure_ascii_config() -> None:
    """
    Validates RenderConfig reaches nested keys and values.
    """
    obj = JSONObject([("café", JSONArray([JSONString("ü")]))])
    assert obj.to_text() == '{"café":["ü"]}'
    assert (
        obj.to_text(RenderConfig(ensure_ascii=True))
        == '{"caf\\u00e9":["\\u00fc"]}'
    )


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_numbers_rejected(value: float) -> None:
    """
    Validates out of range floats cannot be rendered.
    """
    obj = JSONObject([("n", JSONNumber(value))])
    with pytest.raises(ValueError, match="not JSON compliant"):
        obj.to_text()


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", '""'),
        ("plain", '"plain"'),
        ('"', '"\\""'),
        ("\\", '"\\\\"'),
        ("\b\f\n\r\t", '"\\b\\f\\n\\r\\t"'),
        ("\x00\x1f", '"\\u0000\\u001f"'),
        ("/", '"/"'),
        ("é", '"é"'),
    ],
)
def test_escape_value(text: str, expected: str) -> None:
    """
    Validates quoting and escaping of string literals.
    """
    assert escape_value(text) == expected


def test_escape_value_ensure_ascii() -> None:
    """
    Validates non-ASCII escaping including astral code points.
    """
    assert escape_value("é", ensure_ascii=True) == '"\\u00e9"'
    assert escape_value("\U0001f600", ensure_ascii=True) == '"\\ud83d\\ude00"'
    assert escape_value("\x7f", ensure_ascii=True) == '"\x7f"'


def test_escape_value_rejects_non_string() -> None:
    """
    Validates escaping only accepts str.
    """
    with pytest.raises(TypeError):
        escape_value(b"bytes")  # type: ignore[arg-type]


def test_render_config_validation() -> None:
    """
    Validates RenderConfig type checks.
    """
    with pytest.raises(TypeError, match="ensure_ascii must be a boolean"):
        RenderConfig(ensure_ascii=1)  # type: ignore[arg-type]


def test_booleans_are_shared() -> None:
    """
    Validates boolean interning.
    """
    assert TRUE.is_boolean() is TRUE
    assert FALSE.value is False
    assert TRUE != FALSE
