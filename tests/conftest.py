"""
Pytest configuration and shared fixtures for jsonvalue tests.

Provides immutable test data fixtures for building and rendering value
trees.
"""

from dataclasses import dataclass

import pytest

from jsonvalue import FALSE
from jsonvalue import NULL
from jsonvalue import TRUE
from jsonvalue import JSONArray
from jsonvalue import JSONNumber
from jsonvalue import JSONObject
from jsonvalue import JSONString
from jsonvalue import JSONValue


@dataclass(frozen=True)
class RenderCase:
    """
    Immutable container for a rendering test case.

    Holds a value tree and the exact JSON text it must render to.
    """

    description: str
    value: JSONValue
    expected_text: str


@pytest.fixture
def person_pairs() -> list[tuple[str, JSONValue]]:
    """Properties of a small record, in their intended order."""
    return [
        ("name", JSONString("Ann")),
        ("age", JSONNumber(30)),
        ("active", TRUE),
    ]


@pytest.fixture
def person(person_pairs: list[tuple[str, JSONValue]]) -> JSONObject:
    """An object built from person_pairs through repeated put calls."""
    obj = JSONObject()
    for key, value in person_pairs:
        obj.put(key, value)
    return obj


@pytest.fixture
def render_cases() -> list[RenderCase]:
    """
    Provides one rendering case per value variant plus nested containers.
    """
    nested = JSONObject()
    nested.put("inner", JSONArray([JSONNumber(1), NULL]))
    nested.put("flag", FALSE)

    return [
        RenderCase("null", NULL, "null"),
        RenderCase("true", TRUE, "true"),
        RenderCase("false", FALSE, "false"),
        RenderCase("integer", JSONNumber(42), "42"),
        RenderCase("negative float", JSONNumber(-2.5), "-2.5"),
        RenderCase("string", JSONString("hi"), '"hi"'),
        RenderCase("empty array", JSONArray(), "[]"),
        RenderCase(
            "mixed array",
            JSONArray([JSONNumber(1), JSONString("a"), TRUE]),
            '[1, "a", true]',
        ),
        RenderCase("empty object", JSONObject(), "{}"),
        RenderCase(
            "nested object",
            nested,
            '{"inner":[1, null], "flag":false}',
        ),
    ]
