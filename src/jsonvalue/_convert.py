"""Bridges between plain Python data and JSON value trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ._errors import InvalidKeyError
from ._values import FALSE
from ._values import NULL
from ._values import TRUE
from ._values import JSONArray
from ._values import JSONBoolean
from ._values import JSONNull
from ._values import JSONNumber
from ._values import JSONObject
from ._values import JSONString
from ._values import JSONValue

_VARIANTS = (JSONObject, JSONArray, JSONString, JSONNumber, JSONBoolean, JSONNull)


def from_python(obj: Any) -> JSONValue:  # noqa: PLR0911
    """
    Builds a value tree from plain Python data.

    Mappings keep their iteration order. Values that are already JSON
    values are used as they are.
    """
    if isinstance(obj, _VARIANTS):
        return obj
    elif obj is None:
        return NULL
    elif obj is True:
        return TRUE
    elif obj is False:
        return FALSE
    elif isinstance(obj, str):
        return JSONString(obj)
    elif isinstance(obj, int | float):
        return JSONNumber(obj)
    elif isinstance(obj, Mapping):
        result = JSONObject()
        for key, value in obj.items():
            if not isinstance(key, str):
                raise InvalidKeyError(key)
            result.put(key, from_python(value))
        return result
    elif isinstance(obj, list | tuple):
        return JSONArray(from_python(item) for item in obj)
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)


def to_python(value: JSONValue | None) -> Any:
    """Converts a value tree back to dicts, lists and scalars."""
    if value is None or isinstance(value, JSONNull):
        return None
    elif isinstance(value, JSONBoolean | JSONNumber | JSONString):
        return value.value
    elif isinstance(value, JSONArray):
        return [to_python(item) for item in value]
    elif isinstance(value, JSONObject):
        return {key: to_python(item) for key, item in value.items()}
    else:
        msg = f"Object of type {type(value).__name__} is not a JSON value"
        raise TypeError(msg)
