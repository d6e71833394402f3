"""
Closed JSON value model.

Six concrete variants (object, array, string, number, boolean, null) share
one rendering operation, to_text(). JSONObject is the centrepiece: an
insertion-ordered mapping of string keys to values.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Set
from typing import Any

from ._config import DEFAULT_RENDER_CONFIG
from ._config import RenderConfig
from ._errors import InvalidKeyError
from ._escape import escape_value
from ._profile import ProfileContext


def _render(value: JSONValue | None, config: RenderConfig) -> str:
    """Renders a stored value; unset slots render as null."""
    if value is None:
        return "null"
    return value.to_text(config)


class _Variant:
    """
    Shared kind accessors for all value variants.

    Each is_* method returns the value itself when it is of that kind and
    None otherwise, so callers can narrow without isinstance chains.
    """

    __slots__ = ()

    def is_object(self) -> JSONObject | None:
        return None

    def is_array(self) -> JSONArray | None:
        return None

    def is_string(self) -> JSONString | None:
        return None

    def is_number(self) -> JSONNumber | None:
        return None

    def is_boolean(self) -> JSONBoolean | None:
        return None

    def is_null(self) -> JSONNull | None:
        return None

    def to_text(self, config: RenderConfig | None = None) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_text()


class JSONNull(_Variant):
    """The JSON null value. There is exactly one instance."""

    __slots__ = ()
    _instance: JSONNull | None = None

    def __new__(cls) -> JSONNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> JSONNull:
        return cls()

    def is_null(self) -> JSONNull:
        return self

    def to_text(self, config: RenderConfig | None = None) -> str:
        return "null"

    def __repr__(self) -> str:
        return "JSONNull()"


class JSONBoolean(_Variant):
    """A JSON boolean. Use JSONBoolean.of() to get the shared instances."""

    __slots__ = ("_value",)
    _instances: dict[bool, JSONBoolean] = {}

    def __init__(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError("value must be a boolean")
        self._value = value

    @classmethod
    def of(cls, value: bool) -> JSONBoolean:
        if value not in cls._instances:
            cls._instances[value] = cls(value)
        return cls._instances[value]

    @property
    def value(self) -> bool:
        return self._value

    def is_boolean(self) -> JSONBoolean:
        return self

    def to_text(self, config: RenderConfig | None = None) -> str:
        return "true" if self._value else "false"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONBoolean):
            return NotImplemented
        return self._value is other._value

    def __hash__(self) -> int:
        return hash((JSONBoolean, self._value))

    def __repr__(self) -> str:
        return f"JSONBoolean({self._value!r})"


class JSONNumber(_Variant):
    """A JSON number backed by a Python int or float."""

    __slots__ = ("_value",)

    def __init__(self, value: int | float) -> None:
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"value must be int or float, not {type(value).__name__}"
            raise TypeError(msg)
        self._value = value

    @property
    def value(self) -> int | float:
        return self._value

    def is_number(self) -> JSONNumber:
        return self

    def to_text(self, config: RenderConfig | None = None) -> str:
        n = self._value
        if isinstance(n, float) and (math.isnan(n) or math.isinf(n)):
            msg = "Out of range float values are not JSON compliant"
            raise ValueError(msg)
        return str(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONNumber):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((JSONNumber, self._value))

    def __repr__(self) -> str:
        return f"JSONNumber({self._value!r})"


class JSONString(_Variant):
    """A JSON string."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            msg = f"value must be str, not {type(value).__name__}"
            raise TypeError(msg)
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def is_string(self) -> JSONString:
        return self

    def to_text(self, config: RenderConfig | None = None) -> str:
        config = config or DEFAULT_RENDER_CONFIG
        return escape_value(self._value, config.ensure_ascii)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONString):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((JSONString, self._value))

    def __repr__(self) -> str:
        return f"JSONString({self._value!r})"


class JSONArray(_Variant):
    """
    A mutable JSON array.

    Setting an index past the end grows the array; the gap is filled with
    unset slots that read back as None and render as null.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[JSONValue] | None = None) -> None:
        self._elements: list[JSONValue | None] = (
            list(elements) if elements is not None else []
        )

    def get(self, index: int) -> JSONValue | None:
        """Returns the element at index, or None when out of range."""
        if 0 <= index < len(self._elements):
            return self._elements[index]
        return None

    def set(self, index: int, value: JSONValue) -> JSONValue | None:
        """Stores value at index and returns the element it replaced."""
        if index < 0:
            msg = f"index must be non-negative, got {index}"
            raise IndexError(msg)
        if index >= len(self._elements):
            self._elements.extend([None] * (index - len(self._elements) + 1))
        previous = self._elements[index]
        self._elements[index] = value
        return previous

    def append(self, value: JSONValue) -> None:
        self._elements.append(value)

    def size(self) -> int:
        return len(self._elements)

    def is_array(self) -> JSONArray:
        return self

    def to_text(self, config: RenderConfig | None = None) -> str:
        config = config or DEFAULT_RENDER_CONFIG
        with ProfileContext("render_array", len(self._elements)):
            return (
                "["
                + ", ".join(_render(item, config) for item in self._elements)
                + "]"
            )

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[JSONValue | None]:
        return iter(list(self._elements))

    def __getitem__(self, index: int) -> JSONValue | None:
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONArray):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash((JSONArray, tuple(self._elements)))

    def __repr__(self) -> str:
        return f"JSONArray({self._elements!r})"


class KeySnapshot(Set[str]):
    """
    Immutable, ordered copy of an object's keys at one point in time.

    Iteration follows the object's insertion order as it was when the
    snapshot was taken. Membership is answered from the copy alone.
    """

    __slots__ = ("_keys", "_members")

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._keys = tuple(keys)
        self._members = frozenset(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"KeySnapshot({list(self._keys)!r})"


class JSONObject(_Variant):
    """
    A JSON object: string keys bound to JSON values in insertion order.

    Overwriting a key keeps its original position. Equality and hashing
    ignore order; rendering does not.
    """

    __slots__ = ("_properties",)

    def __init__(
        self,
        pairs: Mapping[str, JSONValue]
        | Iterable[tuple[str, JSONValue]]
        | None = None,
    ) -> None:
        self._properties: dict[str, JSONValue] = {}
        if pairs is None:
            return
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in pairs:
            self.put(key, value)

    def contains_key(self, key: Any) -> bool:
        """Tests whether a property with exactly this key exists."""
        return isinstance(key, str) and key in self._properties

    def get(self, key: str) -> JSONValue | None:
        """
        Returns the value bound to key, or None if there is no such property.

        Raises InvalidKeyError if key is None or not a string.
        """
        if not isinstance(key, str):
            raise InvalidKeyError(key)
        return self._properties.get(key)

    def put(self, key: str, value: JSONValue) -> JSONValue | None:
        """
        Binds key to value, overwriting any existing binding in place.

        Returns the previous value, or None if the property is new. Raises
        InvalidKeyError if key is None or not a string; the object is left
        untouched in that case.
        """
        if not isinstance(key, str):
            raise InvalidKeyError(key)
        previous = self._properties.get(key)
        self._properties[key] = value
        return previous

    def key_set(self) -> KeySnapshot:
        """Returns an immutable snapshot of the keys in insertion order."""
        return KeySnapshot(self._properties)

    def keys(self) -> KeySnapshot:
        return self.key_set()

    def values(self) -> list[JSONValue]:
        return list(self._properties.values())

    def items(self) -> list[tuple[str, JSONValue]]:
        return list(self._properties.items())

    def size(self) -> int:
        return len(self._properties)

    def is_object(self) -> JSONObject:
        return self

    def to_text(self, config: RenderConfig | None = None) -> str:
        """
        Renders the object as JSON text in insertion order.

        Properties are written as "key":value and separated by a comma and
        a single space; an empty object renders as {}.
        """
        config = config or DEFAULT_RENDER_CONFIG
        with ProfileContext("render_object", len(self._properties)):
            entries = [
                escape_value(key, config.ensure_ascii)
                + ":"
                + _render(value, config)
                for key, value in self.items()
            ]
            return "{" + ", ".join(entries) + "}"

    def __getitem__(self, key: str) -> JSONValue:
        value = self.get(key)
        if value is None and key not in self._properties:
            raise KeyError(key)
        return value  # type: ignore[return-value]

    def __setitem__(self, key: str, value: JSONValue) -> None:
        self.put(key, value)

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.key_set())

    def __len__(self) -> int:
        return len(self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONObject):
            return NotImplemented
        return self._properties == other._properties

    def __hash__(self) -> int:
        return hash((JSONObject, frozenset(self._properties.items())))

    def __repr__(self) -> str:
        return f"JSONObject({self._properties!r})"


# Closed set of value variants
type JSONValue = (
    JSONObject | JSONArray | JSONString | JSONNumber | JSONBoolean | JSONNull
)

NULL = JSONNull.instance()
TRUE = JSONBoolean.of(True)
FALSE = JSONBoolean.of(False)
