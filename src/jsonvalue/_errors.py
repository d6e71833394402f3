"""Error taxonomy for JSON value trees."""

from typing import Any


class JSONValueError(ValueError):
    """Base class for errors raised by jsonvalue."""


class InvalidKeyError(JSONValueError, TypeError):
    """
    Rejects a property key that is not a string.

    Raised by JSONObject.get and JSONObject.put before any mapping change,
    so a failed assignment never leaves a partial update behind.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        if key is None:
            msg = "key must not be None"
        else:
            msg = f"keys must be strings, not {type(key).__name__}"
        super().__init__(msg)
