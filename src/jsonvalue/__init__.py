"""
Ordered JSON value model.

Represents JSON documents as trees of value objects. JSONObject keeps its
properties in insertion order and renders them back in that order, while
comparing equal to any object holding the same properties.
"""

from ._config import PROFILE_HOT_PATHS
from ._config import RenderConfig
from ._convert import from_python
from ._convert import to_python
from ._errors import InvalidKeyError
from ._errors import JSONValueError
from ._escape import escape_value
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._profile import log_hot_path_stats
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
from ._values import KeySnapshot

__version__ = "0.1.0"

__all__ = [
    "FALSE",
    "NULL",
    "PROFILE_HOT_PATHS",
    "TRUE",
    "HotPathStats",
    "InvalidKeyError",
    "JSONArray",
    "JSONBoolean",
    "JSONNull",
    "JSONNumber",
    "JSONObject",
    "JSONString",
    "JSONValue",
    "JSONValueError",
    "KeySnapshot",
    "RenderConfig",
    "clear_hot_path_stats",
    "escape_value",
    "from_python",
    "get_hot_path_stats",
    "log_hot_path_stats",
    "to_python",
]
