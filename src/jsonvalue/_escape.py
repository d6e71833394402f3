"""JSON string literal escaping."""

from ._profile import ProfileContext

_ASCII_LIMIT = 127
_CONTROL_LIMIT = 0x20
_BMP_LIMIT = 0xFFFF

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_code_point(code_point: int) -> str:
    if code_point > _BMP_LIMIT:
        # Astral code points become a UTF-16 surrogate pair
        offset = code_point - 0x10000
        high = 0xD800 + (offset >> 10)
        low = 0xDC00 + (offset & 0x3FF)
        return f"\\u{high:04x}\\u{low:04x}"
    return f"\\u{code_point:04x}"


def escape_value(text: str, ensure_ascii: bool = False) -> str:
    """
    Renders a string as a double-quoted JSON string literal.

    Quotes, backslashes and the usual whitespace controls use their short
    escapes; every other control character becomes a \\u escape. With
    ensure_ascii, non-ASCII characters are escaped as well.
    """
    if not isinstance(text, str):
        msg = f"expected str, not {type(text).__name__}"
        raise TypeError(msg)

    with ProfileContext("escape_value", len(text)):
        result = ['"']
        for char in text:
            short = _SHORT_ESCAPES.get(char)
            if short is not None:
                result.append(short)
                continue
            code_point = ord(char)
            if code_point < _CONTROL_LIMIT or (
                ensure_ascii and code_point > _ASCII_LIMIT
            ):
                result.append(_escape_code_point(code_point))
            else:
                result.append(char)
        result.append('"')
        return "".join(result)
