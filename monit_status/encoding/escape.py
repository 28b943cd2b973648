"""
Escaping of free text for embedding inside JSON string literals.
"""

import re
from typing import Optional, Union

_SHORT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_NEEDS_ESCAPE = re.compile(r'[\\"\x00-\x1f]')
_SURROGATE = re.compile("[\ud800-\udfff]")


def _replace(match: "re.Match[str]") -> str:
    char = match.group(0)
    return _SHORT_ESCAPES.get(char) or f"\\u{ord(char):04x}"


def escape_json(value: Optional[Union[str, bytes]]) -> str:
    """
    Escape a string so it can be placed between double quotes in JSON.

    Backslash and double quote are escaped, as is every control character
    below 0x20. Everything else, including non-ASCII text, passes through
    unchanged. ``None`` and empty input yield an empty string; bytes are
    decoded as UTF-8 with invalid sequences replaced. Lone surrogates in
    text (as left by ``surrogateescape`` decoding) are replaced the same
    way, so the result always encodes as UTF-8.
    """
    if not value:
        return ""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    elif _SURROGATE.search(value):
        value = _SURROGATE.sub("\ufffd", value)
    return _NEEDS_ESCAPE.sub(_replace, value)
