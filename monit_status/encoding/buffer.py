"""
Append-only JSON text builder used for one status document.

Values are appended in a single pass; the builder inserts separators and
keeps track of open objects and arrays so every document it hands out is
balanced. Numbers are written with the fixed precision the consumers
expect rather than Python's shortest float repr.
"""

import math
from typing import List, Optional, Union

from monit_status.encoding.escape import escape_json
from monit_status.exceptions import StatusDocumentError


class _Scope:
    __slots__ = ("closer", "empty")

    def __init__(self, closer: str):
        self.closer = closer
        self.empty = True


class StatusBuffer:
    """
    JSON builder scoped to one render call.

    Use as a context manager; the accumulated text is released on exit,
    whether the render succeeded or raised.
    """

    def __init__(self):
        self._parts: List[str] = []
        self._scopes: List[_Scope] = []

    def __enter__(self) -> "StatusBuffer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False

    def release(self) -> None:
        self._parts.clear()
        self._scopes.clear()

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def _start_member(self, key: Optional[str]) -> None:
        if self._scopes:
            scope = self._scopes[-1]
            if not scope.empty:
                self._parts.append(",")
            scope.empty = False
            if scope.closer == "}":
                if key is None:
                    raise StatusDocumentError("Object member written without a key")
                self._parts.append(f'"{escape_json(key)}":')
            elif key is not None:
                raise StatusDocumentError(f"Array element written with key {key!r}")
        elif key is not None:
            raise StatusDocumentError("Top level value cannot have a key")

    def begin_object(self, key: Optional[str] = None) -> "StatusBuffer":
        self._start_member(key)
        self._parts.append("{")
        self._scopes.append(_Scope("}"))
        return self

    def begin_array(self, key: Optional[str] = None) -> "StatusBuffer":
        self._start_member(key)
        self._parts.append("[")
        self._scopes.append(_Scope("]"))
        return self

    def _end(self, closer: str) -> "StatusBuffer":
        if not self._scopes or self._scopes[-1].closer != closer:
            raise StatusDocumentError(f"Unbalanced '{closer}'")
        self._scopes.pop()
        self._parts.append(closer)
        return self

    def end_object(self) -> "StatusBuffer":
        return self._end("}")

    def end_array(self) -> "StatusBuffer":
        return self._end("]")

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def field(self, key: Optional[str], value: Union[str, int, bool, None]) -> "StatusBuffer":
        """
        Append a string or integer member.

        Strings are escaped, ``None`` becomes an empty string and booleans
        are written as 0/1.
        """
        self._start_member(key)
        if value is None or isinstance(value, str):
            self._parts.append(f'"{escape_json(value)}"')
        else:
            self._parts.append(str(int(value)))
        return self

    def item(self, value: Union[str, int, bool, None]) -> "StatusBuffer":
        """Append an array element."""
        return self.field(None, value)

    def fixed(self, key: Optional[str], value: float, digits: int) -> "StatusBuffer":
        """Append a float with exactly ``digits`` decimals."""
        self._start_member(key)
        value = float(value)
        # JSON has no NaN/Infinity
        if not math.isfinite(value):
            value = 0.0
        self._parts.append(f"{value:.{digits}f}")
        return self

    def octal(self, key: Optional[str], value: int) -> "StatusBuffer":
        """Append an integer written with octal digits (file modes)."""
        self._start_member(key)
        self._parts.append(f"{int(value):o}")
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def depth(self) -> int:
        return len(self._scopes)

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def to_string(self) -> str:
        """Return the document; all scopes must be closed."""
        if self._scopes:
            raise StatusDocumentError(f"{len(self._scopes)} scope(s) still open")
        return "".join(self._parts)
