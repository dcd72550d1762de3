"""Request and connection timeouts measured in milliseconds."""

from __future__ import annotations

import struct
from datetime import timedelta

_LONG_BITS = struct.calcsize("l") * 8
_LONG_MAX = 2 ** (_LONG_BITS - 1) - 1
_LONG_MIN = -(2 ** (_LONG_BITS - 1))


class Timeout:
    """A timeout given as a ``timedelta`` or a whole number of milliseconds."""

    def __init__(self, duration: timedelta | int) -> None:
        if isinstance(duration, timedelta):
            self.ms = duration // timedelta(milliseconds=1)
        elif isinstance(duration, int) and not isinstance(duration, bool):
            self.ms = duration
        else:
            raise TypeError(f"timeout must be a timedelta or int, not {type(duration).__name__}")

    def milliseconds(self) -> int:
        """Return the timeout in milliseconds, checked against the C ``long`` range."""
        if self.ms > _LONG_MAX:
            raise OverflowError(f"Timeout: timeout value overflow: {self.ms} ms.")
        if self.ms < _LONG_MIN:
            raise OverflowError(f"Timeout: timeout value underflow: {self.ms} ms.")
        return self.ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeout):
            return NotImplemented
        return self.ms == other.ms

    def __hash__(self) -> int:
        return hash(self.ms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ms})"


class ConnectTimeout(Timeout):
    """The timeout for establishing a connection."""