"""Cookie values and the ordered collection of cookies sent with a request."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Cookie:
    """A single HTTP cookie as stored by a cookie jar."""

    name: str
    value: str
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = _EPOCH


class Cookies:
    """An ordered list of cookies.

    ``encode`` tells whether cookie values should be URL-encoded when they
    are sent; RFC 6265 recommends it but does not require it.
    """

    def __init__(self, cookies: Cookie | Iterable[Cookie] = (), encode: bool = True) -> None:
        if isinstance(cookies, Cookie):
            cookies = (cookies,)
        self._cookies: list[Cookie] = list(cookies)
        self.encode = encode

    def __getitem__(self, pos: int) -> Cookie:
        return self._cookies[pos]

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def append(self, cookie: Cookie) -> None:
        """Add a cookie at the end."""
        self._cookies.append(cookie)

    def pop(self) -> Cookie:
        """Remove and return the last cookie."""
        if not self._cookies:
            raise IndexError("pop from empty Cookies")
        return self._cookies.pop()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookies):
            return NotImplemented
        return self.encode == other.encode and self._cookies == other._cookies

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cookies({self._cookies!r}, encode={self.encode!r})"