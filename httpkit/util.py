"""Parsing of raw header blocks and cookie lists, URL escaping and small helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Any
from urllib.parse import quote, unquote

from .cookies import Cookie, Cookies

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_TRAILING_WS = "\t\n\r "
_LEADING_WS = "\t "
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)
_TIME_MIN = -(2**63)
_TIME_MAX = 2**63 - 1


class _CookieField(IntEnum):
    DOMAIN = 0
    INCLUDE_SUBDOMAINS = 1
    PATH = 2
    HTTPS_ONLY = 3
    EXPIRES = 4
    NAME = 5
    VALUE = 6


_COOKIE_FIELD_COUNT = len(_CookieField)


class Header(MutableMapping[str, str]):
    """A case-insensitive mapping of header names to values.

    Looking up a name that is not present yields an empty string. A name keeps
    the spelling it was first stored with.
    """

    def __init__(self, data: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._items: dict[str, tuple[str, str]] = {}
        if data is not None:
            self.update(data)

    def __getitem__(self, key: str) -> str:
        entry = self._items.get(key.lower())
        return "" if entry is None else entry[1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = key.lower()
        entry = self._items.get(folded)
        self._items[folded] = (entry[0] if entry else key, value)

    def __delitem__(self, key: str) -> None:
        folded = key.lower()
        if folded not in self._items:
            raise KeyError(key)
        self._items.pop(folded)

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._items

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._items.get(key.lower())
        return default if entry is None else entry[1]

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"


def split(to_split: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``; a trailing delimiter yields no final empty token."""
    if not to_split:
        return []
    tokens = to_split.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_cookies(raw_cookies: Iterable[str]) -> Cookies:
    """Build cookies from tab-separated cookie-jar lines.

    Each line holds domain, include-subdomains flag, path, https-only flag,
    expiry timestamp, name and value; missing fields count as empty.
    """
    cookies = Cookies()
    for line in raw_cookies:
        tokens = split(line, "\t")
        tokens += [""] * (_COOKIE_FIELD_COUNT - len(tokens))
        expires = timestamp_to_time(tokens[_CookieField.EXPIRES])
        cookies.append(
            Cookie(
                name=tokens[_CookieField.NAME],
                value=tokens[_CookieField.VALUE],
                domain=tokens[_CookieField.DOMAIN],
                include_subdomains=is_true(tokens[_CookieField.INCLUDE_SUBDOMAINS]),
                path=tokens[_CookieField.PATH],
                https_only=is_true(tokens[_CookieField.HTTPS_ONLY]),
                expires=_EPOCH + timedelta(seconds=expires),
            )
        )
    return cookies


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_header(headers: str) -> tuple[Header, str, str]:
    """Parse a raw header block into ``(header, status_line, reason)``.

    Every status line (``HTTP/...``) discards the headers gathered so far, so
    after redirects only the last response's headers remain.
    """
    header = Header()
    status_line = ""
    reason = ""
    for line in _lines(headers):
        if line.startswith("HTTP/"):
            line = line.rstrip(_TRAILING_WS)
            status_line = line
            first = next((i for i, ch in enumerate(line) if ch in _LEADING_WS), -1)
            if first != -1:
                second = next(
                    (i for i in range(first + 1, len(line)) if line[i] in _LEADING_WS), -1
                )
                if second != -1:
                    line = line[second + 1 :]
                    reason = line
            header.clear()

        if line:
            name, colon, value = line.partition(":")
            if colon:
                header[name] = value.lstrip(_LEADING_WS).rstrip(_TRAILING_WS)
    return header, status_line, reason


def url_encode(s: str) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(s, safe="")


def url_decode(s: str) -> str:
    """Decode percent escapes; ``+`` is left as it is."""
    return unquote(s)


def is_true(s: str) -> bool:
    """Tell whether ``s`` is ``true`` in any letter case."""
    return s.lower() == "true"


def timestamp_to_time(st: str) -> int:
    """Read a leading integer timestamp from ``st``.

    Leading whitespace is skipped and anything after the digits is ignored.
    """
    match = _INT_PREFIX.match(st)
    if match is None:
        raise ValueError(f"no timestamp in {st!r}")
    value = int(match.group(1))
    if not _TIME_MIN <= value <= _TIME_MAX:
        raise OverflowError(f"timestamp out of range: {match.group(1)}")
    return value