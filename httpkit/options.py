"""Option values that describe an HTTP request: credentials, bodies, files and limits."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Union

from .util import url_encode

_PORT_MAX = 0xFFFF
_BytesLike = (bytes, bytearray, memoryview)


class AuthMode(Enum):
    """The HTTP authentication scheme to use."""

    BASIC = auto()
    DIGEST = auto()
    NTLM = auto()
    NEGOTIATE = auto()
    ANY = auto()
    ANYSAFE = auto()


class Authentication:
    """User credentials together with the scheme they are sent with."""

    def __init__(self, username: str, password: str, auth_mode: AuthMode) -> None:
        self.username = username
        self.password = password
        self.auth_mode = auth_mode

    @property
    def auth_string(self) -> str:
        """The credentials in ``user:password`` form."""
        return f"{self.username}:{self.password}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Authentication):
            return NotImplemented
        return (self.username, self.password, self.auth_mode) == (
            other.username,
            other.password,
            other.auth_mode,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Authentication({self.username!r}, '***', {self.auth_mode})"


class Bearer:
    """A bearer token for the ``Authorization`` header."""

    def __init__(self, token: str) -> None:
        self.token = token

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bearer):
            return NotImplemented
        return self.token == other.token

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Bearer('***')"


class Buffer:
    """In-memory bytes that are uploaded as if they were a file called ``filename``."""

    def __init__(self, data: bytes | bytearray | memoryview, filename: str | os.PathLike[str]) -> None:
        if not isinstance(data, _BytesLike):
            raise TypeError(f"only byte buffers can be used, not {type(data).__name__}")
        self.data = bytes(data)
        self.filename = Path(filename)

    @property
    def datalen(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Buffer(<{self.datalen} bytes>, {str(self.filename)!r})"


@dataclass
class File:
    """A file to upload, optionally sent under a different file name."""

    filepath: str
    overridden_filename: str = ""

    def __post_init__(self) -> None:
        self.filepath = os.fspath(self.filepath)

    def has_overridden_filename(self) -> bool:
        """Tell whether the file is sent under a name of its own."""
        return bool(self.overridden_filename)


def _as_file(item: File | str | os.PathLike[str]) -> File:
    if isinstance(item, File):
        return item
    if isinstance(item, (str, os.PathLike)):
        return File(os.fspath(item))
    raise TypeError(f"expected a File or a path, not {type(item).__name__}")


class Files(list):
    """An ordered list of :class:`File`; plain paths are turned into files."""

    def __init__(self, files: File | str | os.PathLike[str] | Iterable[File | str] = ()) -> None:
        if isinstance(files, (File, str, os.PathLike)):
            files = (files,)
        super().__init__(_as_file(item) for item in files)

    def append(self, item: File | str | os.PathLike[str]) -> None:
        super().append(_as_file(item))

    def extend(self, items: Iterable[File | str]) -> None:
        super().extend(_as_file(item) for item in items)


class Body:
    """The raw bytes sent as a request body."""

    def __init__(self, data: Union[str, bytes, bytearray, memoryview, Buffer, File] = b"") -> None:
        if isinstance(data, Buffer):
            self.data = data.data
        elif isinstance(data, File):
            self.data = self.from_file(data).data
        elif isinstance(data, str):
            self.data = data.encode("utf-8")
        elif isinstance(data, _BytesLike):
            self.data = bytes(data)
        else:
            raise TypeError(f"cannot build a body from {type(data).__name__}")

    @classmethod
    def from_file(cls, file: File | str | os.PathLike[str]) -> Body:
        """Read the whole file into a body."""
        path = _as_file(file).filepath
        try:
            with open(path, "rb") as stream:
                content = stream.read()
        except OSError as exc:
            raise ValueError("Can't open the file for HTTP request body!") from exc
        return cls(content)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Body):
            return NotImplemented
        return self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Body({self.data!r})"


class CertInfo(list):
    """The text entries describing one certificate of a chain."""


class HttpVersionCode(Enum):
    """The HTTP protocol version to use for a connection."""

    VERSION_NONE = auto()
    VERSION_1_0 = auto()
    VERSION_1_1 = auto()
    VERSION_2_0 = auto()
    VERSION_2_0_TLS = auto()
    VERSION_2_0_PRIOR_KNOWLEDGE = auto()
    VERSION_3_0 = auto()
    VERSION_3_0_ONLY = auto()


@dataclass
class HttpVersion:
    """The HTTP version wanted; by default the library chooses."""

    code: HttpVersionCode = HttpVersionCode.VERSION_NONE


@dataclass
class LimitRate:
    """Download and upload limits in bytes per second; 0 means unlimited."""

    downrate: int = 0
    uprate: int = 0


class LocalPort:
    """The local port a connection is made from."""

    def __init__(self, port: int) -> None:
        if not 0 <= port <= _PORT_MAX:
            raise ValueError(f"local port out of range: {port}")
        self._port = port

    def __int__(self) -> int:
        return self._port

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LocalPort):
            return self._port == other._port
        if isinstance(other, int):
            return self._port == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._port)

    def __repr__(self) -> str:
        return f"LocalPort({self._port})"


class Part:
    """One field of a multipart form: text, a number, files or a buffer."""

    def __init__(
        self,
        name: str,
        value: Union[str, int, File, Files, Buffer],
        content_type: str = "",
    ) -> None:
        self.name = name
        self.content_type = content_type
        self.data: bytes | None = None
        self.datalen = 0
        self.is_file = False
        self.is_buffer = False
        self.files = Files()
        if isinstance(value, Buffer):
            self.value = str(value.filename)
            self.data = value.data
            self.datalen = value.datalen
            self.is_buffer = True
        elif isinstance(value, (File, Files)):
            self.value = ""
            self.files = Files(value)
            self.is_file = True
        elif isinstance(value, int) and not isinstance(value, bool):
            self.value = str(value)
        elif isinstance(value, str):
            self.value = value
        else:
            raise TypeError(f"unsupported part value: {type(value).__name__}")

    def __repr__(self) -> str:
        return f"Part({self.name!r}, {self.value!r}, {self.content_type!r})"


class Multipart:
    """The parts of a ``multipart/form-data`` body, in order."""

    def __init__(self, parts: Iterable[Part]) -> None:
        self.parts = list(parts)

    def __repr__(self) -> str:
        return f"Multipart({self.parts!r})"


class EncodedAuthentication:
    """Proxy credentials, stored URL-encoded."""

    def __init__(self, username: str = "", password: str = "") -> None:
        self.username = url_encode(username)
        self.password = url_encode(password)

    def __repr__(self) -> str:
        return f"EncodedAuthentication({self.username!r}, '***')"


class ProxyAuthentication:
    """Credentials for proxies, keyed by protocol."""

    def __init__(
        self,
        auths: Mapping[str, EncodedAuthentication]
        | Iterable[tuple[str, EncodedAuthentication]]
        | None = None,
    ) -> None:
        self._auths: dict[str, EncodedAuthentication] = dict(auths or {})

    def has(self, protocol: str) -> bool:
        """Tell whether credentials exist for ``protocol``."""
        return protocol in self._auths

    def username(self, protocol: str) -> str:
        """The encoded user name for ``protocol``; ``KeyError`` if there is none."""
        return self._auths[protocol].username

    def password(self, protocol: str) -> str:
        """The encoded password for ``protocol``; ``KeyError`` if there is none."""
        return self._auths[protocol].password


@dataclass
class ReserveSize:
    """How many bytes to reserve for the response body in advance."""

    size: int = 0

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("reserve size must not be negative")


_DEFAULT_RESOLVE_PORTS = frozenset({80, 443})


class Resolve:
    """A fixed address for a host name on the given ports (80 and 443 by default)."""

    def __init__(self, host: str, addr: str, ports: Iterable[int] | None = None) -> None:
        self.host = host
        self.addr = addr
        self.ports: set[int] = set(ports) if ports is not None else set()
        if not self.ports:
            self.ports = set(_DEFAULT_RESOLVE_PORTS)
        for port in self.ports:
            if not 0 <= port <= _PORT_MAX:
                raise ValueError(f"port out of range: {port}")

    def __repr__(self) -> str:
        return f"Resolve({self.host!r}, {self.addr!r}, {sorted(self.ports)!r})"


class UnixSocket:
    """The path of a Unix domain socket to connect through."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    def __str__(self) -> str:
        return self.path

    def __fspath__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"UnixSocket({self.path!r})"