"""The result of an HTTP request."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from .cookies import Cookies
from .options import CertInfo
from .util import Header, parse_cookies, parse_header

_STATUS_CODE = re.compile(r"HTTP/\S+[ \t]+([0-9]{3})(?![0-9])")


@dataclass
class Response:
    """Status, headers, body and transfer details of a finished request."""

    status_code: int = 0
    text: str = ""
    header: Header = field(default_factory=Header)
    url: str = ""
    elapsed: float = 0.0
    cookies: Cookies = field(default_factory=Cookies)
    raw_header: str = ""
    status_line: str = ""
    reason: str = ""
    uploaded_bytes: int = 0
    downloaded_bytes: int = 0
    redirect_count: int = 0
    primary_ip: str = ""
    primary_port: int = 0
    cert_infos: list[CertInfo] = field(default_factory=list)

    @classmethod
    def from_raw(
        cls,
        text: str,
        raw_header: str,
        cookies: Cookies | Iterable[str] | None = None,
        url: str = "",
    ) -> Response:
        """Build a response from its body and raw header block.

        ``cookies`` is either a :class:`Cookies` or cookie-jar lines to parse.
        """
        header, status_line, reason = parse_header(raw_header)
        if cookies is None:
            jar = Cookies()
        elif isinstance(cookies, Cookies):
            jar = cookies
        else:
            jar = parse_cookies(cookies)
        match = _STATUS_CODE.match(status_line)
        return cls(
            status_code=int(match.group(1)) if match else 0,
            text=text,
            header=header,
            url=url,
            cookies=jar,
            raw_header=raw_header,
            status_line=status_line,
            reason=reason,
        )