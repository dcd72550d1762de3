# httpkit

Building blocks for HTTP clients, in plain Python with no dependencies
outside the standard library.

## Modules

- `httpkit.options`: value types that describe a request.
  - `Authentication(username, password, auth_mode)` with `AuthMode`
    (`BASIC`, `DIGEST`, `NTLM`, `NEGOTIATE`, `ANY`, `ANYSAFE`). Its
    `auth_string` property gives `user:password`.
  - `Bearer(token)`.
  - `Body` holds request bytes. It is built from `str` (UTF-8 encoded),
    bytes-like objects, a `Buffer` or a `File`. `Body.from_file(...)`
    reads a whole file and raises `ValueError` if the file cannot be
    opened.
  - `Buffer(data, filename)` holds in-memory bytes that are uploaded under
    a file name.
  - `File(filepath, overridden_filename="")` describes one upload.
    `has_overridden_filename()` tells whether it has a name of its own.
  - `Files` is a list of `File`. Plain paths are turned into `File`
    objects.
  - `Part(name, value, content_type="")` is one form field, with text, an
    integer, files or a buffer as its value. `Multipart(parts)` holds the
    fields in order.
  - `HttpVersion` with `HttpVersionCode`.
  - `LimitRate(downrate, uprate)`, where 0 means unlimited.
  - `LocalPort(port)` accepts 0 to 65535 and converts with `int()`.
  - `ReserveSize(size)` must not be negative.
  - `Resolve(host, addr, ports)`. Missing or empty ports fall back to 80
    and 443, and ports outside 0 to 65535 are rejected.
  - `UnixSocket(path)`.
  - `CertInfo` is a list of text entries for one certificate.
  - `EncodedAuthentication(username, password)` stores proxy credentials
    URL-encoded. `ProxyAuthentication(auths)` keys them by protocol, with
    `has()`, `username()` and `password()`.
- `httpkit.util`:
  - `Header` is a case-insensitive mutable mapping. A missing name reads
    as `""`.
  - `parse_header(text)` returns `(header, status_line, reason)`. Each
    `HTTP/` status line discards the headers gathered before it, so only
    the last response's headers remain.
  - `parse_cookies(lines)` reads tab-separated cookie-jar lines into
    `Cookies`.
  - `url_encode` / `url_decode` do percent-encoding.
  - `split(text, delimiter)` splits text and drops a trailing empty token.
  - `is_true(text)` checks for `true` in any letter case.
  - `timestamp_to_time(text)` reads a leading integer.
- `httpkit.cookies`: the frozen `Cookie` dataclass and the ordered
  `Cookies` collection. The `encode` flag of `Cookies` defaults to `True`.
- `httpkit.timeout`: `Timeout` and `ConnectTimeout`. Both take a `timedelta`
  or whole milliseconds. `milliseconds()` raises `OverflowError` when the
  value does not fit a C `long`.
- `httpkit.threadpool`: `ThreadPool(min_threads, max_threads, max_idle_ms)`.
  - `submit()` returns a `concurrent.futures.Future` and starts a stopped
    pool.
  - It also has `start()`, `stop()`, `pause()`, `resume()` and `wait()`,
    and can be used as a context manager.
  - Workers above the minimum retire after `max_idle_ms` without work.
  - `start()` on a running pool and `stop()` on a stopped pool raise
    `RuntimeError`.
- `httpkit.response`: the `Response` dataclass. `Response.from_raw(text,
  raw_header, cookies=None, url="")` fills in the headers, status line,
  reason and status code from a raw header block. `cookies` may be
  `Cookies` or cookie-jar lines.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from httpkit.util import Header, url_encode, url_decode

header = Header({"Content-Type": "text/html"})
assert header["content-type"] == "text/html"
assert header["missing"] == ""

assert url_encode("Hello World!") == "Hello%20World%21"
assert url_decode("Hello%20World%21") == "Hello World!"
```

```python
from httpkit.response import Response

raw = "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n"
response = Response.from_raw("Hello world!", raw, url="http://localhost/hello.html")
assert response.status_code == 200
assert response.reason == "OK"
assert response.header["content-type"] == "text/html"
```

```python
from httpkit.options import Authentication, AuthMode, Bearer, Resolve

password = "password"
auth = Authentication("user", password, AuthMode.BASIC)
bearer = Bearer("token")
resolve = Resolve("example.com", "127.0.0.1", set())
assert resolve.ports == {80, 443}
```

```python
from httpkit.cookies import Cookie, Cookies
from httpkit.timeout import Timeout

jar = Cookies([Cookie("SID", "placeholder")], encode=False)
assert Timeout(1500).milliseconds() == 1500
```

```python
from httpkit.threadpool import ThreadPool

results = []
with ThreadPool(1, 4, 250) as pool:
    futures = [pool.submit(results.append, n) for n in range(10)]
    pool.wait()
assert sorted(results) == list(range(10))
```

## What it does not do

httpkit opens no connections and sends no requests. It has no session,
no transport, no TLS or certificate handling and no command-line tool. It
gives the values, parsers and worker pool that a client built on some
other transport can use.