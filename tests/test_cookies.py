from datetime import datetime, timezone

import pytest

from httpkit.cookies import Cookie, Cookies


def _sample():
    return [
        Cookie("SID", "placeholder", "127.0.0.1", False, "/", True),
        Cookie("lang", "token", "127.0.0.1", False, "/", True),
    ]


def test_cookie_defaults():
    cookie = Cookie("SID", "placeholder")
    assert cookie.domain == ""
    assert cookie.include_subdomains is False
    assert cookie.path == "/"
    assert cookie.https_only is False
    assert cookie.expires == datetime.fromtimestamp(0, tz=timezone.utc)


def test_cookie_fields_kept():
    cookie = _sample()[0]
    assert cookie.name == "SID"
    assert cookie.value == "placeholder"
    assert cookie.domain == "127.0.0.1"
    assert cookie.https_only is True


def test_cookies_default_encode_and_empty():
    cookies = Cookies()
    assert cookies.encode is True
    assert len(cookies) == 0


def test_cookies_encode_flag():
    cookies = Cookies(_sample(), encode=False)
    assert cookies.encode is False


def test_cookies_from_single_cookie():
    cookie = _sample()[0]
    cookies = Cookies(cookie)
    assert list(cookies) == [cookie]


def test_cookies_index_and_iteration_order():
    sample = _sample()
    cookies = Cookies(sample)
    assert cookies[0] == sample[0]
    assert cookies[1] == sample[1]
    assert [c.name for c in cookies] == ["SID", "lang"]


def test_append_and_pop_round_trip():
    cookies = Cookies()
    cookie = _sample()[1]
    cookies.append(cookie)
    assert len(cookies) == 1
    assert cookies.pop() == cookie
    assert len(cookies) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Cookies().pop()


def test_index_out_of_range_raises():
    with pytest.raises(IndexError):
        Cookies(_sample())[5]


def test_equality():
    assert Cookies(_sample()) == Cookies(_sample())
    assert not (Cookies(_sample()) == Cookies(_sample(), encode=False))