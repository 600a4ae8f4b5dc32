import logging

import pytest

from .._util import HeaderError, InvalidRawHeaderError
from .._headers import *


def test_add_raw_header():
    headers = Headers()
    headers.add_raw_header("X-Foo-bar: qux fred quxx")
    assert headers.get_header("X-Foo-Bar") == ["qux fred quxx"]
    assert headers.to_dict() == {"X-Foo-Bar": ["qux fred quxx"]}


def test_raw_header_without_colon_is_rejected():
    headers = Headers()
    headers.add_header("X-Before", "1")
    with pytest.raises(InvalidRawHeaderError) as excinfo:
        headers.add_raw_header("HTTP/1.1 400 BAD REQUEST")
    assert isinstance(excinfo.value, HeaderError)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.error_status_hint == 400
    assert "HTTP/1.1 400 BAD REQUEST" in str(excinfo.value)

    with pytest.raises(InvalidRawHeaderError):
        headers.set_raw_header("no colon here")
    with pytest.raises(InvalidRawHeaderError):
        headers.add_raw_header("")

    # nothing was stored
    assert headers.to_dict() == {"X-Before": ["1"]}


def test_multi_value_raw_header_is_not_split_by_default():
    headers = Headers()
    assert not headers.raw_comma_separation
    headers.add_raw_header("X-Foo-bar: qux, fred, quxx; foo")
    assert headers.get_header("X-Foo-Bar") == ["qux, fred, quxx; foo"]

    headers.add_raw_header("X-Foo-bar: a, b")
    assert headers.get_header("X-Foo-Bar") == ["qux, fred, quxx; foo", "a, b"]


def test_multi_value_raw_header_with_comma_separation_enabled():
    headers = Headers().with_raw_comma_separation_enabled()
    assert headers.raw_comma_separation
    headers.add_raw_header("X-Foo-bar: qux, fred, quxx; foo")
    headers.add_raw_header("X-Foo-bar: a, b")
    assert headers.get_header("X-Foo-Bar") == [
        "qux", "fred", "quxx; foo", "a", "b"]

    # empty pieces are dropped
    headers.add_raw_header("X-Sparse: a,, ,b,")
    assert headers.get_header("X-Sparse") == ["a", "b"]


def test_comma_separation_enabled_in_constructor():
    headers = Headers(raw_comma_separation=True)
    headers.add_raw_header("Accept: text/html, application/json")
    assert headers.get_header("Accept") == ["text/html", "application/json"]


def test_enabling_comma_separation_gives_a_new_collection():
    headers = Headers()
    headers.add_raw_header("X-Foo: a, b")

    splitting = headers.with_raw_comma_separation_enabled()
    assert splitting is not headers
    assert not headers.raw_comma_separation
    assert splitting.get_header("X-Foo") == ["a, b"]

    splitting.add_raw_header("X-Foo: c, d")
    headers.add_raw_header("X-Foo: c, d")
    assert splitting.get_header("X-Foo") == ["a, b", "c", "d"]
    assert headers.get_header("X-Foo") == ["a, b", "c, d"]


def test_raw_header_empty_value():
    headers = Headers()
    headers.add_raw_header("X-Foo-bar:")
    assert headers.get_header("X-Foo-Bar") == [""]

    headers.add_raw_header("X-Foo-bar:")
    headers.add_raw_header("X-Foo-bar:   ")
    assert headers.get_header("X-Foo-Bar") == [""]
    assert headers.to_raw_headers() == ["X-Foo-Bar:"]

    splitting = Headers().with_raw_comma_separation_enabled()
    splitting.add_raw_header("X-Foo-bar: , ,")
    assert splitting.get_header("X-Foo-Bar") == [""]


def test_single_value_constraints_with_comma_separation_disabled():
    # the whole line is one value, so there's nothing to truncate
    headers = Headers()
    headers.add_raw_header("Content-Type: application/xml, application/json")
    headers.add_raw_header(
        "Location: https://example.com/foo, http://bar.example.com")
    assert headers.to_dict() == {
        "Content-Type": ["application/xml, application/json"],
        "Location": ["https://example.com/foo, http://bar.example.com"],
    }


def test_single_value_constraints_with_comma_separation_enabled():
    headers = Headers().with_raw_comma_separation_enabled()
    headers.add_raw_header("Content-Type: application/xml, application/json")
    headers.add_raw_header(
        "Location: https://example.com/foo, http://bar.example.com")
    assert headers.to_dict() == {
        "Content-Type": ["application/xml"],
        "Location": ["https://example.com/foo"],
    }

    # and adding again still overwrites
    headers.add_raw_header("content-type: text/plain")
    assert headers.get_header("Content-Type") == ["text/plain"]


def test_set_cookie_is_never_split():
    headers = Headers().with_raw_comma_separation_enabled()
    headers.add_raw_header(
        "Set-Cookie: id=a3fWa; Expires=Thu, 21 Oct 2021 07:28:00 GMT")
    headers.add_raw_header("set-cookie: lang=en")
    assert headers.get_header("Set-Cookie") == [
        "id=a3fWa; Expires=Thu, 21 Oct 2021 07:28:00 GMT",
        "lang=en",
    ]
    assert headers.to_raw_headers() == [
        "Set-Cookie: id=a3fWa; Expires=Thu, 21 Oct 2021 07:28:00 GMT",
        "Set-Cookie: lang=en",
    ]


def test_set_raw_header_overwrites():
    headers = Headers()
    headers.add_raw_header("X-Foo: a")
    headers.add_raw_header("X-Foo: b")
    headers.set_raw_header("x-foo: c")
    assert headers.get_header("X-Foo") == ["c"]

    splitting = Headers().with_raw_comma_separation_enabled()
    splitting.add_raw_header("X-Foo: a")
    splitting.set_raw_header("X-Foo: b, c")
    assert splitting.get_header("X-Foo") == ["b", "c"]


def test_raw_header_splits_on_first_colon_only():
    headers = Headers()
    headers.add_raw_header("Host: localhost:8080")
    headers.add_raw_header("Referer:https://example.com/a:b")
    assert headers.get_header("Host") == ["localhost:8080"]
    assert headers.get_header("Referer") == ["https://example.com/a:b"]


def test_raw_header_name_whitespace_is_stripped():
    headers = Headers()
    headers.add_raw_header("  x-foo : bar  ")
    assert headers.to_dict() == {"X-Foo": ["bar"]}


def test_raw_header_bytes():
    headers = Headers()
    headers.add_raw_header(b"X-Foo: caf\xe9")
    assert headers.get_header("X-Foo") == ["café"]
    assert headers.to_bytes() == b"X-Foo: caf\xe9\r\n"


def test_from_raw_headers_text():
    headers = Headers.from_raw_headers(
        "Host: example.com\r\n"
        "accept: text/html, application/json\r\n"
        "Set-Cookie: a=1\r\n"
        "Set-Cookie: b=2\r\n"
        "\r\n"
    )
    assert headers.to_dict() == {
        "Host": ["example.com"],
        "Accept": ["text/html, application/json"],
        "Set-Cookie": ["a=1", "b=2"],
    }
    assert headers.to_raw_headers() == [
        "Host: example.com",
        "Accept: text/html, application/json",
        "Set-Cookie: a=1",
        "Set-Cookie: b=2",
    ]


def test_from_raw_headers_lines_and_bytes():
    lines = ["Accept: text/html, application/json", "", "X-Empty:"]
    headers = Headers.from_raw_headers(lines, raw_comma_separation=True)
    assert headers.raw_comma_separation
    assert headers.to_dict() == {
        "Accept": ["text/html", "application/json"],
        "X-Empty": [""],
    }

    headers = Headers.from_raw_headers(b"Host: example.com\nX-Foo: bar\n")
    assert headers.to_flattened_dict() == {
        "Host": "example.com", "X-Foo": "bar"}


def test_from_raw_headers_rejects_status_lines():
    with pytest.raises(InvalidRawHeaderError):
        Headers.from_raw_headers(
            "HTTP/1.1 200 OK\r\n"
            "Host: example.com\r\n"
        )
    with pytest.raises(InvalidRawHeaderError):
        Headers.from_raw_headers(["Host: example.com", "garbage"])


def test_raw_round_trip():
    raw = [
        "Content-Type: application/json",
        "Set-Cookie: a=1; Path=/",
        "Set-Cookie: b=2",
        "Vary: Accept, Cookie",
        "X-Empty:",
    ]
    assert Headers.from_raw_headers(raw).to_raw_headers() == raw


def test_rejected_raw_header_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="hyperplug")
    with pytest.raises(InvalidRawHeaderError):
        Headers().add_raw_header("HTTP/1.1 404 Not Found")
    assert "HTTP/1.1 404 Not Found" in caplog.text
