"""Tests for the urllib transport and the Result pattern it returns."""

import asyncio
import http.client
import io
import urllib.error

import pytest

from fragments.exceptions import TransportError
from fragments.result import Fail, Ok
from fragments.tpf import transport as transport_mod
from fragments.tpf.transport import UrllibTransport, download

URL = "https://tpf.example.org/core?subject=&predicate=&object=&page=1"


class FakeResponse(io.BytesIO):
    def __init__(self, body: bytes, charset: str | None = "utf-8"):
        super().__init__(body)
        content_type = "application/n-triples"
        if charset:
            content_type += f"; charset={charset}"
        self.headers = _Headers(content_type)


class _Headers:
    def __init__(self, content_type: str):
        self.content_type = content_type

    def get_content_charset(self):
        if "charset=" not in self.content_type:
            return None
        return self.content_type.split("charset=", 1)[1]


class TestResult:
    def test_ok_unwrap(self):
        assert Ok(data=[1]).unwrap() == [1]

    def test_fail_unwrap_raises(self):
        with pytest.raises(TransportError) as info:
            Fail(error="HTTP 500: boom", context=URL).unwrap()
        assert info.value.message == "HTTP 500: boom"
        assert info.value.url == URL


class TestDownload:
    def test_success_decodes_body(self, monkeypatch):
        captured = {}

        def fake_urlopen(req, timeout, context):
            captured["headers"] = dict(req.header_items())
            captured["timeout"] = timeout
            return FakeResponse("<a> <b> \"é\" .".encode("utf-8"))

        monkeypatch.setattr(transport_mod.urllib.request, "urlopen", fake_urlopen)
        result = download(URL, {"Accept": "application/n-triples"}, timeout=5)
        assert result.ok
        assert result.data == '<a> <b> "é" .'
        assert captured["timeout"] == 5
        assert captured["headers"] == {"Accept": "application/n-triples"}

    def test_http_error_is_fail(self, monkeypatch):
        def fake_urlopen(req, timeout, context):
            raise urllib.error.HTTPError(URL, 404, "Not Found", None, None)

        monkeypatch.setattr(transport_mod.urllib.request, "urlopen", fake_urlopen)
        result = download(URL, {})
        assert not result.ok
        assert result.error == "HTTP 404: Not Found"
        assert result.context == URL

    def test_connection_error_is_fail(self, monkeypatch):
        def fake_urlopen(req, timeout, context):
            raise urllib.error.URLError("refused")

        monkeypatch.setattr(transport_mod.urllib.request, "urlopen", fake_urlopen)
        result = download(URL, {})
        assert not result.ok
        assert "Connection error" in result.error

    def test_timeout_is_fail(self, monkeypatch):
        def fake_urlopen(req, timeout, context):
            raise TimeoutError()

        monkeypatch.setattr(transport_mod.urllib.request, "urlopen", fake_urlopen)
        result = download(URL, {}, timeout=3)
        assert result.error == "Timeout after 3s"

    def test_reset_after_connect_is_fail(self, monkeypatch):
        def fake_urlopen(req, timeout, context):
            raise ConnectionResetError("reset by peer")

        monkeypatch.setattr(transport_mod.urllib.request, "urlopen", fake_urlopen)
        result = download(URL, {})
        assert not result.ok
        assert result.error == "Connection error: reset by peer"
        assert result.context == URL

    def test_remote_disconnect_is_fail(self, monkeypatch):
        def fake_urlopen(req, timeout, context):
            raise http.client.RemoteDisconnected("closed without response")

        monkeypatch.setattr(transport_mod.urllib.request, "urlopen", fake_urlopen)
        assert not download(URL, {}).ok

    def test_truncated_body_is_fail(self, monkeypatch):
        class Truncated(FakeResponse):
            def read(self, *args):
                raise http.client.IncompleteRead(b"<a> <b>", 40)

        monkeypatch.setattr(
            transport_mod.urllib.request, "urlopen",
            lambda req, timeout, context: Truncated(b""),
        )
        result = download(URL, {})
        assert not result.ok
        assert result.error.startswith("Connection error")


class TestUrllibTransport:
    def test_connection_reset_raises_transport_error(self, monkeypatch):
        def fake_urlopen(req, timeout, context):
            raise ConnectionResetError("reset by peer")

        monkeypatch.setattr(transport_mod.urllib.request, "urlopen", fake_urlopen)
        with pytest.raises(TransportError) as info:
            asyncio.run(UrllibTransport().fetch(URL, {}))
        assert info.value.url == URL

    def test_fetch_returns_body(self, monkeypatch):
        monkeypatch.setattr(transport_mod, "download", lambda url, headers, timeout: Ok(data="body"))
        assert asyncio.run(UrllibTransport().fetch(URL, {})) == "body"

    def test_fetch_raises_on_fail(self, monkeypatch):
        monkeypatch.setattr(
            transport_mod, "download",
            lambda url, headers, timeout: Fail(error="HTTP 503: Unavailable", context=url),
        )
        with pytest.raises(TransportError) as info:
            asyncio.run(UrllibTransport(timeout=1).fetch(URL, {}))
        assert info.value.url == URL
