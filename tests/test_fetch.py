from __future__ import annotations

import pytest
import requests

from soupwalk import FetchConfig, FetchError, SoupConfig, fetch, fetch_document


class DummyResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class DummySession:
    def __init__(self, response=None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[dict] = []

    def get(self, url, **kwargs):  # noqa: ANN001
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def test_get_sends_configured_headers_and_cookies():
    session = DummySession(DummyResponse("<html></html>"))
    config = SoupConfig(
        fetch=FetchConfig(timeout=3, user_agent="tester/1.0").with_header("Accept-Language", "en").with_cookie("sid", "42")
    )

    body = fetch.get_with_session("https://example.com", session, config)

    assert body == "<html></html>"
    call = session.calls[0]
    assert call["url"] == "https://example.com"
    assert call["headers"] == {"User-Agent": "tester/1.0", "Accept-Language": "en"}
    assert call["cookies"] == {"sid": "42"}
    assert call["timeout"] == 3


def test_with_header_returns_updated_copy():
    base = FetchConfig()
    updated = base.with_header("X-Test", "1")

    assert base.headers == {}
    assert updated.headers == {"X-Test": "1"}


def test_transport_failure_is_wrapped():
    session = DummySession(exc=requests.ConnectionError("boom"))

    with pytest.raises(FetchError, match="couldn't perform GET request to https://example.com") as info:
        fetch.get_with_session("https://example.com", session)

    assert isinstance(info.value.__cause__, requests.ConnectionError)


def test_http_error_status_is_wrapped():
    session = DummySession(DummyResponse("nope", status_code=404))

    with pytest.raises(FetchError):
        fetch.get_with_session("https://example.com/missing", session)


def test_fetch_document_returns_parsed_root(monkeypatch):
    html = "<!DOCTYPE html><html><body><h1 class='title main'>Hi</h1></body></html>"
    monkeypatch.setattr("soupwalk.fetch.requests.Session", lambda: DummySession(DummyResponse(html)))

    root = fetch_document("https://example.com")

    assert root.ok
    assert root.find("h1", "class", "main").text() == "Hi"


def test_fetch_document_returns_error_node_on_failure(monkeypatch):
    monkeypatch.setattr(
        "soupwalk.fetch.requests.Session",
        lambda: DummySession(exc=requests.Timeout("timed out")),
    )

    root = fetch_document("https://example.com/slow")

    assert isinstance(root.error, FetchError)
    with pytest.raises(FetchError):
        root.raise_for_error()
