import pytest
import requests

from npb_scraper import utils
from npb_scraper.utils import FetchFailure, fetch_html, strip_whitespace


class FakeResponse:
    def __init__(self, text="", status_code=200, encoding="utf-8"):
        self.text = text
        self.status_code = status_code
        self.encoding = encoding
        self.apparent_encoding = "utf-8"

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_fetch_html_returns_body(monkeypatch):
    calls = {}

    def fake_get(url, headers=None, timeout=None):
        calls["url"] = url
        calls["timeout"] = timeout
        return FakeResponse("<html>ok</html>")

    monkeypatch.setattr(utils.requests, "get", fake_get)
    assert fetch_html("https://npb.jp/bis/teams/rst_s.html", timeout=5) == "<html>ok</html>"
    assert calls == {"url": "https://npb.jp/bis/teams/rst_s.html", "timeout": 5}


def test_fetch_html_uses_default_timeout(monkeypatch):
    seen = []
    monkeypatch.setattr(
        utils.requests, "get", lambda url, headers=None, timeout=None: seen.append(timeout) or FakeResponse()
    )
    fetch_html("https://npb.jp/")
    assert seen == [utils.DEFAULT_FETCH_TIMEOUT]


def test_fetch_html_falls_back_to_detected_encoding(monkeypatch):
    resp = FakeResponse("x", encoding="ISO-8859-1")
    monkeypatch.setattr(utils.requests, "get", lambda *a, **kw: resp)
    fetch_html("https://npb.jp/")
    assert resp.encoding == "utf-8"


@pytest.mark.parametrize(
    "exc",
    [requests.ConnectionError("dns"), requests.Timeout("slow"), requests.TooManyRedirects("loop")],
)
def test_fetch_html_wraps_transport_errors(monkeypatch, exc):
    def fake_get(*args, **kwargs):
        raise exc

    monkeypatch.setattr(utils.requests, "get", fake_get)
    with pytest.raises(FetchFailure) as info:
        fetch_html("https://npb.jp/bis/teams/rst_x.html")
    assert info.value.url == "https://npb.jp/bis/teams/rst_x.html"
    assert info.value.__cause__ is exc


def test_fetch_html_wraps_http_status(monkeypatch):
    monkeypatch.setattr(utils.requests, "get", lambda *a, **kw: FakeResponse(status_code=404))
    with pytest.raises(FetchFailure):
        fetch_html("https://npb.jp/missing.html")


def test_text_helpers():
    assert strip_whitespace(" 村上　宗隆\t") == "村上宗隆"
    assert strip_whitespace(None) == ""
