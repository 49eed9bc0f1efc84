import http.client
from io import BytesIO
from urllib.error import HTTPError, URLError

import pytest

import arma3points.http_client as http_module
from arma3points.http_client import NetworkError, PageClient


def test_get_html_sends_headers_and_timeout(monkeypatch):
    seen = {}

    def fake_urlopen(req, timeout=None):
        seen["url"] = req.full_url
        seen["timeout"] = timeout
        seen["agent"] = req.get_header("User-agent")
        return BytesIO("<html>Zoë</html>".encode("utf-8"))

    monkeypatch.setattr(http_module, "urlopen", fake_urlopen)
    html = PageClient(timeout_seconds=15).get_html("https://example.com/page")

    assert html == "<html>Zoë</html>"
    assert seen["url"] == "https://example.com/page"
    assert seen["timeout"] == 15
    assert seen["agent"].startswith("Mozilla/5.0")


def test_http_error_status(monkeypatch):
    def fake_urlopen(req, timeout=None):
        raise HTTPError(req.full_url, 404, "Not Found", hdrs=None, fp=BytesIO(b""))

    monkeypatch.setattr(http_module, "urlopen", fake_urlopen)

    with pytest.raises(NetworkError) as excinfo:
        PageClient().get_html("https://example.com/missing")
    assert "HTTP 404" in str(excinfo.value)
    assert excinfo.value.url == "https://example.com/missing"


def test_dns_failure(monkeypatch):
    def fake_urlopen(req, timeout=None):
        raise URLError("Name or service not known")

    monkeypatch.setattr(http_module, "urlopen", fake_urlopen)

    with pytest.raises(NetworkError) as excinfo:
        PageClient().get_html("https://nowhere.invalid/")
    assert "Could not reach" in str(excinfo.value)


def test_no_retry_on_failure(monkeypatch):
    calls = {"count": 0}

    def fake_urlopen(req, timeout=None):
        calls["count"] += 1
        raise TimeoutError("timed out")

    monkeypatch.setattr(http_module, "urlopen", fake_urlopen)

    with pytest.raises(NetworkError):
        PageClient().get_html("https://example.com/slow")
    assert calls["count"] == 1


@pytest.mark.parametrize(
    "error",
    [http.client.IncompleteRead(b"partial"), http.client.LineTooLong("header line")],
)
def test_broken_http_response(monkeypatch, error):
    def fake_urlopen(req, timeout=None):
        raise error

    monkeypatch.setattr(http_module, "urlopen", fake_urlopen)

    with pytest.raises(NetworkError) as excinfo:
        PageClient().get_html("https://example.com/truncated")
    assert "Bad HTTP response" in str(excinfo.value)
    assert excinfo.value.__cause__ is error
