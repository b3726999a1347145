"""
Brand-extraction proxy: validation, passthrough and error normalization.

The upstream service is replaced by an httpx.MockTransport.
"""

import json

import httpx
import pytest

from core import brandkit


class Upstream:
    def __init__(self, handler=None):
        self.requests: list[httpx.Request] = []
        self.handler = handler or (lambda request: httpx.Response(200, json={}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture()
def upstream(monkeypatch):
    fake = Upstream()
    monkeypatch.setattr(brandkit, "_transport", httpx.MockTransport(fake))
    return fake


def test_success_returns_upstream_json_verbatim(client, upstream):
    payload = {
        "success": True,
        "data": {"logo": {"url": "https://acme.com/logo.svg"}, "colors": ["#ff0000", "#111111"]},
        "screenshot": None,
    }
    upstream.handler = lambda request: httpx.Response(200, json=payload)

    resp = client.post("/api/extract-brand", json={"url": "https://acme.com"})

    assert resp.status_code == 200
    assert resp.json() == payload

    (sent,) = upstream.requests
    assert sent.method == "POST"
    assert sent.url == httpx.URL("https://gtm.edwinlovett.com/api/extract-brand")
    assert json.loads(sent.content) == {"url": "https://acme.com", "includeScreenshot": True}
    assert sent.headers["user-agent"] == "Branding-App/1.0"


def test_include_screenshot_is_forwarded(client, upstream):
    client.post("/api/extract-brand", json={"url": "https://acme.com", "includeScreenshot": False})

    (sent,) = upstream.requests
    assert json.loads(sent.content)["includeScreenshot"] is False


@pytest.mark.parametrize("body", [{}, {"url": ""}, {"url": "   "}, {"url": None}])
def test_missing_url_is_400(client, upstream, body):
    resp = client.post("/api/extract-brand", json=body)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "URL is required"}
    assert upstream.requests == []


@pytest.mark.parametrize("url", ["not a url", "acme.com", "http://", "https://exa mple.com:port", "://nohost"])
def test_invalid_url_is_400_before_any_network_call(client, upstream, url):
    resp = client.post("/api/extract-brand", json={"url": url})

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"].startswith("Invalid URL format")
    assert upstream.requests == []


def test_connection_refused_is_503(client, upstream):
    def refuse(request):
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    upstream.handler = refuse

    resp = client.post("/api/extract-brand", json={"url": "https://acme.com"})

    assert resp.status_code == 503
    assert resp.json() == {
        "success": False,
        "error": "Brand extraction service is currently unavailable. Please try again later.",
    }


def test_upstream_error_status_is_passed_through(client, upstream):
    upstream.handler = lambda request: httpx.Response(422, json={"success": False, "error": "Site blocked the crawler"})

    resp = client.post("/api/extract-brand", json={"url": "https://acme.com"})

    assert resp.status_code == 422
    assert resp.json() == {"success": False, "error": "Site blocked the crawler"}


def test_upstream_error_without_message_uses_default(client, upstream):
    upstream.handler = lambda request: httpx.Response(502, text="<html>Bad Gateway</html>")

    resp = client.post("/api/extract-brand", json={"url": "https://acme.com"})

    assert resp.status_code == 502
    assert resp.json() == {"success": False, "error": "Failed to extract brand data"}


def test_timeout_is_500(client, upstream):
    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    upstream.handler = slow

    resp = client.post("/api/extract-brand", json={"url": "https://acme.com"})

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to extract brand data"}


def test_non_json_success_is_500(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, text="ok")

    resp = client.post("/api/extract-brand", json={"url": "https://acme.com"})

    assert resp.status_code == 500
    assert resp.json()["success"] is False


def test_extract_brand_rejects_get(client, upstream):
    resp = client.get("/api/extract-brand")

    assert resp.status_code == 405
    assert resp.json() == {"success": False, "error": "Method not allowed"}


def test_discover_pages_forwards_options(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, json={"pages": [{"url": "https://acme.com/about"}]})

    resp = client.post(
        "/api/discover-brand-pages",
        json={"url": "https://acme.com", "maxPages": 3, "includeImages": False},
    )

    assert resp.status_code == 200
    assert resp.json() == {"pages": [{"url": "https://acme.com/about"}]}
    (sent,) = upstream.requests
    assert sent.url.path == "/api/discover-brand-pages"
    assert json.loads(sent.content) == {
        "url": "https://acme.com",
        "maxPages": 3,
        "includeScraping": False,
        "includeImages": False,
        "maxImagesPerPage": 8,
    }


def test_discover_pages_unavailable(client, upstream):
    def unresolvable(request):
        raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

    upstream.handler = unresolvable

    resp = client.post("/api/discover-brand-pages", json={"url": "https://acme.com"})

    assert resp.status_code == 503
    assert resp.json()["error"].startswith("Page discovery service is currently unavailable")


def test_base_url_override(monkeypatch):
    monkeypatch.setenv("BRANDKIT_BASE_URL", "http://localhost:8080/")
    assert brandkit.base_url() == "http://localhost:8080"

    monkeypatch.delenv("BRANDKIT_BASE_URL")
    assert brandkit.base_url() == "https://gtm.edwinlovett.com"


def test_upstream_405_keeps_its_error(client, upstream):
    upstream.handler = lambda request: httpx.Response(405, json={"success": False, "error": "Only POST is supported"})

    resp = client.post("/api/extract-brand", json={"url": "https://acme.com"})

    assert resp.status_code == 405
    assert resp.json() == {"success": False, "error": "Only POST is supported"}


def test_extract_client_settings(client, upstream):
    client.post("/api/extract-brand", json={"url": "https://acme.com"})

    (sent,) = upstream.requests
    assert sent.extensions["timeout"] == {"connect": 30.0, "read": 30.0, "write": 30.0, "pool": 30.0}
    assert sent.headers["content-type"] == "application/json"


def test_discover_client_timeout(client, upstream):
    client.post("/api/discover-brand-pages", json={"url": "https://acme.com"})

    (sent,) = upstream.requests
    assert sent.extensions["timeout"]["read"] == 60.0
    assert sent.extensions["timeout"]["connect"] == 60.0


def test_upstream_redirects_are_followed(client, upstream):
    def moved(request):
        if request.url.path == "/api/extract-brand":
            return httpx.Response(308, headers={"Location": "https://gtm.edwinlovett.com/v2/extract-brand"})
        return httpx.Response(200, json={"success": True, "data": {}})

    upstream.handler = moved

    resp = client.post("/api/extract-brand", json={"url": "https://acme.com"})

    assert resp.status_code == 200
    assert [r.url.path for r in upstream.requests] == ["/api/extract-brand", "/v2/extract-brand"]
    assert json.loads(upstream.requests[1].content)["url"] == "https://acme.com"
