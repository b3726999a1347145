"""
HTTP client for the external brand-extraction service.

Used endpoints:
- POST /api/extract-brand         -> brand assets (logo, colors, fonts, screenshot, ...)
- POST /api/discover-brand-pages  -> key pages of a site, optionally with images

Responses are returned as parsed JSON without local processing.
"""

from __future__ import annotations

import os
from typing import Any

import httpx

DEFAULT_BASE_URL = "https://gtm.edwinlovett.com"
USER_AGENT = "Branding-App/1.0"

EXTRACT_TIMEOUT_S = 30.0
DISCOVER_TIMEOUT_S = 60.0

# Transport override (e.g. httpx.MockTransport); None uses the network.
_transport: httpx.AsyncBaseTransport | None = None


class BrandKitError(RuntimeError):
    pass


class BrandKitUnavailableError(BrandKitError):
    """
    The service could not be reached (connection refused, DNS failure).
    """


class BrandKitResponseError(BrandKitError):
    """
    The service answered with a non-2xx status.
    """

    def __init__(self, status_code: int, error: str | None) -> None:
        super().__init__(f"Brand extraction service returned {status_code}: {error or ''}".strip())
        self.status_code = status_code
        self.error = error


def base_url() -> str:
    return (os.environ.get("BRANDKIT_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL).rstrip("/")


def _client(timeout_s: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url(),
        timeout=timeout_s,
        follow_redirects=True,
        headers={"Content-Type": "application/json", "User-Agent": USER_AGENT},
        transport=_transport,
    )


def _upstream_error(resp: httpx.Response) -> str | None:
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, str) and error.strip():
            return error
    return None


async def _post(path: str, payload: dict[str, Any], *, timeout_s: float) -> Any:
    try:
        async with _client(timeout_s) as client:
            resp = await client.post(path, json=payload)
    except httpx.ConnectError as exc:
        raise BrandKitUnavailableError(f"Brand extraction service unreachable: {exc}") from exc

    if not resp.is_success:
        raise BrandKitResponseError(resp.status_code, _upstream_error(resp))

    try:
        return resp.json()
    except ValueError as exc:
        raise BrandKitError("Brand extraction service returned a non-JSON body.") from exc


async def extract_brand(*, url: str, include_screenshot: bool = True) -> Any:
    return await _post(
        "/api/extract-brand",
        {"url": url, "includeScreenshot": include_screenshot},
        timeout_s=EXTRACT_TIMEOUT_S,
    )


async def discover_brand_pages(
    *,
    url: str,
    max_pages: int = 10,
    include_scraping: bool = False,
    include_images: bool = True,
    max_images_per_page: int = 8,
) -> Any:
    return await _post(
        "/api/discover-brand-pages",
        {
            "url": url,
            "maxPages": max_pages,
            "includeScraping": include_scraping,
            "includeImages": include_images,
            "maxImagesPerPage": max_images_per_page,
        },
        timeout_s=DISCOVER_TIMEOUT_S,
    )
