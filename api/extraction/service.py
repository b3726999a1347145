"""
Brand-extraction proxy logic.

Validates the target URL locally, forwards the call to the external service
and normalizes failures:
- unreachable service         -> 503
- upstream non-2xx            -> same status, upstream `error` if it sent one
- anything else (timeout, ...) -> 500
Successful upstream payloads are returned untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable
from urllib.parse import urlsplit

from fastapi import HTTPException, status

from core import brandkit

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Invalid URL format. Please provide a valid URL (e.g., https://example.com)"


def validate_url(url: str | None) -> str:
    """
    Return the stripped URL, or raise 400 when it is missing or not absolute.
    """
    url = (url or "").strip()
    if not url:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="URL is required")

    try:
        parts = urlsplit(url)
        # Accessing .port validates it (raises ValueError on garbage).
        parts.port
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_URL_MESSAGE) from exc

    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_URL_MESSAGE)
    return url


async def _proxy(
    call: Awaitable[Any],
    *,
    event: str,
    url: str,
    unavailable_message: str,
    failed_message: str,
    unexpected_message: str,
) -> Any:
    try:
        data = await call
    except brandkit.BrandKitUnavailableError as exc:
        logger.warning("%s_unavailable url=%s error=%s", event, url, exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=unavailable_message) from exc
    except brandkit.BrandKitResponseError as exc:
        logger.warning("%s_upstream_error url=%s status=%s error=%s", event, url, exc.status_code, exc.error)
        raise HTTPException(status_code=exc.status_code, detail=exc.error or failed_message) from exc
    except Exception as exc:
        logger.exception("%s_failed url=%s", event, url)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=unexpected_message) from exc

    logger.info("%s_complete host=%s", event, urlsplit(url).hostname)
    return data


async def extract_brand(url: str | None, *, include_screenshot: bool = True) -> Any:
    url = validate_url(url)
    logger.info("extract_brand_started url=%s screenshot=%s", url, include_screenshot)
    return await _proxy(
        brandkit.extract_brand(url=url, include_screenshot=include_screenshot),
        event="extract_brand",
        url=url,
        unavailable_message="Brand extraction service is currently unavailable. Please try again later.",
        failed_message="Failed to extract brand data",
        unexpected_message="Failed to extract brand data",
    )


async def discover_brand_pages(
    url: str | None,
    *,
    max_pages: int = 10,
    include_scraping: bool = False,
    include_images: bool = True,
    max_images_per_page: int = 8,
) -> Any:
    url = validate_url(url)
    logger.info("discover_pages_started url=%s max_pages=%s images=%s", url, max_pages, include_images)
    return await _proxy(
        brandkit.discover_brand_pages(
            url=url,
            max_pages=max_pages,
            include_scraping=include_scraping,
            include_images=include_images,
            max_images_per_page=max_images_per_page,
        ),
        event="discover_pages",
        url=url,
        unavailable_message="Page discovery service is currently unavailable. Please try again later.",
        failed_message="Failed to discover brand pages",
        unexpected_message="An unexpected error occurred while discovering brand pages",
    )
