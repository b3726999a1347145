"""
Brand URL identifiers: slug + short id.

A brand is addressed as `/<path>/<slug>/<short_id>`, e.g. `/brand/acme-inc/ab12d`.
The short id is 5 characters from a 62-symbol alphabet (62**5 ~= 916M values).
"""

from __future__ import annotations

import re
import secrets
import string
import unicodedata
from typing import Any, Iterable, Mapping

SHORT_ID_LENGTH = 5
SHORT_ID_ALPHABET = string.ascii_letters + string.digits

# Accepted when parsing; older brands may carry 4 or 6 character ids.
SHORT_ID_MIN_LENGTH = 4
SHORT_ID_MAX_LENGTH = 6

DEFAULT_BRAND_PATH = "brand"

# Used when a name has no slug-able characters (e.g. "!!!").
FALLBACK_SLUG = "brand"

# Symbols spelled out before unsupported characters are dropped, so the server
# derives the same slug the web client computes for a brand name.
SLUG_CHARMAP = {
    "&": "and",
    "|": "or",
    "<": "less",
    ">": "greater",
    "$": "dollar",
    "%": "percent",
    "¢": "cent",
    "£": "pound",
    "€": "euro",
    "¥": "yen",
    "©": "(c)",
    "®": "(r)",
    "™": "tm",
    "∞": "infinity",
    "♥": "love",
    "ß": "ss",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "đ": "d",
    "Đ": "D",
    "ð": "d",
    "Ð": "D",
    "ł": "l",
    "Ł": "L",
    "þ": "th",
    "Þ": "TH",
}

_SLUG_TRANSLATION = str.maketrans(SLUG_CHARMAP)
_STRICT_RE = re.compile(r"[^A-Za-z0-9\s]")
_SPACE_RE = re.compile(r"\s+")


def generate_slug(name: str) -> str:
    """
    URL-friendly slug: ASCII, lower-case, words joined by single hyphens.

    Symbols with a spelled-out form are replaced, accents are folded, and any
    other punctuation is removed without splitting the word:
    "Acme, Inc." -> "acme-inc", "H&M" -> "handm", "Straße" -> "strasse".
    """
    text = (name or "").translate(_SLUG_TRANSLATION)
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = _STRICT_RE.sub("", text.replace("-", " ")).strip()
    return _SPACE_RE.sub("-", text).lower()


def generate_short_id() -> str:
    return "".join(secrets.choice(SHORT_ID_ALPHABET) for _ in range(SHORT_ID_LENGTH))


def generate_brand_url(brand: Mapping[str, Any], path: str | None = None) -> str:
    short_id = brand.get("short_id") or brand.get("shortId")
    return f"/{path or DEFAULT_BRAND_PATH}/{brand['slug']}/{short_id}"


def parse_brand_identifiers(pathname: str) -> dict[str, str] | None:
    """
    Pull `(slug, short_id)` out of the last two path segments.

    Returns `{"slug": ..., "short_id": ...}`, or None when there are fewer than
    two segments or the short id length is out of bounds. The web client's
    helper names the second key `shortId`; API payloads and rows use
    `short_id`, and `generate_brand_url` accepts either.
    """
    parts = [part for part in (pathname or "").split("/") if part]
    if len(parts) < 2:
        return None

    slug, short_id = parts[-2], parts[-1]
    if not slug or not (SHORT_ID_MIN_LENGTH <= len(short_id) <= SHORT_ID_MAX_LENGTH):
        return None

    return {"slug": slug, "short_id": short_id}


def is_slug_unique(slug: str, existing_brands: Iterable[Mapping[str, Any]]) -> bool:
    return not any(brand.get("slug") == slug for brand in existing_brands)


def generate_unique_slug(name: str, existing_slugs: Iterable[str]) -> str:
    taken = set(existing_slugs)
    base = generate_slug(name)
    slug = base
    counter = 1
    while slug in taken:
        slug = f"{base}-{counter}"
        counter += 1
    return slug
