"""
Curated ad library: query builder and GET endpoint.
"""

import re
from datetime import datetime, timezone
from uuid import uuid4

from inspirations.repository import build_curated_query

PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def _placeholders(sql: str) -> set[int]:
    return {int(n) for n in PLACEHOLDER_RE.findall(sql)}


def test_platform_and_search_without_niche():
    sql, params = build_curated_query(platform="facebook", niche="all", search="shoe")

    assert "is_curated = true" in sql
    assert "platform = $1" in sql
    assert "niche =" not in sql
    assert sql.count("LIKE LOWER($2)") == 3
    assert "LOWER(advertiser_name)" in sql
    assert "LOWER(ad_copy)" in sql
    assert "LOWER(CAST(ad_data AS TEXT))" in sql
    assert " OR " in sql
    assert "ORDER BY created_at DESC" in sql
    assert "LIMIT $3" in sql
    assert params == ["facebook", "%shoe%", 50]


def test_no_filters_only_limit():
    sql, params = build_curated_query()

    assert "is_curated = true" in sql
    assert "platform" not in sql
    assert "LIKE" not in sql
    assert "LIMIT $1" in sql
    assert params == [50]


def test_all_filters_numbered_in_order():
    sql, params = build_curated_query(platform="tiktok", niche="food", search="Water", limit=5)

    assert "platform = $1" in sql
    assert "niche = $2" in sql
    assert sql.count("LIKE LOWER($3)") == 3
    assert "LIMIT $4" in sql
    assert params == ["tiktok", "food", "%Water%", 5]


def test_niche_only():
    sql, params = build_curated_query(platform="all", niche="beauty")

    assert "platform =" not in sql
    assert "niche = $1" in sql
    assert params == ["beauty", 50]


def test_placeholders_match_params():
    cases = [
        {},
        {"platform": "facebook"},
        {"niche": "saas", "search": "crm"},
        {"platform": "instagram", "niche": "all", "search": "glow", "limit": 7},
    ]
    for kwargs in cases:
        sql, params = build_curated_query(**kwargs)
        assert _placeholders(sql) == set(range(1, len(params) + 1))
        assert params[-1] == kwargs.get("limit", 50)


def test_get_curated_filters_and_envelope(client, fake_db):
    row = {
        "id": uuid4(),
        "platform": "facebook",
        "niche": "ecommerce",
        "advertiser_name": "Allbirds",
        "ad_copy": "Comfortable shoes",
        "ad_data": {"format": "image"},
        "is_curated": True,
        "created_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
    }
    fake_db.on("FROM ad_inspirations", [row])

    resp = client.get(
        "/api/ad-inspirations/curated",
        params={"platform": "facebook", "niche": "all", "search": "shoe", "limit": 10},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"][0]["advertiser_name"] == "Allbirds"
    assert body["data"][0]["ad_data"] == {"format": "image"}
    assert body["data"][0]["id"] == str(row["id"])

    (sql, args), = fake_db.statements("FROM ad_inspirations")
    assert args == ("facebook", "%shoe%", 10)
    assert "niche =" not in sql


def test_get_curated_defaults_limit_to_50(client, fake_db):
    resp = client.get("/api/ad-inspirations/curated")

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": []}
    (_, args), = fake_db.statements("FROM ad_inspirations")
    assert args == (50,)


def test_get_curated_blank_filters_are_ignored(client, fake_db):
    client.get("/api/ad-inspirations/curated", params={"platform": "", "search": "   "})

    (sql, args), = fake_db.statements("FROM ad_inspirations")
    assert "platform =" not in sql
    assert "LIKE" not in sql
    assert args == (50,)


def test_ad_inspirations_root_serves_curated_listing(client, fake_db):
    resp = client.get("/api/ad-inspirations", params={"niche": "saas"})

    assert resp.status_code == 200
    (sql, args), = fake_db.statements("FROM ad_inspirations")
    assert "is_curated = true" in sql
    assert args == ("saas", 50)


def test_get_curated_database_failure(client, fake_db):
    fake_db.on("FROM ad_inspirations", RuntimeError("connection reset by peer"))

    resp = client.get("/api/ad-inspirations/curated")

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "error": "Failed to fetch ad inspirations",
        "message": "connection reset by peer",
    }


def test_get_curated_rejects_bad_limit(client, fake_db):
    for limit in ("abc", "0", "-3"):
        resp = client.get("/api/ad-inspirations/curated", params={"limit": limit})
        assert resp.status_code == 400
        assert resp.json()["success"] is False
    assert fake_db.calls == []


def test_curated_rejects_other_methods(client, fake_db):
    for method in ("post", "put", "delete", "patch"):
        resp = getattr(client, method)("/api/ad-inspirations/curated")
        assert resp.status_code == 405
        assert resp.json() == {"success": False, "error": "Method not allowed"}
    assert fake_db.calls == []


def test_ad_inspirations_root_failure_message(client, fake_db):
    fake_db.on("FROM ad_inspirations", RuntimeError("connection reset by peer"))

    resp = client.get("/api/ad-inspirations")

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "error": "Failed to process ad inspirations",
        "message": "connection reset by peer",
    }
