"""
Per-brand records: personas, competitors, brand assets and saved ads.
"""

from uuid import uuid4

import pytest


@pytest.fixture()
def brand_id():
    return uuid4()


# -- target audiences ---------------------------------------------------------


def test_create_audience_defaults_list_fields(client, fake_db, brand_id):
    fake_db.on("INSERT INTO target_audiences", lambda *args: {"id": "a1", "persona_name": args[1]})

    resp = client.post(
        "/api/target-audiences",
        json={"brand_id": str(brand_id), "persona_name": " Busy Parent ", "interests": ["cooking"]},
    )

    assert resp.status_code == 201
    assert resp.json() == {"success": True, "data": {"id": "a1", "persona_name": "Busy Parent"}}

    (sql, args), = fake_db.statements("INSERT INTO target_audiences")
    assert "$8::jsonb" in sql
    assert args[0] == brand_id
    # interests, pain_points, goals, preferred_channels
    assert args[7] == ["cooking"]
    assert args[8] == []
    assert args[9] == []
    assert args[11] == []


def test_create_audience_requires_brand_and_name(client, fake_db, brand_id):
    for body in ({"persona_name": "X"}, {"brand_id": str(brand_id)}, {"brand_id": str(brand_id), "persona_name": ""}):
        resp = client.post("/api/target-audiences", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "brand_id and persona_name are required"}
    assert fake_db.calls == []


def test_update_audience_keeps_unset_fields(client, fake_db):
    audience_id = uuid4()
    fake_db.on("UPDATE target_audiences", lambda *args: {"id": str(args[0])})

    resp = client.put(f"/api/target-audiences/{audience_id}", json={"goals": ["save time"]})

    assert resp.status_code == 200
    (sql, args), = fake_db.statements("UPDATE target_audiences")
    assert "goals = COALESCE($10::jsonb, goals)" in sql
    assert args[0] == audience_id
    assert args[9] == ["save time"]
    assert [a for i, a in enumerate(args[1:], start=2) if i != 10] == [None] * 11


def test_list_audiences_requires_brand_id(client, fake_db):
    resp = client.get("/api/target-audiences")

    assert resp.status_code == 400
    assert fake_db.calls == []


def test_list_audiences(client, fake_db, brand_id):
    fake_db.on("FROM target_audiences", [{"id": "a1"}, {"id": "a2"}])

    resp = client.get("/api/target-audiences", params={"brand_id": str(brand_id)})

    assert resp.status_code == 200
    assert [r["id"] for r in resp.json()["data"]] == ["a1", "a2"]


def test_get_audience_not_found(client, fake_db):
    resp = client.get(f"/api/target-audiences/{uuid4()}")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Target audience not found"}


def test_delete_audience(client, fake_db):
    fake_db.on("DELETE FROM target_audiences", {"id": "a1"})

    resp = client.delete(f"/api/target-audiences/{uuid4()}")

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Target audience deleted successfully"}


# -- competitors --------------------------------------------------------------


def test_create_competitor(client, fake_db, brand_id):
    fake_db.on("INSERT INTO competitors", lambda *args: {"id": "c1", "name": args[1], "strengths": args[4]})

    resp = client.post(
        "/api/competitors",
        json={"brand_id": str(brand_id), "name": "Globex", "strengths": ["price"]},
    )

    assert resp.status_code == 201
    assert resp.json()["data"] == {"id": "c1", "name": "Globex", "strengths": ["price"]}
    (_, args), = fake_db.statements("INSERT INTO competitors")
    assert args[5] == []


def test_create_competitor_requires_name(client, fake_db, brand_id):
    resp = client.post("/api/competitors", json={"brand_id": str(brand_id)})

    assert resp.status_code == 400
    assert resp.json()["error"] == "brand_id and name are required"


def test_update_competitor_not_found(client, fake_db):
    resp = client.put(f"/api/competitors/{uuid4()}", json={"market_position": "leader"})

    assert resp.status_code == 404
    assert resp.json()["error"] == "Competitor not found"


def test_delete_competitor_not_found(client, fake_db):
    resp = client.delete(f"/api/competitors/{uuid4()}")

    assert resp.status_code == 404


def test_competitor_database_failure(client, fake_db, brand_id):
    fake_db.on("FROM competitors", RuntimeError("relation \"competitors\" does not exist"))

    resp = client.get("/api/competitors", params={"brand_id": str(brand_id)})

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Internal server error"
    assert "does not exist" in body["message"]


# -- brand assets -------------------------------------------------------------


def test_save_brand_assets_upserts(client, fake_db, brand_id):
    assets = {"logo": "https://acme.com/logo.svg", "colors": ["#ff0000"]}
    fake_db.on("INSERT INTO brand_assets", lambda bid, doc: {"brand_id": str(bid), "assets": doc})

    resp = client.post("/api/brand-assets", json={"brand_id": str(brand_id), "assets": assets})

    assert resp.status_code == 201
    assert resp.json()["data"] == {"brand_id": str(brand_id), "assets": assets}
    (sql, _), = fake_db.statements("INSERT INTO brand_assets")
    assert "ON CONFLICT (brand_id) DO UPDATE" in sql


def test_save_brand_assets_requires_both_fields(client, fake_db, brand_id):
    resp = client.post("/api/brand-assets", json={"brand_id": str(brand_id)})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Brand ID and assets are required"


def test_get_brand_assets_not_found(client, fake_db, brand_id):
    resp = client.get("/api/brand-assets", params={"brand_id": str(brand_id)})

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Brand assets not found"}


# -- saved ad inspirations ----------------------------------------------------


def test_save_inspiration_creates_row(client, fake_db, brand_id):
    fake_db.on("INSERT INTO ad_inspirations", lambda *args: {"id": "ad1", "brand_id": str(args[0])})

    resp = client.post(
        "/api/ad-inspirations",
        json={"brand_id": str(brand_id), "foreplay_ad_id": "fp-9", "platform": "facebook", "ad_data": {"cta": "Shop"}},
    )

    assert resp.status_code == 201
    assert resp.json() == {"success": True, "data": {"id": "ad1", "brand_id": str(brand_id)}}
    (sql, args), = fake_db.statements("INSERT INTO ad_inspirations")
    assert args[2] == {"cta": "Shop"}
    assert args[5] == "facebook"


def test_save_inspiration_is_idempotent_per_brand(client, fake_db, brand_id):
    fake_db.on("foreplay_ad_id = $2", {"id": "ad1"})

    resp = client.post("/api/ad-inspirations", json={"brand_id": str(brand_id), "foreplay_ad_id": "fp-9"})

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Ad already saved", "data": {"id": "ad1"}}
    assert fake_db.statements("INSERT INTO ad_inspirations") == []


def test_save_inspiration_requires_brand(client, fake_db):
    resp = client.post("/api/ad-inspirations", json={"foreplay_ad_id": "fp-9"})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "brand_id is required"}


def test_save_inspiration_database_failure(client, fake_db, brand_id):
    fake_db.on("FROM ad_inspirations", RuntimeError("boom"))

    resp = client.post("/api/ad-inspirations", json={"brand_id": str(brand_id)})

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to process ad inspirations", "message": "boom"}
