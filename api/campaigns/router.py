"""
Campaign API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from core.errors import recover_as

from . import repository, schemas

router = APIRouter()

INTERNAL_ERROR = "Internal server error"
NOT_FOUND = "Campaign not found"

DEFAULT_STATUS = "draft"
LIST_FIELDS = ("marketing_objectives", "target_audience_ids", "channels")


@router.get("/api/campaigns")
async def list_campaigns(brand_id: UUID = Query(...)) -> dict:
    with recover_as(INTERNAL_ERROR, event="list_campaigns_failed"):
        rows = await repository.list_for_brand(brand_id)
    return {"success": True, "data": rows}


@router.get("/api/campaigns/{campaign_id}")
async def get_campaign(campaign_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="get_campaign_failed"):
        row = await repository.get_campaign(campaign_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.post("/api/campaigns", status_code=status.HTTP_201_CREATED)
async def create_campaign(request: schemas.CreateCampaignRequest) -> dict:
    name = (request.name or "").strip()
    if request.brand_id is None or not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="brand_id and name are required")

    values = request.model_dump(exclude={"brand_id"})
    values["name"] = name
    values["status"] = values.get("status") or DEFAULT_STATUS
    for field in LIST_FIELDS:
        values[field] = values.get(field) or []

    with recover_as(INTERNAL_ERROR, event="create_campaign_failed"):
        row = await repository.insert_campaign(request.brand_id, values)
    return {"success": True, "data": row}


@router.put("/api/campaigns/{campaign_id}")
async def update_campaign(campaign_id: UUID, request: schemas.UpdateCampaignRequest) -> dict:
    values = request.model_dump()
    values["name"] = (request.name or "").strip() or None

    with recover_as(INTERNAL_ERROR, event="update_campaign_failed"):
        row = await repository.update_campaign(campaign_id, values)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.delete("/api/campaigns/{campaign_id}")
async def delete_campaign(campaign_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="delete_campaign_failed"):
        deleted = await repository.delete_campaign(campaign_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "message": "Campaign deleted successfully"}
