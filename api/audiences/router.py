"""
Target-audience (persona) API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from core.errors import recover_as

from . import repository, schemas

router = APIRouter()

INTERNAL_ERROR = "Internal server error"
NOT_FOUND = "Target audience not found"


@router.get("/api/target-audiences")
async def list_audiences(brand_id: UUID = Query(...)) -> dict:
    with recover_as(INTERNAL_ERROR, event="list_audiences_failed"):
        rows = await repository.list_for_brand(brand_id)
    return {"success": True, "data": rows}


@router.get("/api/target-audiences/{audience_id}")
async def get_audience(audience_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="get_audience_failed"):
        row = await repository.get_audience(audience_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.post("/api/target-audiences", status_code=status.HTTP_201_CREATED)
async def create_audience(request: schemas.CreateAudienceRequest) -> dict:
    persona_name = (request.persona_name or "").strip()
    if request.brand_id is None or not persona_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="brand_id and persona_name are required",
        )

    values = request.model_dump(exclude={"brand_id"})
    values["persona_name"] = persona_name
    for field in repository.JSON_FIELDS:
        values[field] = values.get(field) or []

    with recover_as(INTERNAL_ERROR, event="create_audience_failed"):
        row = await repository.insert_audience(request.brand_id, values)
    return {"success": True, "data": row}


@router.put("/api/target-audiences/{audience_id}")
async def update_audience(audience_id: UUID, request: schemas.UpdateAudienceRequest) -> dict:
    with recover_as(INTERNAL_ERROR, event="update_audience_failed"):
        row = await repository.update_audience(audience_id, request.model_dump())
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.delete("/api/target-audiences/{audience_id}")
async def delete_audience(audience_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="delete_audience_failed"):
        deleted = await repository.delete_audience(audience_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "message": "Target audience deleted successfully"}
