"""
Competitor API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from core.errors import recover_as

from . import repository, schemas

router = APIRouter()

INTERNAL_ERROR = "Internal server error"
NOT_FOUND = "Competitor not found"


@router.get("/api/competitors")
async def list_competitors(brand_id: UUID = Query(...)) -> dict:
    with recover_as(INTERNAL_ERROR, event="list_competitors_failed"):
        rows = await repository.list_for_brand(brand_id)
    return {"success": True, "data": rows}


@router.get("/api/competitors/{competitor_id}")
async def get_competitor(competitor_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="get_competitor_failed"):
        row = await repository.get_competitor(competitor_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.post("/api/competitors", status_code=status.HTTP_201_CREATED)
async def create_competitor(request: schemas.CreateCompetitorRequest) -> dict:
    name = (request.name or "").strip()
    if request.brand_id is None or not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="brand_id and name are required")

    with recover_as(INTERNAL_ERROR, event="create_competitor_failed"):
        row = await repository.insert_competitor(
            request.brand_id,
            name=name,
            website=request.website,
            description=request.description,
            strengths=request.strengths,
            weaknesses=request.weaknesses,
            market_position=request.market_position,
        )
    return {"success": True, "data": row}


@router.put("/api/competitors/{competitor_id}")
async def update_competitor(competitor_id: UUID, request: schemas.UpdateCompetitorRequest) -> dict:
    with recover_as(INTERNAL_ERROR, event="update_competitor_failed"):
        row = await repository.update_competitor(
            competitor_id,
            name=(request.name or "").strip() or None,
            website=request.website,
            description=request.description,
            strengths=request.strengths,
            weaknesses=request.weaknesses,
            market_position=request.market_position,
        )
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.delete("/api/competitors/{competitor_id}")
async def delete_competitor(competitor_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="delete_competitor_failed"):
        deleted = await repository.delete_competitor(competitor_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "message": "Competitor deleted successfully"}
