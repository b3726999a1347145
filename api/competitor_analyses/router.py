"""
Competitor-analysis API endpoints.
"""

from __future__ import annotations

import copy
import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from core.errors import recover_as

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()

INTERNAL_ERROR = "Internal server error"
NOT_FOUND = "Analysis not found"


@router.get("/api/competitor-analyses")
async def list_analyses(brand_id: UUID = Query(...)) -> dict:
    with recover_as(INTERNAL_ERROR, event="list_competitor_analyses_failed"):
        rows = await repository.list_for_brand(brand_id)
    return {"success": True, "data": rows}


@router.get("/api/competitor-analyses/{analysis_id}")
async def get_analysis(analysis_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="get_competitor_analysis_failed"):
        row = await repository.get_analysis(analysis_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "data": row}


@router.post("/api/competitor-analyses", status_code=status.HTTP_201_CREATED)
async def create_analysis(request: schemas.CreateCompetitorAnalysisRequest) -> dict:
    competitor_name = (request.competitor_name or "").strip()
    if request.brand_id is None or not competitor_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="brand_id and competitor_name are required",
        )

    values = request.model_dump(exclude={"brand_id"})
    values["competitor_name"] = competitor_name
    values["total_ads_analyzed"] = values.get("total_ads_analyzed") or 0
    for field, empty in repository.JSON_DEFAULTS.items():
        if values.get(field) is None:
            values[field] = copy.copy(empty)

    with recover_as(INTERNAL_ERROR, event="create_competitor_analysis_failed"):
        row = await repository.insert_analysis(request.brand_id, values)
    logger.info(
        "competitor_analysis_saved brand_id=%s competitor=%s ads=%s",
        request.brand_id,
        competitor_name,
        values["total_ads_analyzed"],
    )
    return {"success": True, "data": row}


@router.delete("/api/competitor-analyses/{analysis_id}")
async def delete_analysis(analysis_id: UUID) -> dict:
    with recover_as(INTERNAL_ERROR, event="delete_competitor_analysis_failed"):
        deleted = await repository.delete_analysis(analysis_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return {"success": True, "message": "Analysis deleted successfully"}
