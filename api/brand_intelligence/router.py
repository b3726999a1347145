"""
Brand-intelligence endpoints: the latest website analysis for a brand.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from core.errors import recover_as

from . import repository, schemas

router = APIRouter()

INTERNAL_ERROR = "Internal server error"


@router.get("/api/brand-intelligence")
async def get_brand_intelligence(brand_id: UUID = Query(...)) -> dict:
    # No analysis yet is not an error: data is null.
    with recover_as(INTERNAL_ERROR, event="get_brand_intelligence_failed"):
        row = await repository.latest_for_brand(brand_id)
    return {"success": True, "data": row}


@router.post("/api/brand-intelligence", status_code=status.HTTP_201_CREATED)
async def save_brand_intelligence(request: schemas.SaveBrandIntelligenceRequest) -> dict:
    if request.brand_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="brand_id is required")

    with recover_as(INTERNAL_ERROR, event="save_brand_intelligence_failed"):
        row = await repository.insert_intelligence(
            request.brand_id,
            brand_name=request.brand_name,
            tagline=request.tagline,
            mission=request.mission,
            vision=request.vision,
            values=request.brand_values or [],
            brand_tone=request.brand_tone,
            brand_voice=request.brand_voice or {},
            messaging_themes=request.messaging_themes or [],
            industry=request.industry,
            target_market=request.target_market,
            unique_value_proposition=request.unique_value_proposition,
            key_messages=request.key_messages or [],
            content_themes=request.content_themes or [],
            pages_analyzed=request.pages_analyzed or 0,
            analysis_confidence=request.analysis_confidence,
            raw_analysis=request.raw_analysis or {},
        )
    return {"success": True, "data": row}
