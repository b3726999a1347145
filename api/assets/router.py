"""
Brand-asset API endpoints.

Assets are whatever the client decided to keep from an extraction run
(logo, palette, fonts, images); the API stores them as an opaque document.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from core.errors import recover_as

from . import repository

router = APIRouter()

INTERNAL_ERROR = "Internal server error"


class SaveAssetsRequest(BaseModel):
    brand_id: UUID | None = None
    assets: Any = None


@router.post("/api/brand-assets", status_code=status.HTTP_201_CREATED)
async def save_brand_assets(request: SaveAssetsRequest) -> dict:
    if request.brand_id is None or not request.assets:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Brand ID and assets are required")

    with recover_as(INTERNAL_ERROR, event="save_brand_assets_failed"):
        row = await repository.upsert_assets(request.brand_id, request.assets)
    return {"success": True, "data": row}


@router.get("/api/brand-assets")
async def get_brand_assets(brand_id: UUID = Query(...)) -> dict:
    with recover_as(INTERNAL_ERROR, event="get_brand_assets_failed"):
        row = await repository.get_assets(brand_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand assets not found")
    return {"success": True, "data": row}
