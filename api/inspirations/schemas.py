"""
Pydantic schemas for ad-inspiration endpoints.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class SaveInspirationRequest(BaseModel):
    # Optional here so a missing id yields the API's own 400 message.
    brand_id: UUID | None = None
    foreplay_ad_id: str | None = Field(default=None, max_length=200)
    ad_data: Any = None
    thumbnail_url: str | None = None
    video_url: str | None = None
    platform: str | None = Field(default=None, max_length=50)
    advertiser_name: str | None = None
    niche: str | None = Field(default=None, max_length=100)
    ad_copy: str | None = None
