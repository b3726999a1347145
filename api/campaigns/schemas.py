"""
Campaign request schemas.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field


class CampaignFields(BaseModel):
    objective: str | None = Field(default=None, max_length=255)
    marketing_objectives: list[str] | None = None
    other_objective: str | None = None
    target_audience_ids: list[UUID] | None = None
    channels: list[str] | None = None
    start_date: date | None = None
    end_date: date | None = None
    product_service_id: UUID | None = None
    status: str | None = Field(default=None, max_length=50)


class CreateCampaignRequest(CampaignFields):
    brand_id: UUID | None = None
    name: str | None = Field(default=None, max_length=255)


class UpdateCampaignRequest(CampaignFields):
    name: str | None = Field(default=None, min_length=1, max_length=255)
