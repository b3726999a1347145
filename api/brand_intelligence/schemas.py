from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SaveBrandIntelligenceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    brand_id: UUID | None = None
    brand_name: str | None = Field(default=None, max_length=255)
    tagline: str | None = None
    mission: str | None = None
    vision: str | None = None
    # Stored in the `values` column; renamed here to keep clear of BaseModel's namespace.
    brand_values: list[Any] | None = Field(default=None, alias="values")
    brand_tone: str | None = None
    brand_voice: dict[str, Any] | None = None
    messaging_themes: list[Any] | None = None
    industry: str | None = Field(default=None, max_length=100)
    target_market: str | None = None
    unique_value_proposition: str | None = None
    key_messages: list[Any] | None = None
    content_themes: list[Any] | None = None
    pages_analyzed: int | None = Field(default=None, ge=0)
    analysis_confidence: float | None = None
    raw_analysis: dict[str, Any] | None = None
