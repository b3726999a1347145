from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class CreateCompetitorAnalysisRequest(BaseModel):
    """
    A finished ad-library analysis of one competitor, as produced by the client.
    """

    brand_id: UUID | None = None
    competitor_id: UUID | None = None
    competitor_name: str | None = Field(default=None, max_length=255)
    competitor_website: str | None = Field(default=None, max_length=2048)
    facebook_page: str | None = Field(default=None, max_length=2048)
    total_ads_analyzed: int | None = Field(default=None, ge=0)
    ad_ids: list[Any] | None = None
    ads_data: list[Any] | None = None
    overview: str | None = None
    positioning: str | None = None
    creative_strategy: dict[str, Any] | None = None
    messaging_analysis: dict[str, Any] | None = None
    visual_design_elements: dict[str, Any] | None = None
    target_audience_insights: dict[str, Any] | None = None
    performance_indicators: dict[str, Any] | None = None
    recommendations: list[Any] | None = None
    key_findings: list[Any] | None = None
    analysis_model: str | None = Field(default=None, max_length=100)
    analysis_confidence: float | None = None
    analysis_start_date: date | None = None
    analysis_end_date: date | None = None
