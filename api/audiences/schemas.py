"""
Target-audience (persona) request schemas.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class AudienceFields(BaseModel):
    age_range: str | None = Field(default=None, max_length=50)
    gender: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=255)
    income_level: str | None = Field(default=None, max_length=100)
    occupation: str | None = Field(default=None, max_length=255)
    interests: list[str] | None = None
    pain_points: list[str] | None = None
    goals: list[str] | None = None
    buying_behavior: str | None = None
    preferred_channels: list[str] | None = None
    description: str | None = None


class CreateAudienceRequest(AudienceFields):
    brand_id: UUID | None = None
    persona_name: str | None = Field(default=None, max_length=255)


class UpdateAudienceRequest(AudienceFields):
    persona_name: str | None = Field(default=None, min_length=1, max_length=255)
