from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class CompetitorFields(BaseModel):
    website: str | None = Field(default=None, max_length=2048)
    description: str | None = None
    strengths: list[str] | None = None
    weaknesses: list[str] | None = None
    market_position: str | None = None


class CreateCompetitorRequest(CompetitorFields):
    brand_id: UUID | None = None
    name: str | None = Field(default=None, max_length=255)


class UpdateCompetitorRequest(CompetitorFields):
    name: str | None = Field(default=None, min_length=1, max_length=255)
