"""
Brand API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BrandFields(BaseModel):
    website: str | None = Field(default=None, max_length=2048)
    logo_url: str | None = Field(default=None, max_length=2048)
    primary_color: str | None = Field(default=None, max_length=32)
    industry: str | None = Field(default=None, max_length=100)
    favicon_url: str | None = Field(default=None, max_length=2048)
    description: str | None = None


class CreateBrandRequest(BrandFields):
    # Presence is checked by the service so the error matches the other 400s.
    name: str | None = Field(default=None, max_length=255)


class UpdateBrandRequest(BrandFields):
    name: str | None = Field(default=None, min_length=1, max_length=255)
