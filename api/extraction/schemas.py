"""
Request bodies for the brand-extraction proxy.

Field names follow the upstream service (camelCase); snake_case is accepted too.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExtractBrandRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str | None = None
    include_screenshot: bool = Field(default=True, alias="includeScreenshot")


class DiscoverBrandPagesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str | None = None
    max_pages: int = Field(default=10, ge=1, le=100, alias="maxPages")
    include_scraping: bool = Field(default=False, alias="includeScraping")
    include_images: bool = Field(default=True, alias="includeImages")
    max_images_per_page: int = Field(default=8, ge=0, le=50, alias="maxImagesPerPage")
