"""Pydantic models for skills.sh payloads and extracted data.

The search API returns camelCase JSON (``skillId``) alongside snake_case
fields (``duration_ms``).  Models expose snake_case attributes and accept
the upstream spelling through aliases.  Unknown upstream fields are
ignored so that additions to the API do not break parsing.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SkillRecord(BaseModel):
    """A single skill as returned by the search API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., description="Opaque unique key")
    skill_id: str = Field(..., alias="skillId", description="Human-facing identifier")
    name: str = Field(..., description="Display name")
    installs: int = Field(0, ge=0, description="Total install count")
    source: str = Field(..., description="GitHub 'owner/repo' the skill lives in")


class SearchResult(BaseModel):
    """One response from ``GET /search``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    query: str = ""
    search_type: str | None = Field(None, alias="searchType")
    skills: tuple[SkillRecord, ...] = ()
    count: int = 0
    duration_ms: int = 0

    @model_validator(mode="before")
    @classmethod
    def _default_count(cls, data: Any) -> Any:
        # Older responses omit ``count``; fall back to the page size.
        if isinstance(data, dict) and data.get("count") is None:
            data = {**data, "count": len(data.get("skills") or ())}
        return data


class PlatformInstalls(BaseModel):
    """Install count reported for one agent platform."""

    model_config = ConfigDict(frozen=True)

    platform: str
    count: str


class DetailExtraction(BaseModel):
    """Statistics scraped from a skill's detail page.

    Every field is optional: a missing value means the page did not
    contain recognisable markup for it, not that an error occurred.
    """

    model_config = ConfigDict(frozen=True)

    weekly_installs: str | None = None
    platform_installs: tuple[PlatformInstalls, ...] = ()
    first_seen: str | None = None


class PopularSkills(BaseModel):
    """Result of the popular-skills aggregation."""

    model_config = ConfigDict(frozen=True)

    skills: tuple[SkillRecord, ...] = ()
    unique_count: int = 0
