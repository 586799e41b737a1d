"""Pydantic data models shared by the estimator, the API client and the server."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Platform(str, Enum):
    """AI platforms checked by the Trustable analysis API."""

    CHATGPT = "chatgpt"
    CLAUDE = "claude"
    PERPLEXITY = "perplexity"
    GEMINI = "gemini"


DEFAULT_PLATFORMS = [p.value for p in Platform]


class Rating(str, Enum):
    """Rating band for a Trustable Score."""

    MINIMAL = "minimal"
    LOW = "low"
    MODERATE = "moderate"
    GOOD = "good"
    EXCELLENT = "excellent"


class ScoreSignals(BaseModel):
    """Publicly observable brand signals used to estimate a score locally.

    Field names follow Python conventions; the camelCase names used by the
    Trustable API (``platformCount``, ``hasWikidata`` ...) are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    platform_count: int = Field(0, ge=0, alias="platformCount", description="Platforms with presence (website, Medium, LinkedIn...)")
    has_wikidata: bool = Field(False, alias="hasWikidata")
    has_google_business: bool = Field(False, alias="hasGoogleBusiness")
    has_schema_markup: bool = Field(False, alias="hasSchemaMarkup", description="JSON-LD schema markup present")
    content_age: Optional[float] = Field(None, ge=0, alias="contentAge", description="Average content age in months")
    has_comparison_content: bool = Field(False, alias="hasComparisonContent")


class QuickWin(BaseModel):
    """A pre-authored action for improving AI visibility."""

    model_config = ConfigDict(frozen=True)

    action: str = Field(min_length=1)
    impact: str = Field(min_length=1)
    effort: str = Field(min_length=1)
    details: str = Field(min_length=1)
