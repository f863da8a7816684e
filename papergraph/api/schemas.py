"""Request bodies accepted by the HTTP API"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, List, Optional
from urllib.parse import urlparse

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from papergraph.models.analysis import KeyFinding, ScoreDimensions
from papergraph.models.article import Language

MIN_PUBLISH_YEAR = 1900


def parse_publish_date(value: Any) -> Any:
    """Accept free-form date strings ("2023-05-01", "May 2023", ...)"""
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("publish_date must not be empty")
        try:
            return date_parser.parse(text, default=datetime(2000, 1, 1)).date()
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Unrecognized publish_date: {value}") from e
    return value


def normalize_url(value: Optional[str]) -> Optional[str]:
    """Empty strings mean "no url"; anything else must be http(s)"""
    if value is None or not value.strip():
        return None
    parsed = urlparse(value.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid URL: {value}")
    return value.strip()


def check_publish_year(value: Optional[int]) -> Optional[int]:
    if value is None:
        return value
    max_year = date.today().year + 1
    if not MIN_PUBLISH_YEAR <= value <= max_year:
        raise ValueError(f"publish_year must be between {MIN_PUBLISH_YEAR} and {max_year}")
    return value


class ArticleCreate(BaseModel):
    """Payload for cataloging a new article"""

    title: str = Field(..., min_length=1)
    authors: List[str] = Field(..., min_length=1)
    author_string: str = Field(..., min_length=1)
    abstract: str = Field(..., min_length=1)
    publish_date: date
    publish_year: int
    source: Optional[str] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    pdf_url: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    language: Language = Language.ZH
    word_count: int = Field(0, ge=0)
    tags: List[str] = Field(default_factory=list, description="Tag names, created when unknown")

    @field_validator("publish_date", mode="before")
    @classmethod
    def _parse_publish_date(cls, value: Any) -> Any:
        return parse_publish_date(value)

    @field_validator("publish_year")
    @classmethod
    def _check_publish_year(cls, value: Optional[int]) -> Optional[int]:
        return check_publish_year(value)

    @field_validator("url", "pdf_url")
    @classmethod
    def _check_urls(cls, value: Optional[str]) -> Optional[str]:
        return normalize_url(value)


class ArticleUpdate(BaseModel):
    """Partial article update; only fields that are sent get overwritten"""

    title: Optional[str] = Field(None, min_length=1)
    authors: Optional[List[str]] = Field(None, min_length=1)
    author_string: Optional[str] = Field(None, min_length=1)
    abstract: Optional[str] = Field(None, min_length=1)
    publish_date: Optional[date] = None
    publish_year: Optional[int] = None
    source: Optional[str] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    pdf_url: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    language: Optional[Language] = None
    word_count: Optional[int] = Field(None, ge=0)

    @field_validator("publish_date", mode="before")
    @classmethod
    def _parse_publish_date(cls, value: Any) -> Any:
        return parse_publish_date(value)

    @field_validator("publish_year")
    @classmethod
    def _check_publish_year(cls, value: Optional[int]) -> Optional[int]:
        return check_publish_year(value)

    @field_validator("url", "pdf_url")
    @classmethod
    def _check_urls(cls, value: Optional[str]) -> Optional[str]:
        return normalize_url(value)


class EngagementIncrement(BaseModel):
    views: int = Field(0, ge=0)
    downloads: int = Field(0, ge=0)
    shares: int = Field(0, ge=0)
    citations: int = Field(0, ge=0)


class TagCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    color: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)


class TagUpdate(BaseModel):
    """Partial tag update; name, color and category may be omitted but not cleared"""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    color: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)

    @model_validator(mode="after")
    def _reject_cleared_fields(self) -> "TagUpdate":
        for field in ("name", "color", "category"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class ArticleTagAdd(BaseModel):
    """
    Tag an article

    Either reference an existing tag by `tag_id`, or pass `name` (plus color
    and category) to reuse a tag of that name or create it.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    tag_id: Optional[int] = Field(None, ge=1)
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    color: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    confidence: float = Field(1.0, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _require_tag_reference(self) -> "ArticleTagAdd":
        if self.name is None and self.tag_id is None:
            raise ValueError("Either tag_id or name is required")
        if self.name is not None and (not self.color or not self.category):
            raise ValueError("color and category are required when creating a tag by name")
        return self


class ScoreDimensionsIn(BaseModel):
    innovation: float = Field(0.0, ge=0.0, le=10.0)
    methodology: float = Field(0.0, ge=0.0, le=10.0)
    impact: float = Field(0.0, ge=0.0, le=10.0)
    clarity: float = Field(0.0, ge=0.0, le=10.0)
    reproducibility: float = Field(0.0, ge=0.0, le=10.0)
    significance: float = Field(0.0, ge=0.0, le=10.0)

    def to_model(self) -> ScoreDimensions:
        return ScoreDimensions(**self.model_dump())


class KeyFindingIn(BaseModel):
    id: str
    title: str
    description: str
    icon: str = ""

    def to_model(self) -> KeyFinding:
        return KeyFinding(**self.model_dump())


class AnalysisCreate(BaseModel):
    user_id: int = Field(..., ge=1)
    overall_score: float = Field(..., ge=0.0, le=10.0)
    dimensions: ScoreDimensionsIn = Field(default_factory=ScoreDimensionsIn)
    summary: str = ""
    key_findings: List[KeyFindingIn] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    extracted_tags: List[str] = Field(default_factory=list)
