"""Search inputs and results"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from papergraph.models.article import Article, Language


class SortBy(str, Enum):
    """Sort keys accepted by the search engine"""
    DATE = "date"
    SCORE = "score"
    CITATIONS = "citations"
    VIEWS = "views"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(slots=True)
class YearRange:
    """Inclusive publish-year bounds; either end may be open"""

    start: int | None = None
    end: int | None = None


@dataclass(slots=True)
class SearchFilters:
    """Composite query over the catalog. Every field is optional."""

    author: str | None = None
    tags: list[str] = field(default_factory=list)
    category: str | None = None
    year: YearRange | None = None
    language: Language | None = None
    min_score: float | None = None
    max_score: float | None = None
    sort_by: SortBy = SortBy.DATE
    sort_order: SortOrder = SortOrder.DESC
    page: int | None = None
    limit: int | None = None


@dataclass(slots=True)
class SearchResult:
    articles: list[Article]
    total: int
    page: int
    limit: int
    total_pages: int
    filters: SearchFilters


@dataclass(slots=True)
class AuthorStats:
    """Per-author rollup over every matching article"""

    name: str
    article_count: int
    total_citations: int
    average_score: float
    top_categories: list[str]
    top_tags: list[str]
    latest_article: str
