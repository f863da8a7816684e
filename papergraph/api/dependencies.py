"""Request-scoped dependencies"""

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query, Request

from papergraph.config.settings import settings
from papergraph.models.article import Language
from papergraph.models.search import SearchFilters, SortBy, SortOrder, YearRange
from papergraph.services.catalog import ArticleCatalog


def get_catalog(request: Request) -> ArticleCatalog:
    """Catalog owned by the running application"""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=503, detail="Catalog is not initialized")
    return catalog


def split_tags(raw: Optional[str]) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def search_filters(
    author: Optional[str] = Query(None),
    tags: Optional[str] = Query(None, description="Comma-separated tag names"),
    category: Optional[str] = Query(None),
    year_start: Optional[int] = Query(None, alias="yearStart"),
    year_end: Optional[int] = Query(None, alias="yearEnd"),
    language: Optional[Language] = Query(None),
    min_score: Optional[float] = Query(None, alias="minScore"),
    max_score: Optional[float] = Query(None, alias="maxScore"),
    sort_by: SortBy = Query(SortBy.DATE, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> SearchFilters:
    """Translate query-string parameters into a SearchFilters value"""
    year = None
    if year_start is not None or year_end is not None:
        year = YearRange(start=year_start, end=year_end)

    return SearchFilters(
        author=author or None,
        tags=split_tags(tags),
        category=category or None,
        year=year,
        language=language,
        min_score=min_score,
        max_score=max_score,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
