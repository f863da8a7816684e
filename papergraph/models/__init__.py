"""Catalog models"""

from papergraph.models.analysis import ArticleAnalysis, KeyFinding, ScoreDimensions
from papergraph.models.article import ARTICLE_EDITABLE_FIELDS, Article, ArticleStats, Language
from papergraph.models.article_tag import ArticleTag
from papergraph.models.search import (
    AuthorStats,
    SearchFilters,
    SearchResult,
    SortBy,
    SortOrder,
    YearRange,
)
from papergraph.models.tag import Tag

__all__ = [
    "Article",
    "ArticleStats",
    "Language",
    "ARTICLE_EDITABLE_FIELDS",
    "Tag",
    "ArticleTag",
    "ArticleAnalysis",
    "KeyFinding",
    "ScoreDimensions",
    "SearchFilters",
    "SearchResult",
    "YearRange",
    "SortBy",
    "SortOrder",
    "AuthorStats",
]
