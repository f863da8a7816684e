"""Catalog services"""

from papergraph.services.analysis_store import AnalysisStore
from papergraph.services.article_store import ArticleStore
from papergraph.services.association_index import ArticleTagIndex
from papergraph.services.author_stats import AuthorStatsAggregator
from papergraph.services.catalog import ArticleCatalog
from papergraph.services.search_engine import ArticleSearchEngine, matches_author
from papergraph.services.tag_registry import TagRegistry

__all__ = [
    "ArticleCatalog",
    "ArticleStore",
    "TagRegistry",
    "ArticleTagIndex",
    "AnalysisStore",
    "ArticleSearchEngine",
    "AuthorStatsAggregator",
    "matches_author",
]
