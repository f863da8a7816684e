"""Filter, sort and paginate queries over the article catalog"""

from __future__ import annotations

import logging
from math import ceil
from typing import Any, Callable

from papergraph.config.settings import settings
from papergraph.models.article import Article
from papergraph.models.search import SearchFilters, SearchResult, SortBy, SortOrder
from papergraph.services.analysis_store import AnalysisStore
from papergraph.services.article_store import ArticleStore
from papergraph.services.association_index import ArticleTagIndex

logger = logging.getLogger(__name__)


def matches_author(article: Article, author: str) -> bool:
    """Case-insensitive substring match on the author list or author string"""
    needle = author.lower()
    return (
        any(needle in name.lower() for name in article.authors)
        or needle in article.author_string.lower()
    )


class ArticleSearchEngine:
    """
    Answers composite catalog queries

    Predicates run in a fixed order (author, tags, category, year, language,
    score) and each one only narrows the working set. Sorting is stable, so
    ties keep catalog insertion order.
    """

    def __init__(
        self,
        articles: ArticleStore,
        associations: ArticleTagIndex,
        analyses: AnalysisStore,
    ) -> None:
        self._articles = articles
        self._associations = associations
        self._analyses = analyses

    def score_of(self, article_id: int) -> float:
        """Derived score of an article, 0 when it has no analysis"""
        return self._analyses.article_score(article_id) or 0.0

    def filter_by_author(self, author: str) -> list[Article]:
        return [article for article in self._articles.list_all() if matches_author(article, author)]

    def filter_articles(self, filters: SearchFilters) -> list[Article]:
        """Apply every predicate of the filter value, without sorting"""
        articles = self._articles.list_all()

        if filters.author:
            articles = [a for a in articles if matches_author(a, filters.author)]

        if filters.tags:
            wanted = [tag.lower() for tag in filters.tags]
            articles = [a for a in articles if self._has_any_tag(a.id, wanted)]

        if filters.category:
            articles = [a for a in articles if a.category == filters.category]

        if filters.year is not None:
            start, end = filters.year.start, filters.year.end
            articles = [
                a
                for a in articles
                if (start is None or a.publish_year >= start) and (end is None or a.publish_year <= end)
            ]

        if filters.language:
            articles = [a for a in articles if a.language == filters.language]

        if filters.min_score is not None or filters.max_score is not None:
            articles = [a for a in articles if self._score_in_range(a.id, filters.min_score, filters.max_score)]

        return articles

    def search(self, filters: SearchFilters | None = None) -> SearchResult:
        filters = filters or SearchFilters()
        articles = self.filter_articles(filters)

        articles = sorted(
            articles,
            key=self._sort_key(SortBy(filters.sort_by)),
            reverse=SortOrder(filters.sort_order) == SortOrder.DESC,
        )

        page = filters.page or 1
        limit = filters.limit or settings.DEFAULT_PAGE_SIZE
        total = len(articles)
        start = (page - 1) * limit

        logger.debug(f"Search matched {total} articles (page={page}, limit={limit})")

        return SearchResult(
            articles=articles[start:start + limit],
            total=total,
            page=page,
            limit=limit,
            total_pages=ceil(total / limit),
            filters=filters,
        )

    def _has_any_tag(self, article_id: int, wanted: list[str]) -> bool:
        names = [name.lower() for name in self._associations.tag_names_for(article_id)]
        return any(needle in name for needle in wanted for name in names)

    def _score_in_range(self, article_id: int, min_score: float | None, max_score: float | None) -> bool:
        score = self.score_of(article_id)
        if min_score is not None and score < min_score:
            return False
        if max_score is not None and score > max_score:
            return False
        return True

    def _sort_key(self, sort_by: SortBy) -> Callable[[Article], Any]:
        if sort_by == SortBy.SCORE:
            return lambda article: self.score_of(article.id)
        if sort_by == SortBy.CITATIONS:
            return lambda article: article.stats.citations
        if sort_by == SortBy.VIEWS:
            return lambda article: article.stats.views
        return lambda article: article.publish_date
