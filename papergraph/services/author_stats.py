"""Per-author rollups over the catalog"""

from __future__ import annotations

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal

from papergraph.config.settings import settings
from papergraph.models.search import AuthorStats
from papergraph.services.association_index import ArticleTagIndex
from papergraph.services.search_engine import ArticleSearchEngine


def _round_score(value: float) -> float:
    """Round to two decimals with halves going up (8.125 -> 8.13)"""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class AuthorStatsAggregator:
    """Aggregates citations, scores, categories and tags for one author"""

    def __init__(
        self,
        search_engine: ArticleSearchEngine,
        associations: ArticleTagIndex,
        *,
        top_categories: int | None = None,
        top_tags: int | None = None,
    ) -> None:
        self._search_engine = search_engine
        self._associations = associations
        self._top_categories = top_categories or settings.TOP_CATEGORIES_LIMIT
        self._top_tags = top_tags or settings.TOP_TAGS_LIMIT

    def author_stats(self, author_name: str) -> AuthorStats | None:
        """
        Roll up every article matching the author substring

        Returns:
            AuthorStats, or None when no article matches
        """
        articles = self._search_engine.filter_by_author(author_name)
        if not articles:
            return None

        total_citations = 0
        score_sum = 0.0
        categories: Counter[str] = Counter()
        tags: Counter[str] = Counter()
        latest = articles[0]

        for article in articles:
            total_citations += article.stats.citations
            score_sum += self._search_engine.score_of(article.id)
            if article.category:
                categories[article.category] += 1
            tags.update(self._associations.tag_names_for(article.id))
            if article.publish_date > latest.publish_date:
                latest = article

        # most_common keeps first-encountered order among equal counts
        return AuthorStats(
            name=author_name,
            article_count=len(articles),
            total_citations=total_citations,
            average_score=_round_score(score_sum / len(articles)),
            top_categories=[name for name, _ in categories.most_common(self._top_categories)],
            top_tags=[name for name, _ in tags.most_common(self._top_tags)],
            latest_article=latest.title,
        )
