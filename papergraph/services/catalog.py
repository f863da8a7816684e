"""Catalog composition root owning every in-memory store"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from papergraph.config.settings import settings
from papergraph.models.article import Article
from papergraph.models.search import AuthorStats, SearchFilters, SearchResult
from papergraph.services.analysis_store import AnalysisStore
from papergraph.services.article_store import ArticleStore
from papergraph.services.association_index import ArticleTagIndex
from papergraph.services.author_stats import AuthorStatsAggregator
from papergraph.services.default_tags import TagSeed, get_default_tag_seeds
from papergraph.services.search_engine import ArticleSearchEngine
from papergraph.services.tag_registry import TagRegistry

logger = logging.getLogger(__name__)


class ArticleCatalog:
    """
    Explicitly constructed repository handed to request handlers

    Deleting an article drops its tag associations (releasing tag usage) and
    its analyses; deleting a tag drops its associations. Not thread-safe:
    callers serialize access.
    """

    def __init__(
        self,
        *,
        seed_default_tags: bool | None = None,
        tag_seeds: Sequence[TagSeed] | None = None,
    ) -> None:
        self._seed_default_tags = settings.SEED_DEFAULT_TAGS if seed_default_tags is None else seed_default_tags
        self._tag_seeds = list(tag_seeds) if tag_seeds is not None else get_default_tag_seeds()
        self._build(seed=self._seed_default_tags)

    def _build(self, *, seed: bool) -> None:
        self.tags = TagRegistry()
        self.articles = ArticleStore()
        self.associations = ArticleTagIndex(self.articles, self.tags)
        self.analyses = AnalysisStore(self.articles)
        self.search_engine = ArticleSearchEngine(self.articles, self.associations, self.analyses)
        self.author_aggregator = AuthorStatsAggregator(self.search_engine, self.associations)

        if seed:
            for tag_seed in self._tag_seeds:
                self.tags.get_or_create(
                    name=tag_seed.name,
                    description=tag_seed.description,
                    color=tag_seed.color,
                    category=tag_seed.category,
                )
            logger.info(f"Seeded {len(self.tags)} default tags")

    def create_article(self, *, tag_names: Iterable[str] = (), **fields: Any) -> Article:
        """
        Create an article and tag it by name

        Unknown tag names are registered on the fly with the configured
        default color and category.
        """
        article = self.articles.create(**fields)
        for name in tag_names:
            name = name.strip()
            if not name:
                continue
            tag = self.tags.get_or_create(
                name=name,
                color=settings.AUTO_TAG_COLOR,
                category=settings.AUTO_TAG_CATEGORY,
            )
            self.associations.associate(article.id, tag.id)
        logger.info(f"Cataloged article {article.id}: {article.title[:50]}")
        return article

    def search(self, filters: SearchFilters | None = None) -> SearchResult:
        return self.search_engine.search(filters)

    def author_stats(self, author_name: str) -> AuthorStats | None:
        return self.author_aggregator.author_stats(author_name)

    def clear(self) -> None:
        """Drop all data, then reseed the default tags"""
        self._build(seed=self._seed_default_tags)
        logger.info("Catalog cleared")

    def close(self) -> None:
        logger.info(
            f"Closing catalog: {len(self.articles)} articles, {len(self.tags)} tags, "
            f"{len(self.associations)} associations, {len(self.analyses)} analyses"
        )
        self._build(seed=False)
