"""In-memory article store"""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, date, datetime
import logging
from typing import Any, Callable

from papergraph.models.article import ARTICLE_EDITABLE_FIELDS, Article, ArticleStats, Language

logger = logging.getLogger(__name__)

_STAT_FIELDS = ("views", "downloads", "shares", "citations")


class ArticleStore:
    """Holds article records keyed by id, in insertion order"""

    def __init__(self) -> None:
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self._delete_listeners: list[Callable[[int], None]] = []

    def on_delete(self, callback: Callable[[int], None]) -> None:
        """Register a callback invoked with the article id after deletion"""
        self._delete_listeners.append(callback)

    def create(
        self,
        *,
        title: str,
        authors: list[str],
        author_string: str,
        abstract: str,
        publish_date: date,
        publish_year: int,
        source: str | None = None,
        doi: str | None = None,
        url: str | None = None,
        pdf_url: str | None = None,
        category: str | None = None,
        subcategory: str | None = None,
        language: Language = Language.ZH,
        word_count: int = 0,
    ) -> Article:
        """Create an article with zeroed stats and both timestamps set to now"""
        now = datetime.now(UTC)
        article = Article(
            id=self._next_id,
            title=title,
            authors=list(authors),
            author_string=author_string,
            abstract=abstract,
            publish_date=publish_date,
            publish_year=publish_year,
            source=source,
            doi=doi,
            url=url,
            pdf_url=pdf_url,
            category=category,
            subcategory=subcategory,
            language=Language(language),
            word_count=word_count,
            created_at=now,
            updated_at=now,
            stats=ArticleStats(),
        )
        self._next_id += 1
        self._articles[article.id] = article
        logger.debug(f"Created article {article.id}: {title[:50]}")
        return article

    def get(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    def get_by_url(self, url: str) -> Article | None:
        """First article whose url matches exactly"""
        return next((article for article in self._articles.values() if article.url == url), None)

    def exists(self, article_id: int) -> bool:
        return article_id in self._articles

    def update(self, article_id: int, **fields: Any) -> Article | None:
        """
        Merge the given fields over an existing article

        Only editable bibliographic fields may be overwritten; the update
        timestamp is always refreshed.

        Returns:
            The updated article, or None if it does not exist
        """
        article = self._articles.get(article_id)
        if article is None:
            return None

        unknown = set(fields) - ARTICLE_EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        if "language" in fields:
            fields["language"] = Language(fields["language"])
        if "authors" in fields:
            fields["authors"] = list(fields["authors"])

        updated = replace(article, **fields, updated_at=datetime.now(UTC))
        self._articles[article_id] = updated
        return updated

    def record_engagement(
        self,
        article_id: int,
        *,
        views: int = 0,
        downloads: int = 0,
        shares: int = 0,
        citations: int = 0,
    ) -> Article | None:
        """Increment engagement counters; counters never decrease"""
        increments = {"views": views, "downloads": downloads, "shares": shares, "citations": citations}
        negative = [name for name, amount in increments.items() if amount < 0]
        if negative:
            raise ValueError(f"Engagement counters cannot be decremented: {negative}")

        article = self._articles.get(article_id)
        if article is None:
            return None

        for name in _STAT_FIELDS:
            setattr(article.stats, name, getattr(article.stats, name) + increments[name])
        article.updated_at = datetime.now(UTC)
        return article

    def delete(self, article_id: int) -> bool:
        if self._articles.pop(article_id, None) is None:
            return False

        for callback in self._delete_listeners:
            callback(article_id)
        logger.info(f"Deleted article {article_id}")
        return True

    def list_all(self) -> list[Article]:
        return list(self._articles.values())

    def __len__(self) -> int:
        return len(self._articles)
