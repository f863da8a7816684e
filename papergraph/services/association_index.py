"""Article/tag association index"""

from __future__ import annotations

from datetime import UTC, datetime
import logging

from papergraph.models.article_tag import ArticleTag
from papergraph.models.tag import Tag
from papergraph.services.article_store import ArticleStore
from papergraph.services.tag_registry import TagRegistry

logger = logging.getLogger(__name__)


class ArticleTagIndex:
    """
    Confidence-weighted links between articles and tags

    Keyed by (article_id, tag_id), so each pair has at most one link. The
    index subscribes to deletions in both stores and drops links that would
    otherwise dangle.
    """

    def __init__(self, articles: ArticleStore, tags: TagRegistry) -> None:
        self._articles = articles
        self._tags = tags
        self._links: dict[tuple[int, int], ArticleTag] = {}
        self._next_id = 1

        articles.on_delete(self.remove_article)
        tags.on_delete(self.remove_tag)

    def associate(self, article_id: int, tag_id: int, confidence: float = 1.0) -> ArticleTag | None:
        """
        Link a tag to an article

        Returns:
            The new association, the existing one if the pair is already
            linked, or None if the article or tag does not exist
        """
        if not 0.0 <= confidence <= 1.0:
            raise ValueError(f"Confidence must be within [0, 1], got {confidence}")

        if not self._articles.exists(article_id) or not self._tags.exists(tag_id):
            return None

        existing = self._links.get((article_id, tag_id))
        if existing is not None:
            return existing

        link = ArticleTag(
            id=self._next_id,
            article_id=article_id,
            tag_id=tag_id,
            confidence=confidence,
            created_at=datetime.now(UTC),
        )
        self._next_id += 1
        self._links[(article_id, tag_id)] = link
        self._tags.adjust_usage(tag_id, 1)
        logger.debug(f"Tagged article {article_id} with tag {tag_id} ({confidence:.2f})")
        return link

    def disassociate(self, article_id: int, tag_id: int) -> bool:
        if self._links.pop((article_id, tag_id), None) is None:
            return False
        self._tags.adjust_usage(tag_id, -1)
        return True

    def get(self, article_id: int, tag_id: int) -> ArticleTag | None:
        return self._links.get((article_id, tag_id))

    def associations_for(self, article_id: int) -> list[ArticleTag]:
        return [link for (linked_article, _), link in self._links.items() if linked_article == article_id]

    def tags_for(self, article_id: int) -> list[Tag]:
        """Tags linked to an article, in registry order"""
        tag_ids = {link.tag_id for link in self.associations_for(article_id)}
        if not tag_ids:
            return []
        return [tag for tag in self._tags.list_all() if tag.id in tag_ids]

    def tag_names_for(self, article_id: int) -> list[str]:
        return [tag.name for tag in self.tags_for(article_id)]

    def remove_article(self, article_id: int) -> int:
        """Drop every link of a deleted article, releasing tag usage"""
        removed = 0
        for link in self.associations_for(article_id):
            if self.disassociate(link.article_id, link.tag_id):
                removed += 1
        if removed:
            logger.debug(f"Removed {removed} associations of article {article_id}")
        return removed

    def remove_tag(self, tag_id: int) -> int:
        """Drop every link pointing at a deleted tag"""
        keys = [key for key in self._links if key[1] == tag_id]
        for key in keys:
            del self._links[key]
        if keys:
            logger.debug(f"Removed {len(keys)} associations of tag {tag_id}")
        return len(keys)

    def __len__(self) -> int:
        return len(self._links)
