"""ArticleTag model for article/tag associations"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class ArticleTag:
    """
    Confidence-weighted link between one article and one tag

    Identities come from an independent counter and are never reused, so
    removing an association does not shift the ids of later ones.
    """

    id: int
    article_id: int
    tag_id: int
    confidence: float
    created_at: datetime

    def __repr__(self):
        return f"<ArticleTag article_id={self.article_id} tag_id={self.tag_id} confidence={self.confidence}>"
