"""Article records held by the catalog"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class Language(str, Enum):
    """Language an article is written in"""
    ZH = "zh"
    EN = "en"
    OTHER = "other"


@dataclass(slots=True)
class ArticleStats:
    """Engagement counters, only ever incremented"""

    views: int = 0
    downloads: int = 0
    shares: int = 0
    citations: int = 0


@dataclass(slots=True)
class Article:
    """
    Cataloged paper with bibliographic metadata and engagement counters

    `author_string` keeps the free-text author form the paper was submitted
    with; keeping it consistent with `authors` is up to the caller.
    """

    id: int
    title: str
    authors: list[str]
    author_string: str
    abstract: str
    publish_date: date
    publish_year: int
    created_at: datetime
    updated_at: datetime
    source: str | None = None
    doi: str | None = None
    url: str | None = None
    pdf_url: str | None = None
    category: str | None = None
    subcategory: str | None = None
    language: Language = Language.ZH
    word_count: int = 0
    stats: ArticleStats = field(default_factory=ArticleStats)

    def __repr__(self):
        return f"<Article {self.id}: {self.title[:50]}>"


# Fields a caller supplies on creation and may later overwrite via update.
ARTICLE_EDITABLE_FIELDS: frozenset[str] = frozenset(
    {
        "title",
        "authors",
        "author_string",
        "abstract",
        "publish_date",
        "publish_year",
        "source",
        "doi",
        "url",
        "pdf_url",
        "category",
        "subcategory",
        "language",
        "word_count",
    }
)
