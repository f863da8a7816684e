from __future__ import annotations

from datetime import date
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from papergraph.main import create_app
from papergraph.models.article import Article
from papergraph.services.catalog import ArticleCatalog


@pytest.fixture
def catalog() -> ArticleCatalog:
    return ArticleCatalog(seed_default_tags=False)


@pytest.fixture
def make_article(catalog: ArticleCatalog) -> Callable[..., Article]:
    def _make(**overrides: Any) -> Article:
        publish_date = overrides.pop("publish_date", date(2023, 6, 1))
        authors = overrides.pop("authors", ["Alice Chen"])
        fields: dict[str, Any] = {
            "title": "Attention Is Not All You Need",
            "authors": authors,
            "author_string": ", ".join(authors),
            "abstract": "We revisit attention.",
            "publish_date": publish_date,
            "publish_year": publish_date.year,
            "language": "en",
        }
        fields.update(overrides)
        return catalog.articles.create(**fields)

    return _make


@pytest.fixture
def api_catalog() -> ArticleCatalog:
    return ArticleCatalog(seed_default_tags=True)


@pytest.fixture
def client(api_catalog: ArticleCatalog) -> TestClient:
    return TestClient(create_app(api_catalog))


@pytest.fixture
def article_payload() -> dict:
    return {
        "title": "Attention Is All You Need",
        "authors": ["Ashish Vaswani", "Noam Shazeer"],
        "author_string": "Ashish Vaswani, Noam Shazeer",
        "abstract": "The dominant sequence transduction models...",
        "publish_date": "2017-06-12",
        "publish_year": 2017,
        "url": "https://arxiv.org/abs/1706.03762",
        "category": "cs-ai",
        "language": "en",
        "word_count": 6000,
    }
