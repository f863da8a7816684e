from __future__ import annotations

from datetime import date

import pytest

from papergraph.models.article import Language
from papergraph.services.article_store import ArticleStore


def _fields(**overrides):
    fields = {
        "title": "Graph Neural Networks",
        "authors": ["张三", "李四"],
        "author_string": "张三, 李四",
        "abstract": "A survey.",
        "publish_date": date(2022, 3, 15),
        "publish_year": 2022,
        "url": "https://arxiv.org/abs/2203.00001",
        "category": "cs-ai",
        "language": "zh",
        "word_count": 4200,
    }
    fields.update(overrides)
    return fields


def test_create_then_get_returns_supplied_fields_and_zero_stats() -> None:
    store = ArticleStore()
    fields = _fields()

    created = store.create(**fields)
    fetched = store.get(created.id)

    for key, value in fields.items():
        assert getattr(fetched, key) == value
    assert fetched.language is Language.ZH
    assert (fetched.stats.views, fetched.stats.downloads, fetched.stats.shares, fetched.stats.citations) == (0, 0, 0, 0)
    assert fetched.created_at == fetched.updated_at


def test_ids_are_sequential_and_not_reused() -> None:
    store = ArticleStore()
    first = store.create(**_fields())
    store.delete(first.id)

    second = store.create(**_fields())

    assert second.id == 2


def test_get_by_url_matches_exactly() -> None:
    store = ArticleStore()
    store.create(**_fields())

    assert store.get_by_url("https://arxiv.org/abs/2203.00001").id == 1
    assert store.get_by_url("https://arxiv.org/abs/2203") is None


def test_update_merges_fields_and_refreshes_timestamp() -> None:
    store = ArticleStore()
    article = store.create(**_fields())

    updated = store.update(article.id, title="GNNs Revisited", language="en")

    assert updated.title == "GNNs Revisited"
    assert updated.language is Language.EN
    assert updated.abstract == "A survey."
    assert updated.created_at == article.created_at
    assert updated.updated_at >= article.updated_at
    assert store.get(article.id) is updated


def test_update_missing_article_returns_none() -> None:
    assert ArticleStore().update(7, title="x") is None


def test_update_refuses_identity_and_stats() -> None:
    store = ArticleStore()
    article = store.create(**_fields())

    with pytest.raises(ValueError):
        store.update(article.id, id=99)
    with pytest.raises(ValueError):
        store.update(article.id, stats=None)


def test_record_engagement_only_increments() -> None:
    store = ArticleStore()
    article = store.create(**_fields())

    store.record_engagement(article.id, views=3, citations=2)
    store.record_engagement(article.id, views=1, shares=1)

    assert article.stats.views == 4
    assert article.stats.citations == 2
    assert article.stats.shares == 1
    assert store.record_engagement(404, views=1) is None
    with pytest.raises(ValueError):
        store.record_engagement(article.id, views=-1)


def test_delete_reports_existence_and_notifies_listeners() -> None:
    store = ArticleStore()
    article = store.create(**_fields())
    deleted: list[int] = []
    store.on_delete(deleted.append)

    assert store.delete(article.id) is True
    assert store.delete(article.id) is False
    assert deleted == [article.id]
    assert store.list_all() == []
