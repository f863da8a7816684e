from __future__ import annotations

from datetime import date

from papergraph.config.settings import settings
from papergraph.services.catalog import ArticleCatalog
from papergraph.services.default_tags import TagSeed, get_default_tag_seeds


def _article_fields(**overrides):
    fields = {
        "title": "Scaling Laws",
        "authors": ["Jared Kaplan"],
        "author_string": "Jared Kaplan",
        "abstract": "Loss scales as a power law.",
        "publish_date": date(2020, 1, 23),
        "publish_year": 2020,
        "language": "en",
    }
    fields.update(overrides)
    return fields


def test_catalog_seeds_default_tags() -> None:
    catalog = ArticleCatalog(seed_default_tags=True)

    assert len(catalog.tags) == len(get_default_tag_seeds())
    assert catalog.tags.get_by_name("transformer").category == "technique"


def test_catalog_instances_are_independent() -> None:
    first = ArticleCatalog(seed_default_tags=False)
    second = ArticleCatalog(seed_default_tags=False)

    first.create_article(**_article_fields())

    assert len(first.articles) == 1
    assert len(second.articles) == 0


def test_create_article_reuses_and_creates_tags_by_name() -> None:
    catalog = ArticleCatalog(tag_seeds=[TagSeed(name="GPT", description="", color="#F97316", category="technique")])

    article = catalog.create_article(tag_names=["gpt", "Scaling", " "], **_article_fields())

    names = [tag.name for tag in catalog.associations.tags_for(article.id)]
    created = catalog.tags.get_by_name("Scaling")
    assert names == ["GPT", "Scaling"]
    assert created.color == settings.AUTO_TAG_COLOR
    assert created.category == settings.AUTO_TAG_CATEGORY
    assert created.usage_count == 1


def test_deleting_article_cascades_to_associations_and_analyses() -> None:
    catalog = ArticleCatalog(seed_default_tags=False)
    article = catalog.create_article(tag_names=["LLM"], **_article_fields())
    catalog.analyses.create(article_id=article.id, user_id=3, overall_score=9.1)

    assert catalog.articles.delete(article.id) is True

    assert len(catalog.associations) == 0
    assert len(catalog.analyses) == 0
    assert catalog.tags.get_by_name("LLM").usage_count == 0


def test_article_score_is_mean_of_analyses() -> None:
    catalog = ArticleCatalog(seed_default_tags=False)
    article = catalog.create_article(**_article_fields())

    assert catalog.analyses.article_score(article.id) is None
    catalog.analyses.create(article_id=article.id, user_id=1, overall_score=6.0)
    catalog.analyses.create(article_id=article.id, user_id=2, overall_score=9.0)

    assert catalog.analyses.article_score(article.id) == 7.5
    assert catalog.analyses.get_for_article(article.id).user_id == 1
    assert catalog.analyses.create(article_id=404, user_id=1, overall_score=1.0) is None


def test_clear_resets_data_and_reseeds() -> None:
    catalog = ArticleCatalog(seed_default_tags=True)
    catalog.create_article(tag_names=["Custom"], **_article_fields())

    catalog.clear()

    assert len(catalog.articles) == 0
    assert len(catalog.associations) == 0
    assert catalog.tags.get_by_name("Custom") is None
    assert len(catalog.tags) == len(get_default_tag_seeds())
    assert catalog.create_article(**_article_fields()).id == 1


def test_close_leaves_catalog_empty() -> None:
    catalog = ArticleCatalog(seed_default_tags=True)
    catalog.create_article(**_article_fields())

    catalog.close()

    assert len(catalog.articles) == 0
    assert len(catalog.tags) == 0
