"""Article endpoints: catalog CRUD, tagging, analyses and search"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from papergraph.api.dependencies import get_catalog, search_filters
from papergraph.api.responses import envelope
from papergraph.api.schemas import (
    AnalysisCreate,
    ArticleCreate,
    ArticleTagAdd,
    ArticleUpdate,
    EngagementIncrement,
)
from papergraph.models.article import Article
from papergraph.models.search import SearchFilters
from papergraph.services.catalog import ArticleCatalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/articles", tags=["articles"])

# Optional fields a client may reset by sending null
_CLEARABLE_FIELDS = frozenset({"source", "doi", "url", "pdf_url", "category", "subcategory"})


def _require_article(catalog: ArticleCatalog, article_id: int) -> Article:
    article = catalog.articles.get(article_id)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return article


@router.get("")
async def search_articles(
    filters: SearchFilters = Depends(search_filters),
    catalog: ArticleCatalog = Depends(get_catalog),
):
    """Filtered, sorted and paginated article listing"""
    return envelope(catalog.search(filters), "Articles loaded")


@router.post("")
async def create_article(body: ArticleCreate, catalog: ArticleCatalog = Depends(get_catalog)):
    if body.url and catalog.articles.get_by_url(body.url) is not None:
        raise HTTPException(status_code=409, detail=f"An article with this URL already exists: {body.url}")

    fields = body.model_dump(exclude={"tags"})
    article = catalog.create_article(tag_names=body.tags, **fields)
    return envelope(article, "Article created")


@router.get("/authors/{author_name}")
async def articles_by_author(
    author_name: str,
    filters: SearchFilters = Depends(search_filters),
    catalog: ArticleCatalog = Depends(get_catalog),
):
    """Articles of one author together with their rollup"""
    filters.author = author_name
    return envelope(
        {
            "articles": catalog.search(filters),
            "author_stats": catalog.author_stats(author_name),
        },
        "Author articles loaded",
    )


@router.get("/tags/{tag_name}")
async def articles_by_tag(
    tag_name: str,
    filters: SearchFilters = Depends(search_filters),
    catalog: ArticleCatalog = Depends(get_catalog),
):
    filters.tags = [tag_name]
    return envelope(
        {
            "articles": catalog.search(filters),
            "tag_info": catalog.tags.get_by_name(tag_name),
        },
        "Tag articles loaded",
    )


@router.get("/{article_id}")
async def get_article(article_id: int, catalog: ArticleCatalog = Depends(get_catalog)):
    article = _require_article(catalog, article_id)
    return envelope(
        {
            "article": article,
            "tags": catalog.associations.tags_for(article_id),
            "score": catalog.analyses.article_score(article_id),
        },
        "Article loaded",
    )


@router.put("/{article_id}")
async def update_article(article_id: int, body: ArticleUpdate, catalog: ArticleCatalog = Depends(get_catalog)):
    changes = {
        key: value
        for key, value in body.model_dump(exclude_unset=True).items()
        if value is not None or key in _CLEARABLE_FIELDS
    }
    if changes.get("url"):
        duplicate = catalog.articles.get_by_url(changes["url"])
        if duplicate is not None and duplicate.id != article_id:
            raise HTTPException(status_code=409, detail=f"An article with this URL already exists: {changes['url']}")

    article = catalog.articles.update(article_id, **changes)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return envelope(article, "Article updated")


@router.delete("/{article_id}")
async def delete_article(article_id: int, catalog: ArticleCatalog = Depends(get_catalog)):
    if not catalog.articles.delete(article_id):
        raise HTTPException(status_code=404, detail="Article not found")
    return envelope(None, "Article deleted")


@router.post("/{article_id}/engagement")
async def record_engagement(
    article_id: int,
    body: EngagementIncrement,
    catalog: ArticleCatalog = Depends(get_catalog),
):
    article = catalog.articles.record_engagement(article_id, **body.model_dump())
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return envelope(article.stats, "Engagement recorded")


@router.get("/{article_id}/tags")
async def list_article_tags(article_id: int, catalog: ArticleCatalog = Depends(get_catalog)):
    _require_article(catalog, article_id)
    return envelope(catalog.associations.tags_for(article_id), "Article tags loaded")


@router.post("/{article_id}/tags")
async def add_article_tag(article_id: int, body: ArticleTagAdd, catalog: ArticleCatalog = Depends(get_catalog)):
    """Associate an existing tag, or a tag looked up / created by name"""
    _require_article(catalog, article_id)

    if body.name is not None:
        tag = catalog.tags.get_or_create(
            name=body.name,
            description=body.description,
            color=body.color,
            category=body.category,
        )
    else:
        tag = catalog.tags.get(body.tag_id)
        if tag is None:
            raise HTTPException(status_code=404, detail="Tag not found")

    association = catalog.associations.associate(article_id, tag.id, body.confidence)
    if association is None:
        raise HTTPException(status_code=400, detail="Could not tag article")

    logger.info(f"Article {article_id} tagged with {tag.name}")
    return envelope({"article_tag": association, "tag": tag}, "Tag added")


@router.delete("/{article_id}/tags/{tag_id}")
async def remove_article_tag(article_id: int, tag_id: int, catalog: ArticleCatalog = Depends(get_catalog)):
    if not catalog.associations.disassociate(article_id, tag_id):
        raise HTTPException(status_code=404, detail="Article is not tagged with this tag")
    return envelope(None, "Tag removed")


@router.get("/{article_id}/analysis")
async def get_article_analysis(article_id: int, catalog: ArticleCatalog = Depends(get_catalog)):
    _require_article(catalog, article_id)
    analysis = catalog.analyses.get_for_article(article_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail="Article has no analysis")
    return envelope(analysis, "Analysis loaded")


@router.post("/{article_id}/analysis")
async def create_article_analysis(
    article_id: int,
    body: AnalysisCreate,
    catalog: ArticleCatalog = Depends(get_catalog),
):
    analysis = catalog.analyses.create(
        article_id=article_id,
        user_id=body.user_id,
        overall_score=body.overall_score,
        dimensions=body.dimensions.to_model(),
        summary=body.summary,
        key_findings=[finding.to_model() for finding in body.key_findings],
        strengths=body.strengths,
        weaknesses=body.weaknesses,
        suggestions=body.suggestions,
        extracted_tags=body.extracted_tags,
    )
    if analysis is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return envelope(analysis, "Analysis recorded")
