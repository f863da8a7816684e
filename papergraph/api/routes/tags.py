"""Tag endpoints"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from papergraph.api.dependencies import get_catalog
from papergraph.api.responses import envelope
from papergraph.api.schemas import TagCreate, TagUpdate
from papergraph.services.catalog import ArticleCatalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tags", tags=["tags"])


@router.get("")
async def list_tags(category: Optional[str] = None, catalog: ArticleCatalog = Depends(get_catalog)):
    """All tags, or only those of one category"""
    if category:
        tags = catalog.tags.get_all_by_category(category)
    else:
        tags = catalog.tags.list_all()
    return envelope(tags, "Tags loaded")


@router.post("")
async def create_tag(body: TagCreate, catalog: ArticleCatalog = Depends(get_catalog)):
    tag = catalog.tags.create(
        name=body.name,
        description=body.description,
        color=body.color,
        category=body.category,
    )
    if tag is None:
        raise HTTPException(status_code=409, detail=f"Tag already exists: {body.name}")

    logger.info(f"Tag created: {tag.name} ({tag.category})")
    return envelope(tag, "Tag created")


@router.put("/{tag_id}")
async def update_tag(tag_id: int, body: TagUpdate, catalog: ArticleCatalog = Depends(get_catalog)):
    existing = catalog.tags.get(tag_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Tag not found")

    changes = body.model_dump(exclude_unset=True)
    if changes.get("name") is not None:
        conflict = catalog.tags.get_by_name(changes["name"])
        if conflict is not None and conflict.id != tag_id:
            raise HTTPException(status_code=409, detail=f"Tag name already exists: {changes['name']}")

    try:
        tag = catalog.tags.update(tag_id, **changes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return envelope(tag, "Tag updated")


@router.delete("/{tag_id}")
async def delete_tag(tag_id: int, catalog: ArticleCatalog = Depends(get_catalog)):
    if not catalog.tags.delete(tag_id):
        raise HTTPException(status_code=404, detail="Tag not found")
    return envelope(None, "Tag deleted")
