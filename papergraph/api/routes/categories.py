"""Subject category listing"""

from fastapi import APIRouter

from papergraph.api.responses import envelope
from papergraph.services.categories import get_subject_categories

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("")
async def list_categories():
    """Static list of subject categories"""
    return envelope(get_subject_categories(), "Categories loaded")
