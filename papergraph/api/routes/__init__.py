"""HTTP routers"""

from papergraph.api.routes.articles import router as articles_router
from papergraph.api.routes.categories import router as categories_router
from papergraph.api.routes.tags import router as tags_router

__all__ = ["articles_router", "tags_router", "categories_router"]
