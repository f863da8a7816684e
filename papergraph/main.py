"""FastAPI application entry point"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from papergraph.api.responses import (
    envelope,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from papergraph.api.routes import articles_router, categories_router, tags_router
from papergraph.config.settings import settings
from papergraph.services.catalog import ArticleCatalog

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(catalog: ArticleCatalog | None = None) -> FastAPI:
    """
    Build the API around a catalog

    When no catalog is given, one is created at startup and closed at
    shutdown. A catalog passed in stays owned by the caller.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_catalog = getattr(app.state, "catalog", None) is None
        if owns_catalog:
            app.state.catalog = ArticleCatalog()
            logger.info("Catalog initialized")
        try:
            yield
        finally:
            if owns_catalog:
                app.state.catalog.close()
                app.state.catalog = None

    app = FastAPI(
        title=settings.APP_NAME,
        description="Catalog, tagging and evaluation service for academic papers",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.catalog = catalog

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(articles_router)
    app.include_router(tags_router)
    app.include_router(categories_router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return envelope({
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
            "endpoints": {
                "health": "/api/health",
                "articles": "/api/articles",
                "author_articles": "/api/articles/authors/{author_name}",
                "tag_articles": "/api/articles/tags/{tag_name}",
                "tags": "/api/tags",
                "categories": "/api/categories",
            }
        }, "Service running")

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return envelope({
            "status": "healthy",
            "service": "papergraph",
            "version": settings.APP_VERSION
        }, "Service healthy")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "papergraph.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
