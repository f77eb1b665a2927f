"""
FastAPI application for the Book API.

Run with:
    uvicorn bookapi.api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..core.cache import TagAwareCache
from ..core.config import settings
from ..db.session import Base, engine
from .. import models  # noqa: F401  (registers the ORM models on Base)
from .errors import register_exception_handlers
from .routers import authors, books

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Creates missing tables on startup and empties the cache on shutdown."""
    logger.info(f"Starting {settings.API_TITLE} ({settings.ENVIRONMENT})")
    Base.metadata.create_all(bind=engine)
    yield
    app.state.cache.clear()
    logger.info(f"{settings.API_TITLE} stopped")


def create_app() -> FastAPI:
    app = FastAPI(title=settings.API_TITLE, version="0.1.0", lifespan=lifespan)
    app.state.cache = TagAwareCache(maxsize=settings.CACHE_MAX_ENTRIES, ttl=settings.CACHE_TTL_SECONDS)

    register_exception_handlers(app)
    app.include_router(books.router)
    app.include_router(authors.router)

    @app.get("/health", tags=["health"])
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
