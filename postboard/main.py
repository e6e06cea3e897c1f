"""Postboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PostboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - The BlogService is built lazily by get_blog_service(): nothing to open or
      close on startup, and tests override it per test
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard.api.dependencies import get_blog_service
from postboard.api.error_handlers import register_error_handlers
from postboard.api.routes import health, posts, profiles, render
from postboard.config import get_settings
from postboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Postboard API started (posts_by_caller={settings.posts_by_caller})",
    )
    yield
    logger.info(
        "Postboard API shutting down",
        extra={"sequence": get_blog_service().post_count},
    )


app = FastAPI(
    title="Postboard API", version="1.0.0", lifespan=lifespan,
)

# CORS: origins from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(profiles.router)
app.include_router(posts.router)
app.include_router(render.router)

register_error_handlers(app)


def main() -> None:
    """Serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "postboard.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # setup_logging owns the handlers
    )


if __name__ == "__main__":
    main()
