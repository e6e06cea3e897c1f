"""Service test fixtures — fresh BlogService + FastAPI test client.

Invariants:
    - Every test gets its own BlogService (no state leaks between tests)
    - get_blog_service dependency overridden for the lifetime of the client

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises routes, dependencies and
      error handlers without a running server
"""

import pytest
from httpx import ASGITransport, AsyncClient

from postboard.api.dependencies import get_blog_service
from postboard.main import app
from postboard.services.blog_service import BlogService


@pytest.fixture
def blog_service():
    return BlogService(clock=lambda: "2026-01-01T00:00:00+00:00")


@pytest.fixture
async def client(blog_service):
    """FastAPI test client with BlogService dependency overridden."""
    app.dependency_overrides[get_blog_service] = lambda: blog_service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
