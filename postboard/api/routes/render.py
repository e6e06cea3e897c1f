"""Render — markdown-like text pages for the home listing and a profile.

Invariants:
    - Both routes return text/plain with status 200
    - A missing profile renders the literal "not found" (still 200): callers
      branch on the body, not on the status code
    - Caller header is only read when posts_by_caller is on; a missing, blank or
      invalid header renders as an anonymous read, never an error envelope
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from postboard.api.dependencies import get_blog_service, get_optional_caller_identity
from postboard.core.domain_types import Identity
from postboard.services.blog_service import BlogService

router = APIRouter(prefix="/api/v1/render", tags=["render"])


@router.get("", response_class=PlainTextResponse)
async def render_home(blog: BlogService = Depends(get_blog_service)):
    return PlainTextResponse(blog.render_home())


@router.get("/{identity}", response_class=PlainTextResponse)
async def render_profile(
    identity: str,
    caller: Identity | None = Depends(get_optional_caller_identity),
    blog: BlogService = Depends(get_blog_service),
):
    return PlainTextResponse(blog.render_profile(identity, caller))
