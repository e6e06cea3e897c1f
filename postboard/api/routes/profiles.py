"""Profiles — create/replace the caller's profile and read profiles as JSON.

Invariants:
    - POST replaces the caller's profile whole (no PATCH semantics)
    - GET list is in ascending identity order
    - Unknown profile → 404 ResourceNotFoundError envelope (JSON API only;
      the text render route returns "not found" instead)
"""

from fastapi import APIRouter, Depends, status

from postboard.api.dependencies import get_blog_service, get_caller_identity
from postboard.core.domain_types import Identity
from postboard.core.errors import ResourceNotFoundError
from postboard.schemas.blog import PostResponse, ProfileCreate, ProfileResponse
from postboard.services.blog_service import BlogService

router = APIRouter(prefix="/api/v1/profiles", tags=["profiles"])


@router.post(
    "", response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_profile(
    body: ProfileCreate,
    caller: Identity = Depends(get_caller_identity),
    blog: BlogService = Depends(get_blog_service),
):
    """Create or replace the caller's profile."""
    profile = blog.create_profile(caller, body.name, body.bio, body.href)
    return ProfileResponse.from_profile(profile)


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(blog: BlogService = Depends(get_blog_service)):
    return [ProfileResponse.from_profile(p) for p in blog.list_profiles()]


@router.get("/{identity}", response_model=ProfileResponse)
async def get_profile(identity: str, blog: BlogService = Depends(get_blog_service)):
    profile = blog.get_profile(identity)
    if profile is None:
        raise ResourceNotFoundError("Profile", identity)
    return ProfileResponse.from_profile(profile)


@router.get("/{identity}/posts", response_model=list[PostResponse])
async def list_profile_posts(
    identity: str, blog: BlogService = Depends(get_blog_service),
):
    """Posts by identity in creation order."""
    return [PostResponse.from_post(p) for p in blog.list_posts(identity)]
