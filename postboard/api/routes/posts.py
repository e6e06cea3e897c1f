"""Posts — append a post as the current caller."""

from fastapi import APIRouter, Depends, status

from postboard.api.dependencies import get_blog_service, get_caller_identity
from postboard.core.domain_types import Identity
from postboard.core.errors import ErrorContext, InvariantViolationError
from postboard.schemas.blog import PostCreate, PostResponse
from postboard.services.blog_service import BlogService

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


@router.post(
    "", response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate,
    caller: Identity = Depends(get_caller_identity),
    blog: BlogService = Depends(get_blog_service),
):
    key = blog.post(caller, body.message)
    post = blog.get_post(key)
    if post is None:
        raise InvariantViolationError(
            f"Post {key!r} missing right after append",
            ErrorContext(identity=caller, post_key=key),
        )
    return PostResponse.from_post(post, key)
