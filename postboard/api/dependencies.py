"""API Dependencies — how routes reach the BlogService and the caller identity.

Invariants:
    - One BlogService per process (cached), replaceable via app.dependency_overrides
    - Write routes resolve the caller through a CallerIdentityProvider, never
      from the request body

Design Decisions:
    - lru_cache singleton mirrors get_settings(): no module-level mutable globals,
      and tests swap the service without monkeypatching
"""

import logging
from functools import lru_cache

from fastapi import Depends, Request

from postboard.config import Settings, get_settings
from postboard.core.caller_identity import HeaderCallerIdentity
from postboard.core.domain_types import Identity
from postboard.core.errors import InvalidIdentityError, MissingCallerIdentityError
from postboard.services.blog_service import BlogService

logger = logging.getLogger(__name__)


@lru_cache
def get_blog_service() -> BlogService:
    settings = get_settings()
    return BlogService(posts_by_caller=settings.posts_by_caller)


def get_caller_identity(
    request: Request, settings: Settings = Depends(get_settings),
) -> Identity:
    """Resolve the caller from the configured header. Raises if missing."""
    provider = HeaderCallerIdentity(request.headers, settings.caller_identity_header)
    return provider.current_identity()


def get_optional_caller_identity(
    request: Request,
    settings: Settings = Depends(get_settings),
    blog: BlogService = Depends(get_blog_service),
) -> Identity | None:
    """Caller for reads that key posts by the caller.

    None when the service ignores the caller, or when the header is absent,
    blank or not a valid identity. Reads never fail on the caller header.
    """
    if not blog.posts_by_caller:
        return None
    try:
        return get_caller_identity(request, settings)
    except (MissingCallerIdentityError, InvalidIdentityError) as e:
        logger.debug(f"Anonymous read: {e.message}", extra={"path": request.url.path})
        return None
