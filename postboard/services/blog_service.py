"""Blog Service — owns profiles, posts and the global post counter.

Invariants:
    - Every public method runs under one lock: operations never interleave
    - post(): append with the current counter value, then increment by exactly 1;
      if the append raises, the counter is left untouched
    - The counter never decreases, never repeats, never resets
    - Reads return materialized values (lists, strings), never live iterators
    - render_profile() returns the page or NOT_FOUND_TEXT, never raises on input:
      a missing or invalid caller renders the header with no posts

Design Decisions:
    - One BlogService per process instead of module-level maps: tests build their own
    - threading.Lock over per-store locks: post() must look atomic to readers of
      both the counter and the post map
    - Post iteration keyed by the viewed profile by default; posts_by_caller=True
      keys profile posts by the caller's identity instead
    - InvariantViolationError is logged CRITICAL and re-raised, never absorbed
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, NoReturn

from postboard.core.domain_types import Identity, Post, PostKey, Profile, MAX_SEQUENCE
from postboard.core.errors import (
    ErrorContext, InvalidIdentityError, InvariantViolationError,
)
from postboard.core.identity import validate_identity
from postboard.core.post_store import PostStore
from postboard.core.profile_store import ProfileStore
from postboard.core.render import render_home, render_profile

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Default post clock: ISO-8601 UTC."""
    return datetime.now(timezone.utc).isoformat()


class BlogService:
    """Profiles + posts + counter behind a single serialization boundary."""

    def __init__(
        self,
        clock: Callable[[], str] = utc_timestamp,
        posts_by_caller: bool = False,
    ):
        self._profiles = ProfileStore()
        self._posts = PostStore()
        self._counter = 0
        self._clock = clock
        self._posts_by_caller = posts_by_caller
        self._lock = threading.Lock()

    # --- Writes ----------------------------------------------------------------

    def create_profile(
        self, caller_identity: str, name: str, bio: str, href: str,
    ) -> Profile:
        """Create or fully replace the caller's profile."""
        with self._lock:
            profile = self._profiles.create_or_replace(caller_identity, name, bio, href)
        logger.info(
            "Profile saved", extra={"identity": profile.identity},
        )
        return profile

    def post(self, caller_identity: str, message: str) -> PostKey:
        """Append a post by the caller. Returns its key."""
        with self._lock:
            sequence = self._counter
            if sequence > MAX_SEQUENCE:
                self._fail(InvariantViolationError(
                    "Post counter exhausted",
                    ErrorContext(identity=caller_identity),
                ))
            try:
                key = self._posts.append(
                    caller_identity, message, sequence, self._clock(),
                )
            except InvariantViolationError as e:
                self._fail(e)
            self._counter = sequence + 1
        logger.info(
            "Post appended",
            extra={"identity": caller_identity, "post_key": key, "sequence": sequence},
        )
        return key

    # --- Reads -----------------------------------------------------------------

    def get_profile(self, identity: str) -> Profile | None:
        with self._lock:
            profile, _ = self._profiles.get(identity)
        return profile

    def list_profiles(self) -> list[Profile]:
        with self._lock:
            return list(self._profiles.list_all())

    def get_post(self, key: str) -> Post | None:
        with self._lock:
            post, _ = self._posts.get(key)
        return post

    def list_posts(self, identity: str) -> list[Post]:
        with self._lock:
            return self._scan_posts(identity)

    def render_home(self) -> str:
        with self._lock:
            text = render_home(self._profiles.list_all())
        logger.debug("Rendered home")
        return text

    def render_profile(
        self, identity: str, caller_identity: str | None = None,
    ) -> str:
        """Profile page for identity, or NOT_FOUND_TEXT."""
        with self._lock:
            profile, found = self._profiles.get(identity)
            if not found:
                logger.debug("Profile not found", extra={"identity": identity})
                return render_profile(None, [])
            owner = (
                self._readable_caller(caller_identity) if self._posts_by_caller
                else profile.identity
            )
            posts = self._scan_posts(owner) if owner else []
            return render_profile(profile, posts)

    @property
    def posts_by_caller(self) -> bool:
        """Whether render_profile lists the caller's posts instead of the owner's."""
        return self._posts_by_caller

    @property
    def post_count(self) -> int:
        """Current counter value == number of successful posts."""
        with self._lock:
            return self._counter

    def stats(self) -> dict:
        with self._lock:
            return {
                "profiles": len(self._profiles),
                "posts": len(self._posts),
                "post_counter": self._counter,
            }

    # --- Internals -------------------------------------------------------------

    def _scan_posts(self, identity: str) -> list[Post]:
        # Caller holds self._lock
        validate_identity(identity)
        try:
            return list(self._posts.list_by_author(identity))
        except InvariantViolationError as e:
            self._fail(e)

    @staticmethod
    def _readable_caller(caller_identity: str | None) -> Identity | None:
        # Unusable caller on a read == anonymous
        if caller_identity is None:
            return None
        try:
            return validate_identity(caller_identity)
        except InvalidIdentityError as e:
            logger.debug(
                f"Ignoring caller on render: {e.reason}",
                extra={"identity": caller_identity},
            )
            return None

    def _fail(self, error: InvariantViolationError) -> NoReturn:
        logger.critical(
            f"Invariant violation: {error.message}",
            extra={
                "error_code": error.code,
                "identity": error.context.identity,
                "post_key": error.context.post_key,
            },
        )
        raise error
