"""Post Store — append-only ordered map of posts keyed by `<author>_<sequence>`.

Invariants:
    - append() never overwrites: an existing key is an InvariantViolationError
    - list_by_author(a) yields exactly a's posts, in creation order
    - Every key read back during a scan parses to the scanned author

Design Decisions:
    - The counter lives in BlogService, not here: the store only consumes the
      current value, so a failed append leaves the counter untouched
    - Scans re-check the author of each key instead of trusting the bounds alone
"""

from typing import Iterator

from postboard.core.domain_types import Identity, Post, PostKey
from postboard.core.errors import ErrorContext, InvariantViolationError
from postboard.core.ordered_map import OrderedMap
from postboard.core.post_keys import author_key_range, build_post_key, parse_post_key


class PostStore:
    """Posts grouped by author through their key prefix."""

    def __init__(self) -> None:
        self._posts: OrderedMap[Post] = OrderedMap()

    def append(
        self, author: str, body: str, counter: int, created_at: str = "",
    ) -> PostKey:
        """Store body under author at the current counter value."""
        key = build_post_key(author, counter)
        if self._posts.has(key):
            raise InvariantViolationError(
                f"Post key {key!r} already in use (counter reused)",
                ErrorContext(identity=author, post_key=key),
            )
        self._posts.set(key, Post(
            author=Identity(author), created_at=created_at,
            body=body, sequence=counter,
        ))
        return key

    def get(self, key: str) -> tuple[Post | None, bool]:
        return self._posts.get(key)

    def list_by_author(self, author: str) -> Iterator[Post]:
        start, end = author_key_range(author)
        for key, post in self._posts.items(start, end):
            owner, sequence = parse_post_key(key)
            if owner != author or post.sequence != sequence:
                raise InvariantViolationError(
                    f"Post key {key!r} leaked into range of {author!r}",
                    ErrorContext(identity=author, post_key=key),
                )
            yield post

    def __len__(self) -> int:
        return len(self._posts)
