"""Post Keys — composite `<identity>_<sequence>` encoding for the post map.

Invariants:
    - Key = identity + POST_KEY_SEPARATOR + sequence zero-padded to SEQUENCE_WIDTH
    - Identity never contains the separator, so one author's keys form one
      contiguous range: [identity + "_", identity + successor("_"))
    - Within that range, key order == sequence order == creation order
    - parse_post_key(build_post_key(i, n)) == (i, n)

Design Decisions:
    - Fixed-width decimal over variable-width: "a_10" would sort before "a_9"
    - Malformed keys raise InvariantViolationError, never InvalidIdentityError:
      a bad key read back from the map is corruption, not bad user input
"""

import re

from postboard.core.domain_types import (
    Identity, PostKey, POST_KEY_SEPARATOR, MAX_SEQUENCE, SEQUENCE_WIDTH,
)
from postboard.core.errors import (
    ErrorContext, InvalidIdentityError, InvariantViolationError,
)
from postboard.core.identity import validate_identity

_SEQUENCE_RE = re.compile(rf"[0-9]{{{SEQUENCE_WIDTH}}}")


def build_post_key(identity: str, sequence: int) -> PostKey:
    """Compose the post key for identity at the given counter value."""
    author = validate_identity(identity)
    if isinstance(sequence, bool) or not isinstance(sequence, int):
        raise InvariantViolationError(
            f"Post sequence must be an int, got {type(sequence).__name__}",
            ErrorContext(identity=author),
        )
    if not 0 <= sequence <= MAX_SEQUENCE:
        raise InvariantViolationError(
            f"Post sequence {sequence} outside 0..{MAX_SEQUENCE}",
            ErrorContext(identity=author),
        )
    return PostKey(f"{author}{POST_KEY_SEPARATOR}{sequence:0{SEQUENCE_WIDTH}d}")


def parse_post_key(key: str) -> tuple[Identity, int]:
    """Split a post key back into (identity, sequence)."""
    head, sep, tail = key.rpartition(POST_KEY_SEPARATOR)
    if not sep:
        raise InvariantViolationError(
            f"Malformed post key {key!r}: missing separator",
            ErrorContext(post_key=key),
        )
    if not _SEQUENCE_RE.fullmatch(tail):
        raise InvariantViolationError(
            f"Malformed post key {key!r}: bad sequence {tail!r}",
            ErrorContext(post_key=key),
        )
    try:
        author = validate_identity(head)
    except InvalidIdentityError as e:
        raise InvariantViolationError(
            f"Malformed post key {key!r}: {e.reason}",
            ErrorContext(post_key=key),
        ) from e
    return author, int(tail)


def author_key_range(identity: str) -> tuple[str, str]:
    """Return (start, end) bounds covering exactly identity's post keys."""
    author = validate_identity(identity)
    successor = chr(ord(POST_KEY_SEPARATOR) + 1)
    return f"{author}{POST_KEY_SEPARATOR}", f"{author}{successor}"
