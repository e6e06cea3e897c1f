"""Domain Types — identity aliases, stored records, and key-encoding constants.

Invariants:
    - Identity never contains POST_KEY_SEPARATOR (enforced by core.identity)
    - Sequence numbers fit an unsigned 64-bit counter: 0 <= n <= MAX_SEQUENCE
    - SEQUENCE_WIDTH digits cover MAX_SEQUENCE, so zero-padded order == numeric order
    - Profile and Post are frozen: a profile is replaced whole, a post never changes

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - One dataclass per stored value type: each OrderedMap is parameterized by exactly
      one of them, so reads never narrow an untyped value
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Identity = NewType("Identity", str)
PostKey = NewType("PostKey", str)


# ─── Key Encoding ────────────────────────────────────────────────

POST_KEY_SEPARATOR = "_"
MAX_SEQUENCE = 2**64 - 1
SEQUENCE_WIDTH = len(str(MAX_SEQUENCE))  # 20

NOT_FOUND_TEXT = "not found"


# ─── Stored Records ──────────────────────────────────────────────

@dataclass(frozen=True)
class Profile:
    """One profile per identity."""
    identity: Identity
    name: str
    bio: str
    href: str


@dataclass(frozen=True)
class Post:
    """Append-only post. created_at is opaque text, never parsed."""
    author: Identity
    created_at: str
    body: str
    sequence: int
