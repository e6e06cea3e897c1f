"""Identity validation — the one rule every stored key depends on.

Invariants:
    - Accepted identities are non-blank and never contain POST_KEY_SEPARATOR
    - Identities are not normalized: what the caller resolved is what is stored

Design Decisions:
    - Empty identities are rejected: an empty owner would produce post keys that
      start with the separator
"""

from postboard.core.domain_types import Identity, POST_KEY_SEPARATOR
from postboard.core.errors import InvalidIdentityError


def validate_identity(value: str) -> Identity:
    """Return value as an Identity or raise InvalidIdentityError."""
    if not value or not value.strip():
        raise InvalidIdentityError(value, "identity must not be empty")
    if POST_KEY_SEPARATOR in value:
        raise InvalidIdentityError(
            value, f"identity must not contain {POST_KEY_SEPARATOR!r}",
        )
    return Identity(value)
