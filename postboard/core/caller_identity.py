"""Caller Identity — contract between core and the environment that knows who is calling.

Invariants:
    - Core NEVER resolves identity itself; a provider is injected by the shell
    - Every provider returns a validated Identity or raises a PostboardError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from typing import Mapping, Protocol

from postboard.core.domain_types import Identity
from postboard.core.errors import MissingCallerIdentityError
from postboard.core.identity import validate_identity


class CallerIdentityProvider(Protocol):
    """Resolves the canonical identity of the current caller."""
    def current_identity(self) -> Identity: ...


class StaticCallerIdentity:
    """Always the same caller. Used by scripts and tests."""

    def __init__(self, identity: str):
        self._identity = validate_identity(identity)

    def current_identity(self) -> Identity:
        return self._identity


class HeaderCallerIdentity:
    """Caller identity carried in a request header (set by an upstream gateway)."""

    def __init__(self, headers: Mapping[str, str], header_name: str):
        self._headers = headers
        self._header_name = header_name

    def current_identity(self) -> Identity:
        value = self._headers.get(self._header_name)
        if value is None or not value.strip():
            raise MissingCallerIdentityError(f"header {self._header_name}")
        return validate_identity(value.strip())
