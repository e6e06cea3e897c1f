"""Blog Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ProfileCreate.name: 1-100 chars, stripped, non-empty
    - PostCreate.message: 1-10000 chars, stripped, non-empty
    - Identity is NEVER part of a request body: it comes from the caller provider

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
    - from_profile / from_post classmethods: the only place records become JSON
"""

from pydantic import BaseModel, Field, field_validator

from postboard.core.domain_types import Post, PostKey, Profile


class ProfileCreate(BaseModel):
    """Profile creation — replaces any existing profile of the caller."""
    name: str = Field(min_length=1, max_length=100)
    bio: str = Field("", max_length=2000)
    href: str = Field("", max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class PostCreate(BaseModel):
    """New post by the caller."""
    message: str = Field(min_length=1, max_length=10_000)

    @field_validator("message")
    @classmethod
    def strip_message(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message cannot be empty or whitespace")
        return v


class ProfileResponse(BaseModel):
    identity: str
    name: str
    bio: str
    href: str

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            identity=profile.identity, name=profile.name,
            bio=profile.bio, href=profile.href,
        )


class PostResponse(BaseModel):
    author: str
    sequence: int
    created_at: str
    body: str
    key: str | None = None

    @classmethod
    def from_post(cls, post: Post, key: PostKey | None = None) -> "PostResponse":
        return cls(
            author=post.author, sequence=post.sequence,
            created_at=post.created_at, body=post.body, key=key,
        )


class StoreStats(BaseModel):
    profiles: int
    posts: int
    post_counter: int
