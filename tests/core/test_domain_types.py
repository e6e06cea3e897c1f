"""Domain Types — verifies records, aliases, and the error hierarchy.

Tests:
    - NewType wrappers exist and are callable
    - Profile and Post are frozen
    - Every error maps to its code, category and HTTP status
"""

import dataclasses

import pytest

from postboard.core.domain_types import (
    Identity, PostKey, Profile, Post, POST_KEY_SEPARATOR, NOT_FOUND_TEXT,
)
from postboard.core.errors import (
    ErrorCategory, ErrorSeverity, InvalidIdentityError, InvariantViolationError,
    MissingCallerIdentityError, PostboardError, ResourceNotFoundError,
)


def test_identity_types_wrap_str():
    assert Identity("alice") == "alice"
    assert PostKey("alice_1") == "alice_1"


def test_constants():
    assert POST_KEY_SEPARATOR == "_"
    assert NOT_FOUND_TEXT == "not found"


def test_profile_is_frozen():
    profile = Profile(Identity("a"), "A", "", "")
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.name = "B"


def test_post_is_frozen():
    post = Post(Identity("a"), "t", "body", 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        post.body = "edited"


@pytest.mark.parametrize("error, code, category, status", [
    (InvalidIdentityError("", "empty"), "INVALID_IDENTITY", ErrorCategory.VALIDATION, 400),
    (MissingCallerIdentityError("header X"), "MISSING_CALLER_IDENTITY", ErrorCategory.VALIDATION, 401),
    (ResourceNotFoundError("Profile", "a"), "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404),
    (InvariantViolationError("boom"), "INVARIANT_VIOLATION", ErrorCategory.INTERNAL, 500),
])
def test_error_mapping(error, code, category, status):
    assert isinstance(error, PostboardError)
    assert error.code == code
    assert error.category == category
    assert error.http_status == status


def test_invariant_violation_is_critical():
    assert InvariantViolationError("boom").severity == ErrorSeverity.CRITICAL


def test_to_response_envelope():
    body = ResourceNotFoundError("Profile", "alice").to_response()
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert body["error"]["message"] == "Profile 'alice' not found"
    assert body["error"]["category"] == "resource_not_found"
    assert "timestamp" in body["error"]
    assert set(body["error"]["context"]) == {"identity", "post_key"}
