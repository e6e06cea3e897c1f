"""BlogService tests — the four public operations over shared stores and counter.

Invariants verified:
    - create_profile replaces whole; render_home lists each profile once, by identity
    - post preserves per-author order; counter +1 per post across all authors
    - A failed post does not consume a counter value
    - render_profile on a missing profile returns exactly "not found"
    - posts_by_caller=True lists the caller's posts; an invalid caller reads as anonymous
    - Concurrent posts from many threads never reuse a counter value
"""

import logging
import threading

import pytest

from postboard.core.domain_types import MAX_SEQUENCE
from postboard.core.errors import InvalidIdentityError, InvariantViolationError
from postboard.core.post_keys import parse_post_key
from postboard.services.blog_service import BlogService


@pytest.fixture
def blog():
    ticks = iter(range(1_000_000))
    return BlogService(clock=lambda: f"t{next(ticks)}")


# --- create_profile -----------------------------------------------------------

def test_create_profile_then_get(blog):
    blog.create_profile("A", "Test User", "Testing everything.", "https://testr.xyz")
    profile = blog.get_profile("A")
    assert (profile.name, profile.bio, profile.href) == (
        "Test User", "Testing everything.", "https://testr.xyz",
    )


def test_create_profile_replaces_all_fields(blog):
    blog.create_profile("A", "n1", "b1", "h1")
    blog.create_profile("A", "n2", "b2", "h2")
    profile = blog.get_profile("A")
    assert (profile.name, profile.bio, profile.href) == ("n2", "b2", "h2")
    assert len(blog.list_profiles()) == 1


def test_create_profile_invalid_identity(blog):
    with pytest.raises(InvalidIdentityError):
        blog.create_profile("", "n", "b", "h")


def test_get_missing_profile_is_none(blog):
    assert blog.get_profile("nobody") is None


# --- post ---------------------------------------------------------------------

def test_post_preserves_order(blog):
    messages = [f"message {i}" for i in range(15)]
    for m in messages:
        blog.post("A", m)
    assert [p.body for p in blog.list_posts("A")] == messages


def test_counter_increments_once_per_post_across_authors(blog):
    assert blog.post_count == 0
    keys = [
        blog.post("A", "a1"),
        blog.post("B", "b1"),
        blog.post("A", "a2"),
    ]
    assert blog.post_count == 3
    assert [parse_post_key(k)[1] for k in keys] == [0, 1, 2]


def test_post_does_not_require_profile(blog):
    blog.post("ghost", "boo")
    assert [p.body for p in blog.list_posts("ghost")] == ["boo"]


def test_post_records_clock_value(blog):
    key = blog.post("A", "x")
    assert blog.get_post(key).created_at == "t0"


def test_failed_post_does_not_advance_counter(blog):
    blog.post("A", "ok")
    with pytest.raises(InvalidIdentityError):
        blog.post("bad_identity", "nope")
    assert blog.post_count == 1
    blog.post("A", "next")
    assert [p.sequence for p in blog.list_posts("A")] == [0, 1]


def test_reused_counter_fails_loudly(blog, caplog):
    blog.post("A", "first")
    blog._counter = 0  # simulate corrupted counter
    with caplog.at_level(logging.CRITICAL):
        with pytest.raises(InvariantViolationError):
            blog.post("A", "second")
    assert [p.body for p in blog.list_posts("A")] == ["first"]
    assert blog.post_count == 0
    assert any(r.levelno == logging.CRITICAL for r in caplog.records)


def test_counter_refuses_to_wrap(blog):
    blog._counter = MAX_SEQUENCE
    blog.post("A", "last")
    with pytest.raises(InvariantViolationError):
        blog.post("A", "overflow")
    assert blog.post_count == MAX_SEQUENCE + 1


# --- render_home --------------------------------------------------------------

def test_render_home_sorted_by_identity(blog):
    blog.create_profile("charlie", "Charlie", "", "")
    blog.create_profile("alpha", "Alpha", "", "")
    blog.create_profile("bravo", "Bravo", "", "")
    assert blog.render_home() == "* Alpha\n* Bravo\n* Charlie\n"


def test_render_home_lists_replaced_profile_once(blog):
    blog.create_profile("a", "Old", "", "")
    blog.create_profile("a", "New", "", "")
    assert blog.render_home() == "* New\n"


def test_render_home_empty(blog):
    assert blog.render_home() == ""


# --- render_profile -----------------------------------------------------------

def test_render_profile_not_found(blog):
    assert blog.render_profile("nobody") == "not found"


def test_render_profile_not_found_even_with_posts(blog):
    blog.post("A", "orphan post")
    assert blog.render_profile("A") == "not found"


def test_end_to_end(blog):
    blog.create_profile("A", "Test User", "Testing everything.", "https://testr.xyz")
    blog.post("A", "Hello world!")
    page = blog.render_profile("A")
    for expected in ("Test User", "Testing everything.", "https://testr.xyz", "Hello world!"):
        assert expected in page
    assert "* Test User" in blog.render_home()


def test_render_profile_exact_text(blog):
    blog.create_profile("A", "Test User", "Testing everything.", "https://testr.xyz")
    blog.post("A", "one")
    blog.post("A", "two")
    assert blog.render_profile("A") == (
        "# Test User\nTesting everything.\nhttps://testr.xyz[https://testr.xyz]\n\n"
        "one\n\ntwo\n\n"
    )


def test_render_profile_shows_viewed_profiles_posts(blog):
    blog.create_profile("A", "Ann", "", "")
    blog.post("A", "by ann")
    blog.post("B", "by bob")
    page = blog.render_profile("A", caller_identity="B")
    assert "by ann" in page
    assert "by bob" not in page


def test_posts_by_caller_lists_callers_posts():
    blog = BlogService(posts_by_caller=True)
    blog.create_profile("A", "Ann", "", "")
    blog.post("A", "by ann")
    blog.post("B", "by bob")
    page = blog.render_profile("A", caller_identity="B")
    assert "by bob" in page
    assert "by ann" not in page
    assert blog.render_profile("A").endswith("\n\n")
    assert "by ann" not in blog.render_profile("A")


@pytest.mark.parametrize("caller", ["x_y", "", "   "])
def test_posts_by_caller_invalid_caller_renders_header_only(caller):
    blog = BlogService(posts_by_caller=True)
    blog.create_profile("A", "Ann", "bio", "h")
    blog.post("A", "by ann")
    assert blog.render_profile("A", caller_identity=caller) == "# Ann\nbio\nh[h]\n\n"
    assert blog.post_count == 1


def test_render_profile_ignores_invalid_caller_by_default(blog):
    blog.create_profile("A", "Ann", "", "")
    blog.post("A", "by ann")
    assert "by ann" in blog.render_profile("A", caller_identity="x_y")


# --- stats / concurrency ------------------------------------------------------

def test_stats(blog):
    blog.create_profile("A", "Ann", "", "")
    blog.post("A", "x")
    blog.post("B", "y")
    assert blog.stats() == {"profiles": 1, "posts": 2, "post_counter": 2}


def test_concurrent_posts_never_reuse_counter(blog):
    authors = [f"user{i}" for i in range(8)]
    per_author = 50
    errors = []

    def worker(author):
        try:
            for i in range(per_author):
                blog.post(author, f"{author} {i}")
        except Exception as e:  # surfaced below
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(a,)) for a in authors]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert blog.post_count == len(authors) * per_author
    sequences = []
    for author in authors:
        posts = blog.list_posts(author)
        assert [p.body for p in posts] == [f"{author} {i}" for i in range(per_author)]
        sequences.extend(p.sequence for p in posts)
    assert sorted(sequences) == list(range(len(authors) * per_author))
