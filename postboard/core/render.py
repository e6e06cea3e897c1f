"""Render — markdown-like text for the home listing and a profile page.

Invariants:
    - render_home emits exactly one "* <name>" line per profile, in input order
    - render_profile(None, ...) == NOT_FOUND_TEXT, regardless of posts
    - Profile header is "# <name>\\n<bio>\\n<href>[<href>]\\n\\n"
    - Each post body is followed by one blank line, in input order

Design Decisions:
    - Pure functions over already-ordered iterables: ordering is the stores' job
"""

from typing import Iterable

from postboard.core.domain_types import NOT_FOUND_TEXT, Post, Profile


def render_home(profiles: Iterable[Profile]) -> str:
    """Directory listing, one bullet per profile."""
    return "".join(f"* {profile.name}\n" for profile in profiles)


def render_profile_header(profile: Profile) -> str:
    return f"# {profile.name}\n{profile.bio}\n{profile.href}[{profile.href}]\n\n"


def render_profile(profile: Profile | None, posts: Iterable[Post]) -> str:
    """Profile page, or NOT_FOUND_TEXT when there is no profile."""
    if profile is None:
        return NOT_FOUND_TEXT
    parts = [render_profile_header(profile)]
    parts.extend(f"{post.body}\n\n" for post in posts)
    return "".join(parts)
