"""Profile Store — one ordered map of profiles keyed by identity.

Invariants:
    - At most one Profile per identity; create_or_replace overwrites whole (no merge)
    - list_all() yields profiles in ascending identity order, fresh scan per call
"""

from typing import Iterator

from postboard.core.domain_types import Profile
from postboard.core.identity import validate_identity
from postboard.core.ordered_map import OrderedMap


class ProfileStore:
    """Profiles by identity."""

    def __init__(self) -> None:
        self._profiles: OrderedMap[Profile] = OrderedMap()

    def create_or_replace(
        self, identity: str, name: str, bio: str, href: str,
    ) -> Profile:
        profile = Profile(
            identity=validate_identity(identity), name=name, bio=bio, href=href,
        )
        self._profiles.set(profile.identity, profile)
        return profile

    def get(self, identity: str) -> tuple[Profile | None, bool]:
        return self._profiles.get(identity)

    def list_all(self) -> Iterator[Profile]:
        for _, profile in self._profiles.items():
            yield profile

    def __len__(self) -> int:
        return len(self._profiles)
