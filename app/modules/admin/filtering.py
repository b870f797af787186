"""Client-side search and counters over the managed user collection."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from infrastructure.identity import UserProfile, UserRole


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()


def filter_users(users: Sequence[UserProfile], term: Optional[str]) -> List[UserProfile]:
    """Case-insensitive substring search over email, display name and id.

    Args:
        users: Managed collection, in display order
        term: Search term, matched as typed; empty or None returns every user

    Returns:
        Matching users, in their original order
    """
    if not term:
        return list(users)

    needle = term.lower()
    return [
        user
        for user in users
        if _contains(user.email, needle)
        or _contains(user.display_name, needle)
        or _contains(user.id, needle)
    ]


@dataclass(frozen=True)
class UserSummary:
    """Dashboard counters for the admin view."""

    total: int
    active: int
    admins: int
    verified: int

    @property
    def inactive(self) -> int:
        return self.total - self.active


def summarize_users(users: Iterable[UserProfile]) -> UserSummary:
    total = active = admins = verified = 0
    for user in users:
        total += 1
        active += user.is_active
        admins += user.role is UserRole.ADMIN
        verified += user.email_verified
    return UserSummary(total=total, active=active, admins=admins, verified=verified)
