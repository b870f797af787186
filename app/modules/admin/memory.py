"""In-process collaborator implementations for development and tests."""

from typing import Dict, Iterable, List, Optional

from infrastructure.identity import UserProfile, UserRole
from infrastructure.logging import get_module_logger
from modules.admin.export import ExportArtifact
from modules.admin.ports import (
    ArtifactSink,
    DomainDataSource,
    Record,
    UserDataBundle,
    UserRecordStore,
)

logger = get_module_logger()


class InMemoryUserRecordStore(UserRecordStore):
    """User record store backed by a dict, in insertion order.

    Unknown user ids or emails raise KeyError, which admin operations
    report as NOT_FOUND.
    """

    def __init__(self, profiles: Optional[Iterable[UserProfile]] = None):
        self._profiles: Dict[str, UserProfile] = {
            profile.id: profile for profile in profiles or ()
        }
        self.password_resets: List[str] = []

    def add(self, profile: UserProfile) -> None:
        self._profiles[profile.id] = profile

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        """Profile-by-id lookup for IdentityService."""
        return self._profiles.get(user_id)

    async def list_all(self) -> List[UserProfile]:
        return list(self._profiles.values())

    async def set_active(self, user_id: str, active: bool, actor_id: str) -> None:
        profile = self._require(user_id)
        self._profiles[user_id] = profile.model_copy(update={"is_active": active})
        logger.debug("user_status_stored", user_id=user_id, active=active)

    async def send_password_reset(self, email: str, actor_id: str) -> None:
        if not any(profile.email == email for profile in self._profiles.values()):
            raise KeyError(f"no user with email {email}")
        self.password_resets.append(email)

    async def delete_by_id(self, user_id: str, actor_id: str) -> None:
        self._require(user_id)
        del self._profiles[user_id]

    async def set_role(self, user_id: str, role: UserRole, actor_id: str) -> None:
        profile = self._require(user_id)
        self._profiles[user_id] = profile.model_copy(update={"role": role})

    def _require(self, user_id: str) -> UserProfile:
        try:
            return self._profiles[user_id]
        except KeyError:
            raise KeyError(f"no user with id {user_id}") from None


class InMemoryDomainDataSource(DomainDataSource):
    """Domain data source backed by a dict of bundles."""

    def __init__(self, data: Optional[Dict[str, UserDataBundle]] = None):
        self._data: Dict[str, UserDataBundle] = dict(data or {})

    async def fetch_user_data(self, user_id: str) -> UserDataBundle:
        return self._data.get(user_id, UserDataBundle())

    async def replace_user_data(
        self,
        user_id: str,
        words: List[Record],
        test_history: List[Record],
        statistics: List[Record],
        actor_id: str,
    ) -> None:
        self._data[user_id] = UserDataBundle(
            words=list(words),
            test_history=list(test_history),
            statistics=list(statistics),
        )


class InMemoryArtifactSink(ArtifactSink):
    """Collect delivered artifacts in a list."""

    def __init__(self):
        self.artifacts: List[ExportArtifact] = []

    async def deliver(self, artifact: ExportArtifact) -> None:
        self.artifacts.append(artifact)
