"""Collaborator interfaces used by the admin controller.

Every method may fail; the controller classifies failures into
OperationResults and never retries.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, TYPE_CHECKING

from infrastructure.identity import UserProfile, UserRole
from infrastructure.operations import OperationError

if TYPE_CHECKING:
    from modules.admin.export import ExportArtifact


Record = Dict[str, Any]


@dataclass(frozen=True)
class UserDataBundle:
    """Domain data owned by one user (vocabulary, test history, statistics)."""

    words: List[Record] = field(default_factory=list)
    test_history: List[Record] = field(default_factory=list)
    statistics: List[Record] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.words or self.test_history or self.statistics)


class UserRecordStore(ABC):
    """Authoritative store of user profiles."""

    @abstractmethod
    async def list_all(self) -> List[UserProfile]:
        """List every user profile, in display order."""
        pass

    @abstractmethod
    async def set_active(self, user_id: str, active: bool, actor_id: str) -> None:
        """Activate or deactivate a user.

        Args:
            user_id: Target user
            active: Desired status
            actor_id: Admin performing the change
        """
        pass

    @abstractmethod
    async def send_password_reset(self, email: str, actor_id: str) -> None:
        """Send a password reset message to the user's email."""
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: str, actor_id: str) -> None:
        """Delete a user record. Irreversible."""
        pass

    @abstractmethod
    async def set_role(self, user_id: str, role: UserRole, actor_id: str) -> None:
        """Change a user's role."""
        pass


class DomainDataSource(ABC):
    """Per-user vocabulary data kept outside the user record store."""

    @abstractmethod
    async def fetch_user_data(self, user_id: str) -> UserDataBundle:
        """Fetch all domain data of a user."""
        pass

    @abstractmethod
    async def replace_user_data(
        self,
        user_id: str,
        words: List[Record],
        test_history: List[Record],
        statistics: List[Record],
        actor_id: str,
    ) -> None:
        """Replace all domain data of a user in one call.

        Implementations apply the replacement all-or-nothing.
        """
        pass


class ArtifactSink(ABC):
    """Destination of export artifacts (download, directory, bucket...)."""

    @abstractmethod
    async def deliver(self, artifact: "ExportArtifact") -> None:
        pass


class NullDomainDataSource(DomainDataSource):
    """Domain source used when no domain data is reachable.

    Exports carry empty collections; imports are rejected.
    """

    async def fetch_user_data(self, user_id: str) -> UserDataBundle:
        return UserDataBundle()

    async def replace_user_data(
        self,
        user_id: str,
        words: List[Record],
        test_history: List[Record],
        statistics: List[Record],
        actor_id: str,
    ) -> None:
        raise OperationError(
            "No domain data source is configured.",
            operation="import_data",
            target_id=user_id,
        )
