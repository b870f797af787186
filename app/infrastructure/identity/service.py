"""Identity service for dependency injection.

Provides a class-based interface over role resolution and the
profile-by-id lookup offered by the identity collaborator.
"""

from typing import Awaitable, Callable, Optional, TYPE_CHECKING

import structlog

from infrastructure.identity.models import IdentityState, RoleInfo, UserProfile

if TYPE_CHECKING:
    from infrastructure.identity.resolver import RoleResolver
    from infrastructure.configuration import Settings


ProfileLookup = Callable[[str], Awaitable[Optional[UserProfile]]]

logger = structlog.get_logger()


class IdentityService:
    """Class-based identity service.

    Wraps the RoleResolver and the collaborator's profile lookup so that
    the session runtime can complete snapshots whose profile has not
    arrived yet.

    Usage:
        from infrastructure.services import get_settings
        from infrastructure.identity import IdentityService

        service = IdentityService(get_settings(), profile_lookup=store.get_profile)
        state = await service.complete_profile(state)
        role_info = service.resolve_role(state)
    """

    def __init__(
        self,
        settings: "Settings",
        resolver: Optional["RoleResolver"] = None,
        profile_lookup: Optional[ProfileLookup] = None,
    ):
        """Initialize identity service.

        Args:
            settings: Settings instance (required, passed from provider).
            resolver: Optional pre-configured RoleResolver instance.
            profile_lookup: Optional async profile-by-id lookup. Without it
                snapshots are never completed and roles come only from
                profiles the provider already attached.
        """
        if resolver is None:
            # Import here to avoid circular dependency
            from infrastructure.identity.resolver import RoleResolver

            resolver = RoleResolver()

        self._settings = settings
        self._resolver = resolver
        self._profile_lookup = profile_lookup
        self._logger = logger.bind(component="identity_service")

    async def complete_profile(self, state: IdentityState) -> IdentityState:
        """Attach the stored profile to an authenticated snapshot lacking one.

        Args:
            state: Snapshot delivered by the identity collaborator

        Returns:
            A new snapshot with `profile` set (same revision), or the input
            unchanged when nothing needs or can be completed.
        """
        if (
            not state.authenticated
            or state.raw_user is None
            or state.profile is not None
            or self._profile_lookup is None
        ):
            return state

        log = self._logger.bind(uid=state.raw_user.uid, revision=state.revision)
        try:
            profile = await self._profile_lookup(state.raw_user.uid)
        except Exception as exc:
            log.warning("profile_lookup_failed", error=str(exc))
            return state

        if profile is None:
            log.warning("profile_not_found")
            return state

        log.info("profile_completed", role=profile.role.value)
        return state.model_copy(update={"profile": profile})

    def resolve_role(self, state: IdentityState) -> RoleInfo:
        """Resolve the role of a snapshot.

        Args:
            state: Identity snapshot

        Returns:
            RoleInfo for the snapshot
        """
        return self._resolver.resolve(state)

    @property
    def resolver(self) -> "RoleResolver":
        """Access underlying RoleResolver instance.

        Returns:
            The underlying RoleResolver instance
        """
        return self._resolver
