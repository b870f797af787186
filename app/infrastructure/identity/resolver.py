"""Role resolution from identity snapshots.

Derives the authorization role of the current session from an
IdentityState. Pure: no I/O, never blocks, never fails.
"""

import structlog

from infrastructure.identity.models import IdentityState, RoleInfo, UserRole


logger = structlog.get_logger()


class RoleResolver:
    """Resolve the authorization role of an identity snapshot.

    Missing data degrades to the least-privileged role instead of failing:
    without a profile the role is GUEST, even when the snapshot is already
    authenticated (the profile may still be on its way).

    Example:
        from infrastructure.identity import RoleResolver

        resolver = RoleResolver()
        role_info = resolver.resolve(identity_state)
        if role_info.is_admin:
            ...
    """

    def __init__(self):
        self._logger = logger.bind(component="role_resolver")

    def resolve(self, identity: IdentityState) -> RoleInfo:
        """Resolve role and admin flag for a snapshot.

        Args:
            identity: Current identity snapshot

        Returns:
            RoleInfo with `is_admin` true iff the profile role is ADMIN
        """
        profile = identity.profile
        if profile is None:
            if identity.authenticated:
                self._logger.debug(
                    "role_degraded_to_guest",
                    reason="profile_missing",
                    revision=identity.revision,
                )
            return RoleInfo(role=UserRole.GUEST, is_admin=False)

        return RoleInfo(role=profile.role, is_admin=profile.role is UserRole.ADMIN)
