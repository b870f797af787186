"""Identity snapshots, profiles and role resolution.

This package provides the models exchanged with the identity collaborator
(IdentityState, Identity, UserProfile), role resolution (RoleResolver), the
IdentityService facade with profile completion, and an in-process
IdentityStateChannel.

Usage:
    from infrastructure.identity import RoleResolver, IdentityState

    role_info = RoleResolver().resolve(IdentityState(ready=True, initializing=False))
"""

from infrastructure.identity.models import (
    ErrorInfo,
    Identity,
    IdentityState,
    RoleInfo,
    UserProfile,
    UserRole,
)
from infrastructure.identity.resolver import RoleResolver
from infrastructure.identity.service import IdentityService, ProfileLookup
from infrastructure.identity.stream import IdentityStateChannel

__all__ = [
    "ErrorInfo",
    "Identity",
    "IdentityState",
    "IdentityService",
    "IdentityStateChannel",
    "ProfileLookup",
    "RoleInfo",
    "RoleResolver",
    "UserProfile",
    "UserRole",
]
