"""Identity snapshot and user profile models.

Defines the normalized representations exchanged with the identity
collaborator: the raw provider user, the stored user profile, and the
IdentityState snapshot summarizing provider readiness, authentication and
error signals. All models are frozen; a change is a new snapshot.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserRole(str, Enum):
    """Authorization role of a user.

    No privilege order is implied: only ADMIN unlocks the admin view.
    """

    GUEST = "guest"
    USER = "user"
    ADMIN = "admin"


class ErrorInfo(BaseModel):
    """Error reported by the identity provider."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Human-readable failure description")
    code: Optional[str] = Field(default=None, description="Provider error code")


class Identity(BaseModel):
    """Raw user as reported by the identity provider."""

    model_config = ConfigDict(frozen=True)

    uid: str = Field(..., description="Provider user identifier")
    email: Optional[str] = Field(default=None, description="Provider email")
    display_name: Optional[str] = Field(default=None, description="Provider name")
    email_verified: bool = Field(default=False)


class UserProfile(BaseModel):
    """Stored user profile.

    `id` and `email` never change after creation. `role` and `is_active`
    change only through admin operations (or the owner's own account
    actions), which produce a fresh profile from the store.

    Serialized with camelCase keys (`displayName`, `isActive`, ...) so
    exported documents match the web client's format.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., description="User identifier (provider uid)")
    email: str = Field(..., description="User email address")
    display_name: Optional[str] = Field(default=None)
    role: UserRole = Field(default=UserRole.USER)
    is_active: bool = Field(default=True)
    email_verified: bool = Field(default=False)
    created_at: Optional[datetime] = Field(default=None)
    last_login_at: Optional[datetime] = Field(default=None)


class IdentityState(BaseModel):
    """Snapshot of the identity provider signals.

    Produced exclusively by the identity collaborator and only observed by
    the session core. `has_error` is expected to come with `error`; the
    bootstrap gate only treats the snapshot as failed when both are set.
    `authenticated` may arrive before `raw_user`/`profile` do.

    `revision` increases with each emitted snapshot and lets consumers
    discard stale, out-of-order deliveries.
    """

    model_config = ConfigDict(frozen=True)

    ready: bool = False
    initializing: bool = True
    loading: bool = False
    authenticated: bool = False
    has_error: bool = False
    error: Optional[ErrorInfo] = None
    raw_user: Optional[Identity] = None
    profile: Optional[UserProfile] = None
    revision: int = Field(default=0, ge=0)

    @property
    def failed(self) -> bool:
        """True when the provider reported an error with details."""
        return self.has_error and self.error is not None


class RoleInfo(BaseModel):
    """Authorization role derived from an identity snapshot."""

    model_config = ConfigDict(frozen=True)

    role: UserRole
    is_admin: bool
