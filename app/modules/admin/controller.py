"""Admin operation controller.

Guarded mutation layer behind the admin view. Every operation re-checks
that the current session is an admin, holds the in-flight token for its
(kind, target) pair while it runs, is audited with the acting admin's id,
and reports its outcome as an OperationResult. Collaborator failures are
contained here; nothing is retried.
"""

import time
from datetime import datetime, timezone
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
    TYPE_CHECKING,
)

from infrastructure.audit import AuditEvent, AuditLog, create_audit_event
from infrastructure.identity import RoleInfo, UserProfile, UserRole
from infrastructure.logging import bind_operation_context, get_module_logger
from infrastructure.operations import (
    OperationResult,
    OperationStatus,
    ValidationError,
    classify_error,
)
from infrastructure.services import get_audit_log
from modules.admin.confirmation import PendingConfirmation
from modules.admin.export import (
    ExportArtifact,
    DirectoryArtifactSink,
    build_export_document,
    parse_export_document,
    render_artifact,
)
from modules.admin.filtering import UserSummary, filter_users, summarize_users
from modules.admin.ports import (
    ArtifactSink,
    DomainDataSource,
    NullDomainDataSource,
    UserDataBundle,
    UserRecordStore,
)
from modules.admin.tokens import OperationKind, OperationToken, OperationTokenSet

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


RoleProvider = Callable[[], RoleInfo]
Clock = Callable[[], datetime]
UsersListener = Callable[[Tuple[UserProfile, ...]], None]

logger = get_module_logger()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AdminOperationController:
    """Admin operations over the managed user collection.

    Usage:
        controller = AdminOperationController(
            store,
            runtime.current_role,
            get_settings(),
            domain_source=domain_source,
        )
        await controller.load_users()
        result = await controller.toggle_status(user, False, actor_id=admin.id)
        if not result.is_success:
            show_error(result.message)

    Args:
        store: User record store
        role_provider: Returns the current session's role; called on every
            operation, never cached
        settings: Settings instance
        domain_source: Words / test history / statistics source
            (default: NullDomainDataSource)
        artifact_sink: Export destination (default: directory from
            settings.admin.ADMIN_EXPORT_DIRECTORY)
        audit_log: Audit trail (default: the process-wide trail from
            get_audit_log(), so history survives remounts of the admin view)
        clock: Returns the current time; used for export timestamps
    """

    def __init__(
        self,
        store: UserRecordStore,
        role_provider: RoleProvider,
        settings: "Settings",
        domain_source: Optional[DomainDataSource] = None,
        artifact_sink: Optional[ArtifactSink] = None,
        audit_log: Optional[AuditLog] = None,
        clock: Clock = utc_now,
    ):
        admin_settings = settings.admin
        self._store = store
        self._role_provider = role_provider
        self._settings = admin_settings
        self._domain = domain_source or NullDomainDataSource()
        self._sink = artifact_sink or DirectoryArtifactSink(
            admin_settings.ADMIN_EXPORT_DIRECTORY
        )
        self._audit_log = audit_log if audit_log is not None else get_audit_log()
        self._clock = clock
        self._tokens = OperationTokenSet()
        self._users: Tuple[UserProfile, ...] = ()
        self._listeners: List[UsersListener] = []
        self._mounted = True
        self._logger = logger.bind(component="admin_controller")

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def users(self) -> Tuple[UserProfile, ...]:
        """Managed collection as last loaded from the store."""
        return self._users

    @property
    def mounted(self) -> bool:
        return self._mounted

    def filtered_users(self, term: Optional[str]) -> List[UserProfile]:
        return filter_users(self._users, term)

    def summary(self) -> UserSummary:
        return summarize_users(self._users)

    def is_pending(self, kind: OperationKind, target_id: str) -> bool:
        """True while (kind, target_id) is in flight; the UI disables it."""
        return self._tokens.is_held(kind, target_id)

    def live_operations(self) -> List[OperationToken]:
        return sorted(self._tokens.live, key=lambda t: (t.target_id, t.kind.value))

    def recent_operations(
        self, limit: Optional[int] = None, target_id: Optional[str] = None
    ) -> List[AuditEvent]:
        """Audited operations, newest first.

        Args:
            limit: Maximum events (default: ADMIN_RECENT_OPERATIONS_LIMIT)
            target_id: Only events for this user
        """
        if limit is None:
            limit = self._settings.ADMIN_RECENT_OPERATIONS_LIMIT
        return self._audit_log.recent(limit=limit, resource_id=target_id)

    def subscribe(self, listener: UsersListener) -> Callable[[], None]:
        """Observe managed collection updates.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def unmount(self) -> None:
        """Detach from the view; later completions no longer update state."""
        self._mounted = False
        self._listeners.clear()
        self._logger.debug("admin_controller_detached", live=len(self._tokens))

    async def load_users(self) -> OperationResult:
        """Load the managed collection from the store.

        Loads may race; the last one to complete wins.
        """
        if not self._role_provider().is_admin:
            return self._unauthorized("load_users")

        try:
            users = await self._store.list_all()
        except Exception as exc:
            result = classify_error(exc)
            self._logger.error(
                "user_collection_load_failed",
                error=str(exc),
                status=result.status.value,
            )
            return result

        self._replace_users(users)
        return OperationResult.success(
            data=self._users, message=f"Loaded {len(users)} users"
        )

    async def reload(self) -> None:
        """Reload after a successful mutation; failures are only logged."""
        result = await self.load_users()
        if not result.is_success:
            self._logger.warning("user_collection_reload_failed", error=result.message)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def toggle_status(
        self, target: UserProfile, desired_active: bool, actor_id: str
    ) -> OperationResult:
        """Activate or deactivate a user, then reload the collection."""

        async def action() -> None:
            await self._store.set_active(target.id, desired_active, actor_id)

        return await self._execute(
            OperationKind.TOGGLE_STATUS,
            target.id,
            actor_id,
            action,
            metadata={"desired_active": desired_active},
            reload=True,
        )

    async def reset_password(
        self, target: UserProfile, actor_id: str
    ) -> OperationResult:
        """Send a password reset message. The profile is not changed."""

        async def action() -> None:
            await self._store.send_password_reset(target.email, actor_id)

        return await self._execute(
            OperationKind.RESET_PASSWORD,
            target.id,
            actor_id,
            action,
            metadata={"email": target.email},
        )

    async def export_data(self, target: UserProfile, actor_id: str) -> OperationResult:
        """Export a user's profile and domain data to the artifact sink.

        Returns:
            OperationResult whose data is the delivered ExportArtifact
        """
        metadata: Dict[str, Any] = {}

        async def action() -> ExportArtifact:
            data = await self._fetch_domain_data(target.id)
            exported_at = self._clock()
            document = build_export_document(target, data, actor_id, exported_at)
            artifact = render_artifact(
                document, exported_at.astimezone(timezone.utc).date()
            )
            await self._sink.deliver(artifact)
            metadata.update(
                filename=artifact.filename,
                size=artifact.size,
                words=len(data.words),
            )
            return artifact

        return await self._execute(
            OperationKind.EXPORT_DATA, target.id, actor_id, action, metadata=metadata
        )

    async def import_data(
        self, payload: Union[str, bytes, Mapping[str, Any]], actor_id: str
    ) -> OperationResult:
        """Replace a user's domain data from a previously exported document.

        The payload is validated before any token, store or domain call.
        """
        denied = self._precheck("import_data", actor_id)
        if denied is not None:
            return denied

        try:
            document = parse_export_document(payload)
        except ValidationError as exc:
            self._logger.warning(
                "import_payload_rejected",
                actor_id=actor_id,
                field=exc.field,
                error=str(exc),
            )
            return classify_error(exc)

        profile = document.profile
        data = document.bundle()

        async def action() -> str:
            await self._domain.replace_user_data(
                profile.id,
                data.words,
                data.test_history,
                data.statistics,
                actor_id,
            )
            return profile.id

        return await self._execute(
            OperationKind.IMPORT_DATA,
            profile.id,
            actor_id,
            action,
            metadata={
                "words": len(data.words),
                "test_history": len(data.test_history),
                "statistics": len(data.statistics),
            },
        )

    async def change_role(
        self, target: UserProfile, role: UserRole, actor_id: str
    ) -> OperationResult:
        """Change a user's role, then reload the collection."""

        async def action() -> None:
            await self._store.set_role(target.id, role, actor_id)

        return await self._execute(
            OperationKind.CHANGE_ROLE,
            target.id,
            actor_id,
            action,
            metadata={"previous_role": target.role.value, "role": role.value},
            reload=True,
        )

    def request_confirmation(
        self, kind: OperationKind, target: UserProfile
    ) -> PendingConfirmation:
        """Start the confirmation step of an irreversible operation."""
        label = target.display_name or target.email
        prompt = (
            f"Delete user {label} ({target.email})? This cannot be undone."
            if kind is OperationKind.DELETE_USER
            else f"Confirm {kind.value} for {label}."
        )
        return PendingConfirmation(kind, target.id, prompt)

    async def delete_user(
        self,
        target: UserProfile,
        actor_id: str,
        confirmation: Optional[PendingConfirmation] = None,
    ) -> OperationResult:
        """Delete a user once the admin has confirmed.

        Waits for the confirmation decision without holding the in-flight
        token; on success the collection is reloaded.
        """
        kind = OperationKind.DELETE_USER
        denied = self._precheck(kind.value, actor_id)
        if denied is not None:
            return denied

        if target.id == actor_id and not self._settings.ADMIN_ALLOW_SELF_DELETE:
            self._logger.warning("self_delete_rejected", actor_id=actor_id)
            return OperationResult.permanent_error(
                "Admins cannot delete their own account.", error_code="SELF_DELETE"
            )

        if confirmation is None or not confirmation.matches(kind, target.id):
            return OperationResult.cancelled(
                "Deleting a user requires confirmation.",
                error_code="CONFIRMATION_REQUIRED",
            )

        if not await confirmation.wait():
            self._logger.info(
                "delete_user_cancelled", actor_id=actor_id, target_id=target.id
            )
            return OperationResult.cancelled(
                "Deletion cancelled.", error_code="CONFIRMATION_DECLINED"
            )

        async def action() -> None:
            await self._store.delete_by_id(target.id, actor_id)

        return await self._execute(
            kind,
            target.id,
            actor_id,
            action,
            metadata={"email": target.email},
            reload=True,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _execute(
        self,
        kind: OperationKind,
        target_id: str,
        actor_id: str,
        action: Callable[[], Awaitable[Any]],
        metadata: Optional[Dict[str, Any]] = None,
        reload: bool = False,
    ) -> OperationResult:
        """Run one guarded operation.

        Checks authorization, takes the (kind, target_id) token before the
        first await, audits the attempt and releases the token on every
        exit path.
        """
        denied = self._precheck(kind.value, actor_id)
        if denied is not None:
            return denied

        with bind_operation_context(
            actor_id=actor_id, operation=kind.value, target_id=target_id
        ) as correlation_id:
            started = time.monotonic()
            try:
                with self._tokens.hold(kind, target_id):
                    self._logger.info("admin_operation_started")
                    data = await action()
            except Exception as exc:
                result = classify_error(exc)
                if result.status is OperationStatus.CONFLICT:
                    self._logger.info("admin_operation_rejected", reason=str(exc))
                    return result
                self._logger.error(
                    "admin_operation_failed",
                    error=str(exc),
                    error_type=type(exc).__name__,
                    status=result.status.value,
                )
                self._audit(
                    kind, target_id, actor_id, correlation_id, started, result, metadata
                )
                return result

            result = OperationResult.success(
                data=data, message=f"{kind.value} completed for user {target_id}"
            )
            self._logger.info("admin_operation_completed")
            self._audit(
                kind, target_id, actor_id, correlation_id, started, result, metadata
            )

        if reload:
            await self.reload()
        return result

    def _precheck(self, operation: str, actor_id: str) -> Optional[OperationResult]:
        if not actor_id:
            return OperationResult.permanent_error(
                "Admin operations require an acting admin id.",
                error_code="MISSING_ACTOR",
            )
        if not self._role_provider().is_admin:
            return self._unauthorized(operation, actor_id)
        return None

    def _unauthorized(
        self, operation: str, actor_id: Optional[str] = None
    ) -> OperationResult:
        self._logger.warning(
            "admin_operation_unauthorized", operation=operation, actor_id=actor_id
        )
        return OperationResult.unauthorized()

    async def _fetch_domain_data(self, user_id: str) -> UserDataBundle:
        try:
            return await self._domain.fetch_user_data(user_id)
        except Exception as exc:
            self._logger.warning("domain_data_unavailable", error=str(exc))
            return UserDataBundle()

    def _audit(
        self,
        kind: OperationKind,
        target_id: str,
        actor_id: str,
        correlation_id: str,
        started: float,
        result: OperationResult,
        metadata: Optional[Dict[str, Any]],
    ) -> None:
        event = create_audit_event(
            correlation_id=correlation_id,
            action=kind.value,
            resource_type="user",
            resource_id=target_id,
            actor_id=actor_id,
            result="success" if result.is_success else "failure",
            error_type=None if result.is_success else result.status.value,
            error_message=None if result.is_success else result.message,
            duration_ms=int((time.monotonic() - started) * 1000),
            metadata=metadata,
        )
        self._audit_log.record(event)

    def _replace_users(self, users: List[UserProfile]) -> None:
        if not self._mounted:
            self._logger.debug("user_collection_update_dropped", reason="unmounted")
            return
        self._users = tuple(users)
        for listener in list(self._listeners):
            try:
                listener(self._users)
            except Exception as exc:
                self._logger.error("users_listener_failed", error=str(exc))
