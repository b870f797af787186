# modules/admin/__init__.py
"""Admin user management.

This module provides the guarded mutation layer behind the admin view:
- AdminOperationController: status toggle, password reset, export, import,
  role change and confirmed deletion, one in-flight call per (kind, target)
- Export/import documents for per-user data
- Search and dashboard counters over the managed collection
- Collaborator interfaces and in-process implementations
"""

from modules.admin.confirmation import ConfirmationState, PendingConfirmation
from modules.admin.controller import AdminOperationController, utc_now
from modules.admin.export import (
    DirectoryArtifactSink,
    ExportArtifact,
    UserExportDocument,
    build_export_document,
    export_filename,
    parse_export_document,
    render_artifact,
)
from modules.admin.filtering import UserSummary, filter_users, summarize_users
from modules.admin.memory import (
    InMemoryArtifactSink,
    InMemoryDomainDataSource,
    InMemoryUserRecordStore,
)
from modules.admin.ports import (
    ArtifactSink,
    DomainDataSource,
    NullDomainDataSource,
    UserDataBundle,
    UserRecordStore,
)
from modules.admin.tokens import OperationKind, OperationToken, OperationTokenSet

__all__ = [
    "AdminOperationController",
    "ArtifactSink",
    "ConfirmationState",
    "DirectoryArtifactSink",
    "DomainDataSource",
    "ExportArtifact",
    "InMemoryArtifactSink",
    "InMemoryDomainDataSource",
    "InMemoryUserRecordStore",
    "NullDomainDataSource",
    "OperationKind",
    "OperationToken",
    "OperationTokenSet",
    "PendingConfirmation",
    "UserDataBundle",
    "UserExportDocument",
    "UserRecordStore",
    "UserSummary",
    "build_export_document",
    "export_filename",
    "filter_users",
    "parse_export_document",
    "render_artifact",
    "summarize_users",
    "utc_now",
]
