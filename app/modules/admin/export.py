"""User data export and import documents.

An export is a UTF-8 JSON document whose top-level keys are exactly
`profile`, `words`, `testHistory`, `statistics`, `exportedAt` and
`exportedBy`. The same shape is accepted back by import.
"""

import asyncio
import json
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from infrastructure.identity import UserProfile
from infrastructure.logging import get_module_logger
from infrastructure.operations import ValidationError
from modules.admin.ports import ArtifactSink, Record, UserDataBundle

logger = get_module_logger()

EXPORT_MEDIA_TYPE = "application/json"


class UserExportDocument(BaseModel):
    """Exported user data.

    Only `profile` is required when importing; missing collections are
    treated as empty.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    profile: UserProfile
    words: List[Record] = Field(default_factory=list)
    test_history: List[Record] = Field(default_factory=list)
    statistics: List[Record] = Field(default_factory=list)
    exported_at: Optional[datetime] = None
    exported_by: Optional[str] = None

    def bundle(self) -> UserDataBundle:
        return UserDataBundle(
            words=list(self.words),
            test_history=list(self.test_history),
            statistics=list(self.statistics),
        )


@dataclass(frozen=True)
class ExportArtifact:
    """Serialized export ready for delivery."""

    filename: str
    content: bytes
    media_type: str = EXPORT_MEDIA_TYPE

    @property
    def size(self) -> int:
        return len(self.content)


def export_filename(email: str, exported_on: date) -> str:
    return f"user-data-{email}-{exported_on.isoformat()}.json"


def build_export_document(
    profile: UserProfile,
    data: UserDataBundle,
    actor_id: str,
    exported_at: datetime,
) -> UserExportDocument:
    return UserExportDocument(
        profile=profile,
        words=data.words,
        test_history=data.test_history,
        statistics=data.statistics,
        exported_at=exported_at,
        exported_by=actor_id,
    )


def render_artifact(document: UserExportDocument, exported_on: date) -> ExportArtifact:
    """Serialize an export document.

    Args:
        document: Document to serialize
        exported_on: Date used in the file name

    Returns:
        ExportArtifact named `user-data-<email>-<YYYY-MM-DD>.json`
    """
    payload = document.model_dump(mode="json", by_alias=True)
    content = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
    return ExportArtifact(
        filename=export_filename(document.profile.email, exported_on),
        content=content,
    )


def parse_export_document(
    payload: Union[str, bytes, Mapping[str, Any]],
) -> UserExportDocument:
    """Parse a previously exported document.

    Args:
        payload: Raw JSON (str or UTF-8 bytes) or an already decoded mapping

    Returns:
        The validated document

    Raises:
        ValidationError: If the payload is not JSON, is not an object, lacks
            `profile`, or does not have the export shape
    """
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(f"payload is not UTF-8: {exc}") from exc

    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"payload is not valid JSON: {exc.msg}") from exc

    if not isinstance(payload, Mapping):
        raise ValidationError("payload must be a JSON object")

    if "profile" not in payload:
        raise ValidationError("missing required key 'profile'", field="profile")

    try:
        return UserExportDocument.model_validate(dict(payload))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ValidationError(
            f"{location}: {first['msg']}",
            field=str(first["loc"][0]) if first["loc"] else None,
        ) from exc


class DirectoryArtifactSink(ArtifactSink):
    """Write export artifacts into a local directory.

    Args:
        directory: Target directory, created on first delivery
    """

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    async def deliver(self, artifact: ExportArtifact) -> None:
        path = self._directory / artifact.filename
        await asyncio.to_thread(self._write, path, artifact.content)
        logger.info("export_artifact_written", path=str(path), size=artifact.size)

    @staticmethod
    def _write(path: Path, content: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
