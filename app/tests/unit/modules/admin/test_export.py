"""Tests for export and import documents."""

import json
from datetime import date

import pytest

from infrastructure.operations import ValidationError
from modules.admin import (
    DirectoryArtifactSink,
    ExportArtifact,
    UserDataBundle,
    UserExportDocument,
    build_export_document,
    export_filename,
    parse_export_document,
    render_artifact,
)

EXPORT_KEYS = {"profile", "words", "testHistory", "statistics", "exportedAt", "exportedBy"}


@pytest.fixture
def document(user_profile, alice_data, fixed_now):
    return build_export_document(user_profile, alice_data, "admin-1", fixed_now)


@pytest.mark.unit
class TestExportFilename:
    """Tests for export_filename()."""

    def test_format(self):
        assert (
            export_filename("alice@example.com", date(2024, 3, 9))
            == "user-data-alice@example.com-2024-03-09.json"
        )


@pytest.mark.unit
class TestRenderArtifact:
    """Tests for render_artifact()."""

    def test_top_level_keys(self, document, fixed_now):
        artifact = render_artifact(document, fixed_now.date())

        payload = json.loads(artifact.content.decode("utf-8"))
        assert set(payload) == EXPORT_KEYS

    def test_content(self, document, fixed_now, user_profile):
        artifact = render_artifact(document, fixed_now.date())

        payload = json.loads(artifact.content)
        assert payload["exportedBy"] == "admin-1"
        assert payload["exportedAt"].startswith("2024-03-09T14:30:00")
        assert payload["profile"]["email"] == user_profile.email
        assert payload["profile"]["displayName"] == "Alice"
        assert payload["words"][0]["word"] == "serendipity"
        assert payload["testHistory"] == [{"score": 9, "total": 10}]

    def test_artifact_metadata(self, document, fixed_now):
        artifact = render_artifact(document, fixed_now.date())

        assert artifact.filename == "user-data-alice@example.com-2024-03-09.json"
        assert artifact.media_type == "application/json"
        assert artifact.size == len(artifact.content)

    def test_exported_document_parses_back(self, document, fixed_now):
        artifact = render_artifact(document, fixed_now.date())

        parsed = parse_export_document(artifact.content)

        assert parsed.model_dump() == document.model_dump()


@pytest.mark.unit
class TestParseExportDocument:
    """Tests for parse_export_document()."""

    def test_accepts_mapping(self, user_profile):
        parsed = parse_export_document(
            {"profile": user_profile.model_dump(mode="json", by_alias=True)}
        )

        assert isinstance(parsed, UserExportDocument)
        assert parsed.profile.model_dump() == user_profile.model_dump()
        assert parsed.bundle() == UserDataBundle()

    def test_accepts_str(self, user_profile):
        payload = json.dumps(
            {
                "profile": user_profile.model_dump(mode="json", by_alias=True),
                "words": [{"word": "ephemeral"}],
            }
        )

        parsed = parse_export_document(payload)

        assert parsed.words == [{"word": "ephemeral"}]

    def test_rejects_malformed_json(self):
        with pytest.raises(ValidationError, match="not valid JSON"):
            parse_export_document("{not json")

    def test_rejects_non_utf8_bytes(self):
        with pytest.raises(ValidationError):
            parse_export_document(b"\xff\xfe\x00")

    def test_rejects_non_object(self):
        with pytest.raises(ValidationError, match="JSON object"):
            parse_export_document("[1, 2, 3]")

    def test_rejects_missing_profile(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_export_document({"words": []})

        assert exc_info.value.field == "profile"

    def test_rejects_bad_shape(self, user_profile):
        payload = {
            "profile": user_profile.model_dump(mode="json", by_alias=True),
            "words": "not-a-list",
        }

        with pytest.raises(ValidationError) as exc_info:
            parse_export_document(payload)

        assert exc_info.value.field == "words"

    def test_rejects_profile_without_id(self):
        with pytest.raises(ValidationError):
            parse_export_document({"profile": {"email": "alice@example.com"}})


@pytest.mark.unit
class TestDirectoryArtifactSink:
    """Tests for DirectoryArtifactSink."""

    @pytest.mark.asyncio
    async def test_writes_file(self, tmp_path):
        sink = DirectoryArtifactSink(tmp_path / "exports")
        artifact = ExportArtifact(filename="user-data-a@b.c-2024-03-09.json", content=b"{}")

        await sink.deliver(artifact)

        written = tmp_path / "exports" / artifact.filename
        assert written.read_bytes() == b"{}"
