"""
SnapshotService - Backup export and restore.

Bundles the profile and stats documents into one ExportDocument. This is
the disaster-recovery path for the local-only store, so the serialized form
must reparse to the same document.

Key behaviors:
- Export filename: smartlink-{username}-{YYYY-MM-DD}.json (UTC date)
- Serialized as 2-space indented JSON with camelCase keys
- Older exports (exportDate / version keys) still parse
- Import replaces both documents; a different major schema version is refused
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from pydantic import ValidationError as PydanticValidationError

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import (
    ExportDocument,
    default_profile,
    default_stats,
    dump_document,
)
from smartlink.domain.errors import INVALID_VALUE, ValidationError

from .ports import ProfileStorePort, StatsDocumentPort, TimePort

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0.0"
FILENAME_PREFIX = "smartlink"


class SnapshotFormatError(ValueError):
    """Raised when text is not a valid export document."""


def export_filename(
    username: str, exported_at: datetime, prefix: str = FILENAME_PREFIX
) -> str:
    safe_username = username.replace("/", "_").replace("\\", "_")
    day = exported_at.astimezone(UTC).date().isoformat()
    return f"{prefix}-{safe_username}-{day}.json"


def to_json(doc: ExportDocument) -> str:
    return json.dumps(dump_document(doc), indent=2)


def parse_snapshot(text: str | bytes) -> ExportDocument:
    """
    Parse serialized export text.

    Raises:
        SnapshotFormatError: If the text is not JSON or not an export document
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SnapshotFormatError(f"Invalid snapshot: not UTF-8 text ({e.reason})") from e
    try:
        return ExportDocument.model_validate_json(text)
    except PydanticValidationError as e:
        raise SnapshotFormatError(f"Invalid snapshot: {e.error_count()} error(s)") from e


def major_version(version: str) -> str:
    return version.split(".", 1)[0]


class SnapshotService:
    """Export/import of the combined profile + stats document."""

    def __init__(
        self,
        profiles: ProfileStorePort,
        stats: StatsDocumentPort,
        clock: TimePort,
        schema_version: str = SCHEMA_VERSION,
        filename_prefix: str = FILENAME_PREFIX,
    ) -> None:
        self._profiles = profiles
        self._stats = stats
        self._clock = clock
        self.schema_version = schema_version
        self.filename_prefix = filename_prefix

    def export_snapshot(self) -> ExportDocument:
        return ExportDocument(
            profile=self._profiles.get(),
            stats=self._stats.snapshot(),
            exported_at=self._clock.now_utc(),
            schema_version=self.schema_version,
        )

    def filename_for(self, doc: ExportDocument) -> str:
        return export_filename(doc.profile.username, doc.exported_at, self.filename_prefix)

    def import_snapshot(
        self, doc: ExportDocument
    ) -> tuple[list[ValidationError], PersistResult | None, PersistResult | None]:
        """
        Replace the profile and stats with the snapshot's contents.

        Returns:
            Tuple of (errors, profile persist, stats persist).
        """
        if major_version(doc.schema_version) != major_version(self.schema_version):
            return [
                ValidationError(
                    code=INVALID_VALUE,
                    message=(
                        f"Unsupported snapshot version {doc.schema_version} "
                        f"(expected {major_version(self.schema_version)}.x)"
                    ),
                    field="schemaVersion",
                )
            ], None, None

        profile_result = self._profiles.save(doc.profile)
        stats_result = self._stats.replace(doc.stats)
        logger.info(
            "Imported snapshot for @%s exported at %s",
            doc.profile.username,
            doc.exported_at.isoformat(),
        )
        return [], profile_result, stats_result

    def reset_all(self) -> tuple[PersistResult, PersistResult]:
        """Full data reset: default profile and empty stats."""
        profile_result = self._profiles.save(default_profile())
        stats_result = self._stats.replace(default_stats())
        logger.info("All data reset to defaults")
        return profile_result, stats_result
