"""
Snapshot component - Export / import / reset.

Shell Layer - handles serialization and error conversion.
"""

from __future__ import annotations

from smartlink.domain.errors import INVALID_VALUE, ValidationError

from ._impl import SnapshotFormatError, SnapshotService, parse_snapshot, to_json
from .models import ExportOutput, ImportOutput, ImportSnapshotInput, ResetAllOutput


def run_export(service: SnapshotService) -> ExportOutput:
    """Build the export document, its filename and its JSON text."""
    doc = service.export_snapshot()
    return ExportOutput(document=doc, filename=service.filename_for(doc), content=to_json(doc))


def run_import(input_data: ImportSnapshotInput, service: SnapshotService) -> ImportOutput:
    """Restore profile and stats from serialized export text."""
    try:
        doc = parse_snapshot(input_data.content)
    except SnapshotFormatError as e:
        return ImportOutput(
            errors=(ValidationError(code=INVALID_VALUE, message=str(e), field="content"),),
            success=False,
        )

    errors, profile_persist, stats_persist = service.import_snapshot(doc)
    return ImportOutput(
        errors=tuple(errors),
        success=not errors,
        profile_persist=profile_persist,
        stats_persist=stats_persist,
    )


def run_reset_all(service: SnapshotService) -> ResetAllOutput:
    profile_persist, stats_persist = service.reset_all()
    return ResetAllOutput(profile_persist=profile_persist, stats_persist=stats_persist)
