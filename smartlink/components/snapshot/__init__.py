"""
Snapshot component - Combined profile + stats backup document.
"""

from ._impl import (
    FILENAME_PREFIX,
    SCHEMA_VERSION,
    SnapshotFormatError,
    SnapshotService,
    export_filename,
    parse_snapshot,
    to_json,
)
from .component import run_export, run_import, run_reset_all
from .models import ExportOutput, ImportOutput, ImportSnapshotInput, ResetAllOutput

__all__ = [
    # Entry points
    "run_export",
    "run_import",
    "run_reset_all",
    # Models
    "ExportOutput",
    "ImportSnapshotInput",
    "ImportOutput",
    "ResetAllOutput",
    # Service
    "SnapshotService",
    "SnapshotFormatError",
    "SCHEMA_VERSION",
    "FILENAME_PREFIX",
    "export_filename",
    "parse_snapshot",
    "to_json",
]
