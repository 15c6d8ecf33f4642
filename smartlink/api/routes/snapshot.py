"""Export, import and reset routes."""

import json
import re
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends, Response

from smartlink.api.deps import get_snapshot_service
from smartlink.api.errors import raise_for_errors
from smartlink.api.schemas import SavedResponse
from smartlink.components.snapshot import (
    ImportSnapshotInput,
    SnapshotService,
    run_export,
    run_import,
    run_reset_all,
)

router = APIRouter()

_UNSAFE_FILENAME_CHARS = re.compile(r'[^\x20-\x7e]|["\\]')


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and the exact UTF-8 name (RFC 6266)."""
    fallback = _UNSAFE_FILENAME_CHARS.sub("_", filename)
    encoded = quote(filename, safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"


@router.get("/export")
def export_data(service: SnapshotService = Depends(get_snapshot_service)) -> Response:
    """Download profile and stats as a single JSON file."""
    result = run_export(service)
    return Response(
        content=result.content,
        media_type="application/json",
        headers={"Content-Disposition": content_disposition(result.filename)},
    )


@router.post("/import", response_model=SavedResponse)
def import_data(
    payload: dict[str, Any] = Body(...),
    service: SnapshotService = Depends(get_snapshot_service),
) -> SavedResponse:
    """Replace profile and stats with the contents of an export file."""
    result = run_import(ImportSnapshotInput(content=json.dumps(payload)), service)
    raise_for_errors(result.errors)
    return SavedResponse(saved=result.saved)


@router.post("/reset", response_model=SavedResponse)
def reset_data(service: SnapshotService = Depends(get_snapshot_service)) -> SavedResponse:
    """Reset profile and stats to their defaults."""
    return SavedResponse(saved=run_reset_all(service).saved)
