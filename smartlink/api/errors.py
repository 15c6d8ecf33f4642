"""Validation error -> HTTP error mapping."""

from fastapi import HTTPException

from smartlink.domain.errors import INDEX_OUT_OF_RANGE, ValidationError


def raise_for_errors(errors: tuple[ValidationError, ...]) -> None:
    """Raise 404 for a missing position, 400 for any other rejection."""
    if not errors:
        return
    status_code = 404 if errors[0].code == INDEX_OUT_OF_RANGE else 400
    raise HTTPException(status_code=status_code, detail=[err.as_dict() for err in errors])
