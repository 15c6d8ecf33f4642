from dataclasses import dataclass

# --- Validation error codes ---
MISSING_FIELD = "missing_field"
LIMIT_REACHED = "limit_reached"
INDEX_OUT_OF_RANGE = "index_out_of_range"
INVALID_VALUE = "invalid_value"


@dataclass(frozen=True)
class ValidationError:
    """Structured rejection the UI can turn into a specific message."""

    code: str
    message: str
    field: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        return {"code": self.code, "message": self.message, "field": self.field}


def index_out_of_range(index: int, size: int, field: str = "index") -> ValidationError:
    return ValidationError(
        code=INDEX_OUT_OF_RANGE,
        message=f"No link at position {index} (have {size})",
        field=field,
    )
