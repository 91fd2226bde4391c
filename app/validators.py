## Request body validation helpers
import uuid
from typing import Any

from app.errors import BadRequestError, MissingFieldsError


def is_blank(value: Any) -> bool:
    """Absent, null, false, zero or a blank string; empty lists and objects count as present."""
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return False
    return not value


def require_keys(body: dict[str, Any], *keys: str, message: str | None = None) -> None:
    missing = [k for k in keys if is_blank(body.get(k))]
    if missing:
        raise MissingFieldsError(missing, message)


def parse_uuid(value: Any, field: str) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError as e:
        raise BadRequestError(f"Invalid {field}") from e
