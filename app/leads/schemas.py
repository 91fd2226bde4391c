## Canonical career profile and alias normalization
from typing import Any

from pydantic import BaseModel, Field

from app.errors import BadRequestError, MissingFieldsError

# canonical field -> accepted request keys, first non-empty value wins
PROFILE_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name",),
    "email": ("email",),
    "current_role": ("currentRole", "job_role", "current_role"),
    "experience_level": ("experienceLevel", "experience_level"),
    "career_goals": ("careerGoals", "career_goals"),
    "preferred_tech_stack": ("preferredTechStack", "preferred_tech_stack", "tech_stack"),
}

# canonical field -> key reported back to clients
CLIENT_FIELD_NAMES = {canonical: aliases[0] for canonical, aliases in PROFILE_ALIASES.items()}


class CareerProfile(BaseModel):
    name: str | None = None
    email: str | None = None
    current_role: str | None = None
    experience_level: str | None = None
    career_goals: str | None = None
    preferred_tech_stack: list[str] = Field(default_factory=list)


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _tech_stack(value: Any) -> list[str] | None:
    if value is None or value == "" or value == []:
        return None
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, list):
        items = value
    else:
        raise BadRequestError("preferredTechStack must be a list of strings")

    stack = [item.strip() for item in items if isinstance(item, str) and item.strip()]
    return stack or None


def normalize_profile(body: dict[str, Any]) -> CareerProfile:
    """Map every accepted alias onto the canonical CareerProfile fields."""
    values: dict[str, Any] = {}
    for canonical, aliases in PROFILE_ALIASES.items():
        coerce = _tech_stack if canonical == "preferred_tech_stack" else _text
        for alias in aliases:
            value = coerce(body.get(alias))
            if value is not None:
                values[canonical] = value
                break
    return CareerProfile(**values)


def require_fields(profile: CareerProfile, *fields: str, **extra: Any) -> None:
    """Raise MissingFieldsError naming every absent field by its client key."""
    missing = [CLIENT_FIELD_NAMES[f] for f in fields if not getattr(profile, f)]
    if missing:
        raise MissingFieldsError(missing, **extra)
