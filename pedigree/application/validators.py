from __future__ import annotations

from enum import Enum
from typing import TypeVar

from pedigree.application.errors import ValidationError
from pedigree.domain.value_objects.gender import Gender

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], value: str | E, field_name: str) -> E:
    """Map free-form input onto a closed enumeration, case-insensitively.

    Raises ValidationError for anything outside the set, so the database CHECK
    constraint is never the first line of defence.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field_name}", details={field_name: value})
    normalized = value.strip().upper()
    try:
        return enum_cls(normalized)
    except ValueError as exc:
        allowed = [member.value for member in enum_cls]
        raise ValidationError(
            f"Invalid {field_name}. Must be one of: {', '.join(allowed)}",
            details={field_name: value, "allowed": allowed},
        ) from exc


def parse_gender(value: str | Gender) -> Gender:
    return parse_enum(Gender, value, "gender")


def ensure_fraction(value: float | None, field_name: str) -> float | None:
    """Probabilities, frequencies and scores must lie in [0, 1]."""
    if value is None:
        return None
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f"{field_name} must be between 0 and 1", details={field_name: value})
    return value


def ensure_non_negative(value: int | None, field_name: str) -> int | None:
    if value is not None and value < 0:
        raise ValidationError(f"{field_name} cannot be negative", details={field_name: value})
    return value


def ensure_page(limit: int, offset: int = 0) -> None:
    if limit <= 0 or limit > 100:
        raise ValidationError("limit must be between 1 and 100")
    if offset < 0:
        raise ValidationError("offset cannot be negative")


def require_text(value: str | None, field_name: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()
