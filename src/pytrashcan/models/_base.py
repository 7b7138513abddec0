"""Base model and shared field types for state entities.

Every state entity inherits from :class:`TrashcanBaseModel` which
provides:

* ``alias_generator=to_camel`` so snapshots serialize with the
  camelCase keys presentation layers expect (``lidOpen``,
  ``trashLevel``) while Python code uses snake_case.
* ``populate_by_name`` so either spelling is accepted on input.
* Frozen instances: a transition always produces a new model.

Bounded numeric fields use the annotated types below.  They clamp
after pydantic has coerced the input, so numeric strings are bounded
too, and non-finite floats are rejected.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidatorFunctionWrapHandler, WrapValidator
from pydantic.alias_generators import to_camel

from pytrashcan._constants import clamp_percentage


def _require_finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError(f"value must be finite, got {value}")
    return value


def _clamp_percentage_input(value: Any, handler: ValidatorFunctionWrapHandler) -> int:
    # Fractional floats would fail lax int validation, so round them here.
    if isinstance(value, float):
        return clamp_percentage(_require_finite(value))
    return clamp_percentage(handler(value))


def _clamp_non_negative_int(value: Any, handler: ValidatorFunctionWrapHandler) -> int:
    return max(0, handler(value))


def _clamp_non_negative_float(value: Any, handler: ValidatorFunctionWrapHandler) -> float:
    return max(0.0, _require_finite(handler(value)))


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


Percentage = Annotated[int, WrapValidator(_clamp_percentage_input)]
"""Integer percentage clamped to 0-100."""

NonNegativeInt = Annotated[int, WrapValidator(_clamp_non_negative_int)]
"""Integer clamped to be >= 0."""

NonNegativeFloat = Annotated[float, WrapValidator(_clamp_non_negative_float)]
"""Finite float clamped to be >= 0."""

UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
"""Timezone-aware UTC datetime."""


class TrashcanBaseModel(BaseModel):
    """Base for all state entities."""

    _KEY_ALIASES: ClassVar[dict[str, str]] = {}
    """Legacy input keys mapped to field names (e.g. ``firmware``)."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @classmethod
    def field_for_key(cls, key: str) -> str | None:
        """Resolve a payload key (snake_case, camelCase or legacy alias) to a field name."""
        if key in cls.model_fields:
            return key
        legacy = cls._KEY_ALIASES.get(key)
        if legacy is not None:
            return legacy
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        return None

    def to_payload(self) -> dict[str, Any]:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
