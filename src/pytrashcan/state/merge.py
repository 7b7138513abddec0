"""Typed partial-merge policy.

A partial payload only touches the fields it names.  Keys are resolved
against the target model (snake_case, camelCase or a legacy alias);
unknown keys are dropped.  The merged result is re-validated, so bounded
fields are clamped and values of the wrong type raise
:class:`pydantic.ValidationError` instead of being stored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pytrashcan.models._base import TrashcanBaseModel

_logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=TrashcanBaseModel)


def normalize_patch(model_cls: type[TrashcanBaseModel], patch: Any) -> dict[str, Any]:
    """Map payload keys to field names of *model_cls*.

    Raises :class:`TypeError` when *patch* is not a mapping.
    """
    if patch is None:
        return {}
    if not isinstance(patch, Mapping):
        raise TypeError(f"{model_cls.__name__} update must be a mapping, got {type(patch).__name__}")

    normalized: dict[str, Any] = {}
    for key, value in patch.items():
        field_name = model_cls.field_for_key(str(key))
        if field_name is None:
            _logger.debug("Ignoring unknown %s field %r", model_cls.__name__, key)
            continue
        normalized[field_name] = value
    return normalized


def merge_model(model: TModel, patch: Any) -> TModel:
    """Return a copy of *model* with the fields in *patch* replaced."""
    model_cls = type(model)
    updates = normalize_patch(model_cls, patch)
    if not updates:
        return model

    data = {name: getattr(model, name) for name in model_cls.model_fields}
    data.update(updates)
    return model_cls.model_validate(data)
