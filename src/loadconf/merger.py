"""Field-level merging of parsed configuration over a default model."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel
from pydantic.fields import FieldInfo

__all__ = ["merge_over_default", "merged_input"]


def merge_over_default[T: BaseModel](default: T, data: Mapping[str, Any]) -> T:
    """Build a new ``T`` from ``data``, taking every absent field from ``default``.

    Raises:
        pydantic.ValidationError: if the merged data does not fit ``T``.
    """
    return type(default).model_validate(merged_input(default, data))


def merged_input(default: BaseModel, data: Mapping[str, Any]) -> dict[str, Any]:
    """Build validation input for ``type(default)`` from ``data`` and the default's field values.

    Fields are read from the instance itself, so excluded fields keep the
    caller's value and computed fields never leak into the input. Only nested
    models are merged key by key; any other value present in ``data``, mappings
    included, replaces the default's value outright. Keys matching no field are
    passed through for the model's ``extra`` policy to judge.
    """
    model_cls = type(default)
    accepts_name = _accepts_field_name(model_cls)
    remaining = dict(data)
    result: dict[str, Any] = copy.deepcopy(default.model_extra or {})

    for name, field in model_cls.model_fields.items():
        key = _input_key(model_cls, name, field)
        value = getattr(default, name)

        if key in remaining:
            provided = remaining.pop(key)
        elif accepts_name and name in remaining:
            provided = remaining.pop(name)
        else:
            result[key] = copy.deepcopy(value)
            continue

        if isinstance(value, BaseModel) and isinstance(provided, Mapping):
            result[key] = merged_input(value, provided)
        else:
            result[key] = provided

    result.update(remaining)
    return result


def _input_key(model_cls: type[BaseModel], name: str, field: FieldInfo) -> str:
    if model_cls.model_config.get("validate_by_alias", True) is False:
        return name

    alias = field.validation_alias
    if isinstance(alias, AliasChoices):
        alias = next((choice for choice in alias.choices if isinstance(choice, str)), None)
    if isinstance(alias, str):
        return alias
    return field.alias or name


def _accepts_field_name(model_cls: type[BaseModel]) -> bool:
    config = model_cls.model_config
    return bool(config.get("populate_by_name") or config.get("validate_by_name"))
