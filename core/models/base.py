# =============================================================================
# core/models/base.py - Shared Wire Model Configuration
# =============================================================================
# The Functions API speaks camelCase JSON but is not consistent about casing
# (some endpoints echo PascalCase). ApiModel matches incoming keys to field
# aliases case-insensitively and ignores anything it doesn't know.
#
# A null or missing value falls back to the field default, so one sparse
# record never fails a whole list.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base class for every model read from or written to the Functions API.

    - Python attributes are snake_case, wire keys are camelCase
    - Either name is accepted when constructing a model
    - Key matching on input ignores case ("ProductName" == "productName")
    - null values are treated as absent
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lookup: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            lookup[name.lower()] = name
            if field.alias:
                lookup[field.alias.lower()] = field.alias

        normalized: dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                continue
            target = lookup.get(key.lower(), key) if isinstance(key, str) else key
            normalized.setdefault(target, value)
        return normalized
