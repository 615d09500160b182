# src/confi/models.py
"""
Module: models (shared base for confi value types)
Purpose: One place for the pydantic configuration, schema versioning and
         migration hooks used by every probability value type.

Design notes
------------
- Pydantic BaseModel (v2) for runtime validation, serialization, schemas.
- Frozen/immutable instances: a value is validated once, at construction,
  and never changes afterwards. There is no mutation API.
- Schema versioning via ``schema_version`` and a migration entrypoint, so
  persisted JSON payloads can be upgraded without touching call sites.

Validation failures raised by the classmethod constructors
(``fractional``/``percentage``/``new``) propagate as the domain errors in
``confi.errors``. The same checks run again as field validators, where
pydantic wraps them into ``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["SCHEMA_VERSION", "JsonDict", "ModelBase"]

SCHEMA_VERSION: str = "1.0"

JsonDict = Dict[str, Any]
TModel = TypeVar("TModel", bound="ModelBase")


class ModelBase(BaseModel):
    """
    Shared BaseModel config for all confi value types.

    Features:
    - Frozen/immutable instances (assignment raises).
    - Extra fields ignored on decode (backwards-compatible).
    - schema_version attached to every instance.
    """

    schema_version: str = Field(default=SCHEMA_VERSION, frozen=True)

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        validate_assignment=False,  # immutability via new instance, not in-place
        populate_by_name=True,
        ser_json_inf_nan="constants",  # one-sided intervals carry infinite bounds
    )

    @classmethod
    def openapi_schema(cls) -> JsonDict:
        """Return the OpenAPI-compatible JSON schema for this model type."""
        return cls.model_json_schema()

    @classmethod
    def migrate(cls: Type[TModel], old_data: Mapping[str, Any]) -> TModel:
        """
        Best-effort migration entrypoint for schema upgrades.

        Reads an arbitrary mapping (e.g. a legacy JSON-decoded payload),
        drops its ``schema_version`` so the current one is stamped, and
        validates it into the current model. Override in subclasses when a
        breaking schema change needs key renames first.
        """
        data = dict(old_data)
        data.pop("schema_version", None)
        return cls.model_validate(data)
