"""Schema models describing env-backed configuration types."""

from __future__ import annotations

import keyword
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from env_struct.errors import SchemaError
from env_struct.naming import derive_key


class BindingMode(str, Enum):
    """How absent environment variables are handled for a schema."""

    DEFAULTED = "defaulted"
    REQUIRED = "required"


def check_field_name(name: str) -> None:
    """Reject names that cannot be used as record attributes."""
    if not name.isidentifier() or keyword.iskeyword(name):
        raise SchemaError(f"Invalid field name: {name!r}")
    if name.startswith("_"):
        raise SchemaError(f"Field names cannot start with an underscore: {name!r}")


def _schema_error(exc: ValidationError) -> SchemaError | None:
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, SchemaError):
            return cause
    return None


class _SchemaModel(BaseModel):
    """Frozen model that surfaces validator ``SchemaError``s unwrapped."""

    model_config = ConfigDict(frozen=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            cause = _schema_error(exc)
            if cause is None:
                raise
            raise cause from exc

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> Any:
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as exc:
            cause = _schema_error(exc)
            if cause is None:
                raise
            raise cause from exc


class FieldSpec(_SchemaModel):
    """One declared configuration field."""

    name: str = Field(description="Attribute name; the lookup key is derived from it.")
    default: str | None = Field(default=None, description="Fallback used when the variable is unset.")
    doc: str | None = Field(default=None, description="Optional field documentation.")

    @model_validator(mode="after")
    def _check_name(self) -> "FieldSpec":
        check_field_name(self.name)
        return self

    @property
    def key(self) -> str:
        return derive_key(self.name)

    @property
    def has_default(self) -> bool:
        return self.default is not None


class Schema(_SchemaModel):
    """Ordered, single-mode list of fields for one configuration type."""

    name: str = Field(description="Name of the generated configuration type.")
    fields: tuple[FieldSpec, ...] = Field(default=())
    doc: str | None = Field(default=None)

    @model_validator(mode="after")
    def _check_fields(self) -> "Schema":
        if not self.name.isidentifier() or keyword.iskeyword(self.name):
            raise SchemaError(f"Invalid schema name: {self.name!r}")
        _check_unique(self.fields)
        _check_single_mode(self.name, self.fields)
        return self

    @property
    def mode(self) -> BindingMode:
        if all(spec.has_default for spec in self.fields):
            return BindingMode.DEFAULTED
        return BindingMode.REQUIRED

    def field_names(self) -> list[str]:
        return [spec.name for spec in self.fields]

    def keys(self) -> list[str]:
        """Return derived lookup keys in declaration order."""
        return [spec.key for spec in self.fields]

    def defaults(self) -> dict[str, str]:
        """Return the compiled-in default for every field."""
        if self.mode is not BindingMode.DEFAULTED:
            raise SchemaError(f"{self.name} declares required fields and has no defaults.")
        return {spec.name: spec.default for spec in self.fields if spec.default is not None}


def _check_unique(fields: tuple[FieldSpec, ...]) -> None:
    seen: set[str] = set()
    for spec in fields:
        if spec.name in seen:
            raise SchemaError(f"Duplicate field name: {spec.name!r}")
        seen.add(spec.name)


def _check_single_mode(schema_name: str, fields: tuple[FieldSpec, ...]) -> None:
    defaulted = [spec.name for spec in fields if spec.has_default]
    required = [spec.name for spec in fields if not spec.has_default]
    if defaulted and required:
        raise SchemaError(
            f"{schema_name} mixes defaulted fields {defaulted} with required fields {required}; "
            "declare a default for every field or for none."
        )
