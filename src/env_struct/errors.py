"""Exceptions raised while declaring and loading env structs."""

from __future__ import annotations


class EnvStructError(Exception):
    """Base class for env-struct errors."""


class SchemaError(EnvStructError, ValueError):
    """Raised when a field list cannot be compiled into a schema."""


class MissingVariableError(EnvStructError, LookupError):
    """Raised when a required environment variable is not set."""

    def __init__(self, key: str, field: str | None = None) -> None:
        self.key = key
        self.field = field
        super().__init__(f"Environment Variable `{key}` Not Present!")
