"""Parse textual field declarations such as ``name`` or ``name=default``."""

from __future__ import annotations

from collections.abc import Iterable

from env_struct.errors import SchemaError
from env_struct.models import FieldSpec, Schema


def parse_declaration(text: str) -> FieldSpec:
    """Parse one declaration.

    ``name`` declares a required field. ``name=default`` declares a defaulted
    field whose default is everything after the first ``=`` (possibly empty).
    """
    name, sep, default = text.partition("=")
    name = name.strip()
    if not name:
        raise SchemaError(f"Missing field name in declaration: {text!r}")
    return FieldSpec(name=name, default=default if sep else None)


def parse_schema(name: str, declarations: Iterable[str], doc: str | None = None) -> Schema:
    """Parse declarations into a validated single-mode schema."""
    return Schema(
        name=name,
        fields=tuple(parse_declaration(text) for text in declarations),
        doc=doc,
    )
