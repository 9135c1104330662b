"""Render schemas as Python modules declaring ``EnvStruct`` subclasses."""

from __future__ import annotations

import re
from pathlib import Path

from env_struct.models import FieldSpec, Schema

HEADER = '"""Generated by env-struct; edit the declaration and regenerate instead."""'


def module_filename(schema: Schema) -> str:
    """Return a snake_case ``.py`` filename for the schema's class name."""
    snake = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", schema.name).lower()
    return f"{snake}.py"


def _docstring(text: str, indent: str) -> list[str]:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    lines = escaped.strip().splitlines() or [""]
    if len(lines) == 1:
        return [f'{indent}"""{lines[0]}"""']
    rendered = [f'{indent}"""{lines[0]}']
    rendered.extend(f"{indent}{line}" if line.strip() else "" for line in lines[1:])
    rendered.append(f'{indent}"""')
    return rendered


def _field_line(spec: FieldSpec) -> str:
    if spec.doc is None:
        if spec.default is None:
            return f"    {spec.name}: str"
        return f"    {spec.name}: str = {spec.default!r}"
    args = []
    if spec.default is not None:
        args.append(f"default={spec.default!r}")
    args.append(f"description={spec.doc!r}")
    return f"    {spec.name}: str = Field({', '.join(args)})"


def render_module(schema: Schema) -> str:
    """Render ``schema`` as the source of a standalone Python module."""
    lines = [HEADER, "", "from __future__ import annotations", ""]
    if any(spec.doc is not None for spec in schema.fields):
        lines.extend(["from pydantic import Field", ""])
    lines.extend(["from env_struct import EnvStruct", "", "", f"class {schema.name}(EnvStruct):"])

    body: list[str] = []
    if schema.doc:
        body.extend(_docstring(schema.doc, "    "))
        if schema.fields:
            body.append("")
    body.extend(_field_line(spec) for spec in schema.fields)
    lines.extend(body or ["    pass"])
    return "\n".join(lines) + "\n"


def write_module(schema: Schema, path: Path) -> Path:
    """Write the rendered module to ``path``, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_module(schema), encoding="utf-8")
    return path
