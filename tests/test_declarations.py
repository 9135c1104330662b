from __future__ import annotations

import pytest

from env_struct.declarations import parse_declaration, parse_schema
from env_struct.errors import SchemaError
from env_struct.models import BindingMode


def test_parse_declaration_required_and_defaulted() -> None:
    assert parse_declaration("hello_world").default is None
    assert parse_declaration(" hello_world = hello").default == " hello"
    assert parse_declaration("empty=").default == ""
    assert parse_declaration("url=http://x?a=b").default == "http://x?a=b"


def test_parse_declaration_rejects_missing_name() -> None:
    with pytest.raises(SchemaError, match="Missing field name"):
        parse_declaration("=value")


def test_parse_schema_builds_single_mode_schema() -> None:
    schema = parse_schema("Env", ["hello_world=hello", "welp_my_world=welp"], doc="Env items.")

    assert schema.mode is BindingMode.DEFAULTED
    assert schema.keys() == ["HELLO_WORLD", "WELP_MY_WORLD"]
    assert schema.doc == "Env items."


def test_parse_schema_rejects_mixed_modes() -> None:
    with pytest.raises(SchemaError):
        parse_schema("Env", ["hello_world=hello", "welp_my_world"])
