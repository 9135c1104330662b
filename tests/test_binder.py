from __future__ import annotations

import pytest

from env_struct.binder import load_required, load_with_defaults
from env_struct.environment import MappingEnvironment, ProcessEnvironment, resolve_environment
from env_struct.errors import MissingVariableError, SchemaError
from env_struct.models import FieldSpec, Schema

DEFAULTED = Schema(
    name="Env",
    fields=(
        FieldSpec(name="hello_world", default="hello"),
        FieldSpec(name="welp_my_world", default="welp"),
    ),
)
REQUIRED = Schema(name="Env2", fields=(FieldSpec(name="hell_to_world"), FieldSpec(name="welp_world")))


def test_load_with_defaults_uses_defaults_for_empty_environment() -> None:
    assert load_with_defaults(DEFAULTED, {}) == DEFAULTED.defaults()


def test_load_with_defaults_overrides_only_present_variables() -> None:
    values = load_with_defaults(DEFAULTED, {"HELLO_WORLD": "Hello, Sam!", "hello_world": "ignored"})

    assert values == {"hello_world": "Hello, Sam!", "welp_my_world": "welp"}


def test_load_with_defaults_keeps_empty_string_values() -> None:
    values = load_with_defaults(DEFAULTED, {"WELP_MY_WORLD": ""})

    assert values["welp_my_world"] == ""


def test_load_with_defaults_rejects_required_schema() -> None:
    with pytest.raises(SchemaError):
        load_with_defaults(REQUIRED, {})


def test_load_required_reads_every_field() -> None:
    env = MappingEnvironment({"HELL_TO_WORLD": "Hell", "WELP_WORLD": "Welp"})

    assert load_required(REQUIRED, env) == {"hell_to_world": "Hell", "welp_world": "Welp"}


def test_load_required_reports_missing_key() -> None:
    with pytest.raises(MissingVariableError) as exc_info:
        load_required(REQUIRED, {"HELL_TO_WORLD": "Welp, Sam!"})

    assert exc_info.value.key == "WELP_WORLD"
    assert exc_info.value.field == "welp_world"
    assert str(exc_info.value) == "Environment Variable `WELP_WORLD` Not Present!"


def test_load_required_reports_first_missing_key_in_declaration_order() -> None:
    with pytest.raises(MissingVariableError) as exc_info:
        load_required(REQUIRED, {})

    assert exc_info.value.key == "HELL_TO_WORLD"


def test_load_required_rejects_defaulted_schema() -> None:
    with pytest.raises(SchemaError):
        load_required(DEFAULTED, {})


def test_loaders_reread_process_environment(monkeypatch) -> None:
    monkeypatch.delenv("HELLO_WORLD", raising=False)
    monkeypatch.delenv("WELP_MY_WORLD", raising=False)
    assert load_with_defaults(DEFAULTED)["hello_world"] == "hello"

    monkeypatch.setenv("HELLO_WORLD", "changed")
    assert load_with_defaults(DEFAULTED)["hello_world"] == "changed"


def test_field_order_does_not_change_values() -> None:
    reversed_schema = Schema(name="Env", fields=tuple(reversed(DEFAULTED.fields)))
    env = {"WELP_MY_WORLD": "Welp, Sam!"}

    assert load_with_defaults(reversed_schema, env) == load_with_defaults(DEFAULTED, env)


def test_resolve_environment_accepts_supported_sources() -> None:
    assert isinstance(resolve_environment(None), ProcessEnvironment)
    assert resolve_environment({"A": "1"}).get("A") == "1"
    custom = MappingEnvironment({"B": "2"})
    assert resolve_environment(custom) is custom
    with pytest.raises(TypeError):
        resolve_environment(42)  # type: ignore[arg-type]


def test_required_field_order_changes_only_reported_key() -> None:
    reversed_schema = Schema(name="Env2", fields=tuple(reversed(REQUIRED.fields)))
    env = {"HELL_TO_WORLD": "Hell", "WELP_WORLD": "Welp"}

    assert load_required(reversed_schema, env) == load_required(REQUIRED, env)

    with pytest.raises(MissingVariableError) as declared_order:
        load_required(REQUIRED, {})
    with pytest.raises(MissingVariableError) as reversed_order:
        load_required(reversed_schema, {})

    assert declared_order.value.key == "HELL_TO_WORLD"
    assert reversed_order.value.key == "WELP_WORLD"
