"""Typed configuration records populated from environment variables."""

from env_struct.binder import load_required, load_with_defaults
from env_struct.environment import Environment, MappingEnvironment, ProcessEnvironment
from env_struct.errors import EnvStructError, MissingVariableError, SchemaError
from env_struct.models import BindingMode, FieldSpec, Schema
from env_struct.naming import derive_key
from env_struct.struct import EnvStruct, build_schema, env_struct_from_schema, make_env_struct

__all__ = [
    "BindingMode",
    "EnvStruct",
    "EnvStructError",
    "Environment",
    "FieldSpec",
    "MappingEnvironment",
    "MissingVariableError",
    "ProcessEnvironment",
    "Schema",
    "SchemaError",
    "build_schema",
    "derive_key",
    "env_struct_from_schema",
    "load_required",
    "load_with_defaults",
    "make_env_struct",
]
