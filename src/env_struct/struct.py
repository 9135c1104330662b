"""Record types whose string fields are bound to environment variables.

Subclass :class:`EnvStruct` with ``str`` fields. If every field has a default
the class loads with :meth:`EnvStruct.load_from_env`, falling back to the
defaults; if none has one it loads with :meth:`EnvStruct.try_load_from_env`,
which fails on the first unset variable::

    class AppEnv(EnvStruct):
        path_to_something: str = "/path_to_something"
        config_path: str = "/folder/config_path.toml"

    env = AppEnv.load_from_env()  # reads PATH_TO_SOMETHING, CONFIG_PATH

Mixing the two shapes in one class is rejected when the class is defined.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, create_model

from env_struct.binder import load_required, load_with_defaults
from env_struct.environment import EnvironmentLike
from env_struct.errors import SchemaError
from env_struct.models import FieldSpec, Schema

_T = TypeVar("_T", bound="EnvStruct")


class EnvStruct(BaseModel):
    """Base class for environment-backed configuration records."""

    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    __env_schema__: ClassVar[Schema | None] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__env_schema__ = _compile_schema(cls)

    @classmethod
    def env_schema(cls) -> Schema:
        """Return the schema compiled from the class fields."""
        if cls.__env_schema__ is None:
            raise SchemaError("EnvStruct must be subclassed before it can be loaded.")
        return cls.__env_schema__

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        """Map each field name to the environment variable it is read from."""
        return {spec.name: spec.key for spec in cls.env_schema().fields}

    @classmethod
    def default(cls: type[_T]) -> _T:
        """Build an instance from the compiled-in defaults only."""
        return cls(**cls.env_schema().defaults())

    @classmethod
    def load_from_env(cls: type[_T], environ: EnvironmentLike = None) -> _T:
        """Load every field, keeping the default where the variable is unset."""
        return cls(**load_with_defaults(cls.env_schema(), environ))

    @classmethod
    def try_load_from_env(cls: type[_T], environ: EnvironmentLike = None) -> _T:
        """Load every field, raising ``MissingVariableError`` for the first unset variable."""
        return cls(**load_required(cls.env_schema(), environ))


def _compile_schema(cls: type[EnvStruct]) -> Schema:
    specs: list[FieldSpec] = []
    for name, info in cls.model_fields.items():
        if info.annotation is not str:
            raise SchemaError(
                f"{cls.__name__}.{name} must be annotated as str, got {info.annotation!r}; "
                "typed values are not supported."
            )
        default = None
        if not info.is_required():
            default = info.get_default(call_default_factory=True)
            if not isinstance(default, str):
                raise SchemaError(f"{cls.__name__}.{name} default must be a str, got {default!r}")
        specs.append(FieldSpec(name=name, default=default, doc=info.description))
    return Schema(name=cls.__name__, fields=tuple(specs), doc=cls.__doc__)


def build_schema(
    name: str,
    fields: Mapping[str, str | None] | Iterable[str | FieldSpec],
    *,
    doc: str | None = None,
) -> Schema:
    """Build a schema from a name->default mapping or a sequence of names/specs."""
    if isinstance(fields, Mapping):
        specs = [FieldSpec(name=field, default=default) for field, default in fields.items()]
    else:
        specs = [item if isinstance(item, FieldSpec) else FieldSpec(name=item) for item in fields]
    return Schema(name=name, fields=tuple(specs), doc=doc)


def env_struct_from_schema(schema: Schema) -> type[EnvStruct]:
    """Create an ``EnvStruct`` subclass with one ``str`` field per schema field."""
    definitions: dict[str, Any] = {}
    for spec in schema.fields:
        if spec.has_default:
            definitions[spec.name] = (str, Field(default=spec.default, description=spec.doc))
        else:
            definitions[spec.name] = (str, Field(description=spec.doc))
    return create_model(schema.name, __base__=EnvStruct, __doc__=schema.doc, **definitions)


def make_env_struct(
    name: str,
    fields: Mapping[str, str | None] | Iterable[str | FieldSpec],
    *,
    doc: str | None = None,
) -> type[EnvStruct]:
    """Declare an env struct at runtime.

    ``fields`` is either a mapping of field name to default (defaulted mode)
    or a sequence of bare field names (required mode).
    """
    return env_struct_from_schema(build_schema(name, fields, doc=doc))
