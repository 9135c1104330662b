"""Load strategies that bind schema fields to environment variables."""

from __future__ import annotations

import logging

from env_struct.environment import EnvironmentLike, resolve_environment
from env_struct.errors import MissingVariableError, SchemaError
from env_struct.models import BindingMode, Schema

logger = logging.getLogger(__name__)


def load_with_defaults(schema: Schema, environ: EnvironmentLike = None) -> dict[str, str]:
    """Return field values, falling back to declared defaults for unset variables.

    Absence of a variable is never an error in this mode.
    """
    if schema.mode is not BindingMode.DEFAULTED:
        raise SchemaError(f"{schema.name} has required fields; use load_required instead.")

    env = resolve_environment(environ)
    values = schema.defaults()
    for spec in schema.fields:
        found = env.get(spec.key)
        if found is None:
            logger.debug("%s.%s: %s unset, using default", schema.name, spec.name, spec.key)
            continue
        logger.debug("%s.%s: read from %s", schema.name, spec.name, spec.key)
        values[spec.name] = found
    return values


def load_required(schema: Schema, environ: EnvironmentLike = None) -> dict[str, str]:
    """Return field values read from the environment, failing on the first unset variable."""
    if schema.fields and schema.mode is not BindingMode.REQUIRED:
        raise SchemaError(f"{schema.name} declares defaults; use load_with_defaults instead.")

    env = resolve_environment(environ)
    values: dict[str, str] = {}
    for spec in schema.fields:
        found = env.get(spec.key)
        if found is None:
            logger.debug("%s.%s: required variable %s is unset", schema.name, spec.name, spec.key)
            raise MissingVariableError(spec.key, field=spec.name)
        values[spec.name] = found
    logger.debug("%s: loaded %d required variables", schema.name, len(values))
    return values
