"""Read-only views over environment variable tables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class Environment(Protocol):
    """Anything that can look up a variable by its exact name."""

    def get(self, key: str) -> str | None: ...


class ProcessEnvironment:
    """The host process environment, re-read on every lookup."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment:
    """A fixed variable table, typically used in tests."""

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._variables = dict(variables or {})

    def get(self, key: str) -> str | None:
        return self._variables.get(key)

    def __repr__(self) -> str:
        return f"MappingEnvironment({sorted(self._variables)!r})"


EnvironmentLike = Environment | Mapping[str, str] | None


def resolve_environment(environ: EnvironmentLike = None) -> Environment:
    """Normalize the ``environ`` argument accepted by the loaders."""
    if environ is None:
        return ProcessEnvironment()
    if isinstance(environ, Mapping):
        return MappingEnvironment(environ)
    if isinstance(environ, Environment):
        return environ
    raise TypeError(f"Unsupported environment source: {type(environ).__name__}")
