"""Configuration accessor with dot-path key support."""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Mapping
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError as PydanticValidationError

from dotfn import path as dotpath
from dotfn.environ import env as read_env
from dotfn.errors import ConfigError, ConfigNotFoundError
from dotfn.values import index

__all__ = ["Config"]

_logger = logging.getLogger(__name__)

_MISSING: Any = object()

ModelT = TypeVar("ModelT", bound=BaseModel)


class Config:
    """Nested configuration data addressed by dot paths.

    Reads go through compiled path getters, so repeated lookups of the same
    key reuse one function. Pass ``cache`` to keep those getters out of the
    process-wide cache.
    """

    def __init__(self, data: dict[str, Any] | None = None, cache: dotpath.GetterCache | None = None) -> None:
        self._data: dict[str, Any] = data if data is not None else {}
        self._cache = cache

    @classmethod
    def load(cls, yaml_path: str | os.PathLike[str], cache: dotpath.GetterCache | None = None) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML file.
            cache: Optional getter cache for the new Config.

        Returns:
            A Config holding the file's top-level mapping. An empty file
            gives an empty Config.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or its root is not a mapping.
        """
        yaml_path = os.fspath(yaml_path)
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config root must be a mapping, got {type(data).__name__}",
                details={"config_path": yaml_path},
            )

        _logger.debug("Loaded config from %s (%d top-level keys)", yaml_path, len(data))
        return cls(data, cache=cache)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key.

        Returns ``default`` when the key is missing or any parent along the
        path is not a mapping or list.
        """
        if not key:
            return self._data
        parent_path, _, last = key.rpartition(".")
        parent = dotpath.get(self._data, parent_path, self._cache)
        if not isinstance(parent, (Mapping, list, tuple)):
            return default
        value = index(parent, last)
        return default if value is None else value

    def require(self, key: str) -> Any:
        """Get a value that must be present.

        Raises:
            ConfigError: If nothing is stored at ``key``.
        """
        value = self.get(key)
        if value is None:
            raise ConfigError(f"Missing required config key: {key}", details={"key": key})
        return value

    def set(self, key: str, value: Any) -> Config:
        """Store ``value`` at ``key``, creating intermediate sections."""
        dotpath.set(self._data, key, value)
        return self

    def env(self, key: str, var: str, default: Any = _MISSING) -> Any:
        """Copy environment variable ``var`` into ``key`` and return it.

        Raises:
            EnvVarNotSetError: If ``var`` is unset and no default is given.
        """
        value = read_env(var) if default is _MISSING else read_env(var, default)
        self.set(key, value)
        return value

    def section(self, key: str, model: type[ModelT]) -> ModelT:
        """Validate the subtree at ``key`` into ``model``.

        A missing subtree validates as an empty mapping, so models with
        defaults for every field still succeed.

        Raises:
            ConfigError: If validation fails. ``details["errors"]`` lists
                each failing field as a dot path with its message.
        """
        raw = self.get(key, {})
        try:
            return model.model_validate(raw)
        except PydanticValidationError as e:
            errors = [
                {
                    "path": ".".join(str(part) for part in (key, *err.get("loc", ())) if part != ""),
                    "message": err.get("msg", ""),
                    "type": err.get("type", ""),
                }
                for err in e.errors()
            ]
            raise ConfigError(
                f"Invalid config section '{key}': {len(errors)} error(s)",
                details={"key": key, "errors": errors},
                cause=e,
            ) from e

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the underlying data."""
        return copy.deepcopy(self._data)
