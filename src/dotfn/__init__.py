"""dotfn - Functional helpers and memoized dot-path accessors for plain data."""

from __future__ import annotations

# Path accessor
from dotfn.path import G, GetterCache, default_cache, get, getter, parse_path, set

# Combinators
from dotfn.functional import as_array, compose, ensure_fn, identity, is_array, is_none, not_

# Collections
from dotfn.grouping import for_each_key, group_by, index_by, map_keys

# Values
from dotfn.values import index, is_falsy, is_truthy

# Environment and config
from dotfn.environ import env
from dotfn.config import Config

# Errors
from dotfn.errors import (
    ConfigError,
    ConfigNotFoundError,
    DotfnError,
    EnvVarNotSetError,
    ErrorCodes,
)

__version__ = "0.1.0"

__all__ = [
    # Path accessor
    "get",
    "set",
    "getter",
    "G",
    "parse_path",
    "GetterCache",
    "default_cache",
    # Combinators
    "identity",
    "compose",
    "ensure_fn",
    "not_",
    "is_none",
    "is_array",
    "as_array",
    # Collections
    "group_by",
    "index_by",
    "map_keys",
    "for_each_key",
    # Values
    "index",
    "is_falsy",
    "is_truthy",
    # Environment and config
    "env",
    "Config",
    # Errors
    "ErrorCodes",
    "DotfnError",
    "ConfigError",
    "ConfigNotFoundError",
    "EnvVarNotSetError",
]
