"""Environment variable lookups with defaults."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from dotfn.errors import EnvVarNotSetError

__all__ = ["env"]

_logger = logging.getLogger(__name__)

_MISSING: Any = object()


def env(key: str, default: Any = _MISSING, environ: Mapping[str, str] | None = None) -> Any:
    """Read an environment variable.

    Args:
        key: Variable name.
        default: Returned when the variable is unset. Any value counts,
            including None.
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The variable's value, or ``default``.

    Raises:
        EnvVarNotSetError: If the variable is unset and no default is given.
    """
    source = os.environ if environ is None else environ
    if key in source:
        return source[key]

    if default is not _MISSING:
        _logger.debug("Environment variable %s not set, using default", key)
        return default

    raise EnvVarNotSetError(key)
