"""Error hierarchy for the dotfn library."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "DotfnError",
    "ConfigError",
    "ConfigNotFoundError",
    "EnvVarNotSetError",
    "ErrorCodes",
]


class DotfnError(Exception):
    """Base error for all dotfn errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigError(DotfnError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, message: str, code: str = "CONFIG_INVALID", **kwargs: Any) -> None:
        super().__init__(code=code, message=message, **kwargs)


class ConfigNotFoundError(DotfnError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that could not be found."""
        return self.details["config_path"]


class EnvVarNotSetError(ConfigError):
    """Raised when a required environment variable is absent and has no default."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            message=f"Please set {key} in process environment.",
            code="ENV_VAR_NOT_SET",
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The missing environment variable name."""
        return self.details["key"]


class ErrorCodes:
    """All dotfn error codes as constants.

    Example:
        if error.code == ErrorCodes.ENV_VAR_NOT_SET:
            prompt_for(error.key)
    """

    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    ENV_VAR_NOT_SET = "ENV_VAR_NOT_SET"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
