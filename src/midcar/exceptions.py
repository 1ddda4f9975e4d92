"""Custom exceptions for midcar."""

from typing import Optional


class MidcarError(Exception):
    """Base exception for all midcar errors."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


# ─────────────────────────────────────────────────────────────────────────────
# Config Errors
# ─────────────────────────────────────────────────────────────────────────────


class ConfigError(MidcarError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    def __init__(self) -> None:
        super().__init__(
            "Configuration not found",
            "Run 'midcar config --save' to write the default settings.",
        )


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            f"Invalid configuration: {field}",
            reason,
        )


class MissingSecretError(ConfigError):
    """The shared access code is not configured anywhere."""

    def __init__(self, name: str = "MIDCAR_ACCESS_CODE") -> None:
        super().__init__(
            "Access code is not configured",
            f"Set {name} or run 'midcar config --set-code'.",
        )


# ─────────────────────────────────────────────────────────────────────────────
# VIN Service Errors
# ─────────────────────────────────────────────────────────────────────────────


class VinServiceError(MidcarError):
    """The external VIN decoding service failed."""

    def __init__(self, reason: str, status_code: Optional[int] = None) -> None:
        details = f"HTTP {status_code}" if status_code is not None else None
        super().__init__(
            f"VIN service unavailable: {reason}",
            details,
        )
        self.status_code = status_code
