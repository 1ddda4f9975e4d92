"""Shared access-code verification guarded by the rate limiter."""

import logging
import os
from typing import Mapping, Optional

from keyring.errors import KeyringError

from midcar.core.keychain import AccessCodeKeychain
from midcar.core.ratelimit import RateLimiter, RateLimitStore, constant_time_equals
from midcar.exceptions import MissingSecretError
from midcar.models.access import AccessResult
from midcar.models.config import AppConfig

logger = logging.getLogger(__name__)

# Checked in order; the second name is the one the web dashboard deploys with
ACCESS_CODE_ENV_VARS = ("MIDCAR_ACCESS_CODE", "FULL_VIEW_ACCESS_CODE")

UNKNOWN_CLIENT = "unknown"


def resolve_access_code(env: Optional[Mapping[str, str]] = None) -> str:
    """Find the configured access code.

    Looks at the environment first, then the OS keychain.

    Raises:
        MissingSecretError: If no access code is configured
    """
    env = os.environ if env is None else env
    for name in ACCESS_CODE_ENV_VARS:
        value = env.get(name)
        if value:
            logger.debug("Access code taken from $%s", name)
            return value

    try:
        stored = AccessCodeKeychain.retrieve()
    except KeyringError as e:
        logger.warning("Keychain unavailable: %s", e)
        stored = None
    if stored:
        logger.debug("Access code taken from keychain")
        return stored

    raise MissingSecretError(ACCESS_CODE_ENV_VARS[0])


def client_key_from_headers(headers: Mapping[str, str]) -> str:
    """Rate-limit key for an HTTP request: first X-Forwarded-For hop."""
    for name, value in headers.items():
        if name.lower() == "x-forwarded-for" and value:
            return value.split(",")[0].strip() or UNKNOWN_CLIENT
    return UNKNOWN_CLIENT


class AccessGuard:
    """Checks submitted codes against the shared secret."""

    def __init__(self, secret: str, limiter: Optional[RateLimiter] = None) -> None:
        """Initialize guard.

        Args:
            secret: The shared access code
            limiter: Failure tracker (defaults to an in-memory limiter)

        Raises:
            MissingSecretError: If secret is empty
        """
        if not secret:
            raise MissingSecretError(ACCESS_CODE_ENV_VARS[0])
        self._secret = secret
        self.limiter = limiter or RateLimiter()

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        secret: Optional[str] = None,
        store: Optional[RateLimitStore] = None,
    ) -> "AccessGuard":
        """Build a guard from settings, resolving the secret if not given."""
        limiter = RateLimiter(
            store=store,
            max_attempts=config.access.max_attempts,
            lockout_seconds=config.access.lockout_seconds,
        )
        return cls(secret if secret is not None else resolve_access_code(), limiter)

    @property
    def lockout_message(self) -> str:
        minutes = self.limiter.lockout_seconds / 60
        return f"Demasiados intentos fallidos. Espera {minutes:g} minutos."

    def verify(self, key: str, code: Optional[str]) -> AccessResult:
        """Check one submitted code for client key.

        Locked keys are rejected without comparing or recording anything.
        """
        status = self.limiter.check_rate_limit(key)
        if not status.allowed:
            logger.info("Access attempt rejected, key=%s is locked", key)
            return AccessResult(success=False, locked=True, error=self.lockout_message)

        if not code:
            return AccessResult(success=False, error="Código requerido")

        is_valid = constant_time_equals(code, self._secret)
        self.limiter.record_attempt(key, is_valid)

        if is_valid:
            logger.info("Access granted for key=%s", key)
            return AccessResult(success=True, message="Acceso concedido")

        logger.info("Wrong access code for key=%s", key)
        return AccessResult(
            success=False,
            error="Código incorrecto",
            remaining_attempts=status.remaining_attempts - 1,
        )
