"""Failed-attempt rate limiting for the shared access code.

Per client key the limiter is in one of three states:

- clean: no record, full attempts available
- tracking: some failures recorded inside the lockout window
- locked: max_attempts failures recorded; stays locked until the window has
  passed since the last failure

The window is checked lazily on the next access; there is no background
timer. The default store lives in process memory, so every process keeps
its own counts.
"""

import logging
import time
from typing import Callable, Optional, Protocol

from midcar.models.access import RateLimitRecord, RateLimitStatus

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5
LOCKOUT_SECONDS = 15 * 60


class RateLimitStore(Protocol):
    """Storage for per-key failure records."""

    def get(self, key: str) -> Optional[RateLimitRecord]: ...

    def set(self, key: str, record: RateLimitRecord) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryRateLimitStore:
    """Process-local store backed by a dict."""

    def __init__(self) -> None:
        self._records: dict[str, RateLimitRecord] = {}

    def get(self, key: str) -> Optional[RateLimitRecord]:
        return self._records.get(key)

    def set(self, key: str, record: RateLimitRecord) -> None:
        self._records[key] = record

    def delete(self, key: str) -> None:
        self._records.pop(key, None)

    def __len__(self) -> int:
        return len(self._records)


class RateLimiter:
    """Counts failed attempts per key and locks the key out at the limit."""

    def __init__(
        self,
        store: Optional[RateLimitStore] = None,
        max_attempts: int = MAX_ATTEMPTS,
        lockout_seconds: float = LOCKOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize limiter.

        Args:
            store: Record storage (defaults to a fresh in-memory store)
            max_attempts: Failures that trigger the lockout
            lockout_seconds: Window measured from the last failure
            clock: Monotonic time source (overridable in tests)

        Raises:
            ValueError: If max_attempts or lockout_seconds is not positive
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if lockout_seconds <= 0:
            raise ValueError("lockout_seconds must be positive")
        self.store: RateLimitStore = store if store is not None else MemoryRateLimitStore()
        self.max_attempts = max_attempts
        self.lockout_seconds = lockout_seconds
        self._clock = clock

    def check_rate_limit(self, key: str) -> RateLimitStatus:
        """Report whether key may attempt a comparison.

        Expired records are discarded here.
        """
        record = self.store.get(key)
        if record is None:
            return RateLimitStatus(allowed=True, remaining_attempts=self.max_attempts)

        if self._clock() - record.last_attempt > self.lockout_seconds:
            self.store.delete(key)
            logger.debug("Rate limit window expired for key=%s", key)
            return RateLimitStatus(allowed=True, remaining_attempts=self.max_attempts)

        if record.count >= self.max_attempts:
            return RateLimitStatus(allowed=False, remaining_attempts=0)

        return RateLimitStatus(
            allowed=True,
            remaining_attempts=self.max_attempts - record.count,
        )

    def record_attempt(self, key: str, success: bool) -> None:
        """Record the outcome of a comparison.

        A success clears the key; a failure starts or extends its record.
        """
        if success:
            self.store.delete(key)
            return

        now = self._clock()
        record = self.store.get(key)
        if record is None:
            record = RateLimitRecord(count=1, last_attempt=now)
        else:
            record = record.model_copy(
                update={"count": record.count + 1, "last_attempt": now}
            )
        self.store.set(key, record)

        if record.count >= self.max_attempts:
            logger.warning("Rate limit reached for key=%s (%d failures)", key, record.count)

    def reset(self, key: str) -> None:
        """Forget everything about key."""
        self.store.delete(key)


def constant_time_equals(a: str, b: str) -> bool:
    """Compare two strings in time independent of where they differ.

    Unequal lengths return False immediately; the length is not secret.
    """
    left = a.encode("utf-8")
    right = b.encode("utf-8")
    if len(left) != len(right):
        return False

    result = 0
    for x, y in zip(left, right):
        result |= x ^ y
    return result == 0
