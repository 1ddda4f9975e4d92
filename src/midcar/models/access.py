"""Access-code verification and rate limiting models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RateLimitRecord(BaseModel):
    """Failed attempts for one client key."""

    count: int = Field(default=1, ge=0)
    last_attempt: float = Field(..., description="Clock reading of the last failure")


class RateLimitStatus(BaseModel):
    """Whether a client may attempt a comparison right now."""

    model_config = ConfigDict(frozen=True)

    allowed: bool
    remaining_attempts: int


class AccessResult(BaseModel):
    """Outcome of an access-code check."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    locked: bool = False
    message: Optional[str] = None
    error: Optional[str] = None
    remaining_attempts: Optional[int] = None

    @property
    def status_code(self) -> int:
        """HTTP status an endpoint should answer with."""
        if self.success:
            return 200
        if self.locked:
            return 429
        if self.remaining_attempts is None:
            return 400
        return 401

    def to_response(self) -> dict[str, Any]:
        """JSON body for an HTTP endpoint (camelCase keys)."""
        return self.model_dump(by_alias=True, exclude_none=True)
