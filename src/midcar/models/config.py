"""Application settings model."""

from pydantic import BaseModel, Field, field_validator


class AccessSettings(BaseModel):
    """Rate limiting for the shared access code."""

    max_attempts: int = Field(default=5, ge=1, le=100)
    lockout_minutes: float = Field(default=15, gt=0)

    @property
    def lockout_seconds(self) -> float:
        return self.lockout_minutes * 60


class VinServiceSettings(BaseModel):
    """External VIN decoding service."""

    base_url: str = Field(
        default="https://vpic.nhtsa.dot.gov/api/",
        pattern=r"^https?://",
    )
    timeout_seconds: float = Field(default=5.0, gt=0, le=60)

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Relative endpoint paths are joined onto the base URL."""
        return v if v.endswith("/") else v + "/"


class AppConfig(BaseModel):
    """Complete application settings."""

    # Schema version for migrations
    version: int = Field(default=1, description="Config schema version")

    access: AccessSettings = Field(default_factory=AccessSettings)
    vin_service: VinServiceSettings = Field(default_factory=VinServiceSettings)
