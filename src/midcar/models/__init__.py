"""Data models for midcar."""

from midcar.models.access import AccessResult, RateLimitRecord, RateLimitStatus
from midcar.models.config import AccessSettings, AppConfig, VinServiceSettings
from midcar.models.identity import IdType, NationalIdResult
from midcar.models.vehicle import PlateFormat, VinBasicInfo, VinDecodedInfo

__all__ = [
    # Config
    "AppConfig",
    "AccessSettings",
    "VinServiceSettings",
    # Identity
    "IdType",
    "NationalIdResult",
    # Vehicle
    "PlateFormat",
    "VinBasicInfo",
    "VinDecodedInfo",
    # Access
    "AccessResult",
    "RateLimitRecord",
    "RateLimitStatus",
]
