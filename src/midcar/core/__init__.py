"""Core validators, formatters and services for midcar."""

from midcar.core.access import AccessGuard, client_key_from_headers, resolve_access_code
from midcar.core.config import ConfigManager
from midcar.core.formatting import (
    format_currency,
    format_date,
    format_number,
    format_percentage,
    format_relative_time,
    format_short_date,
    generate_id,
    slugify,
    truncate,
)
from midcar.core.keychain import AccessCodeKeychain
from midcar.core.national_id import (
    format_national_id,
    validate_cif,
    validate_dni,
    validate_national_id,
    validate_nie,
)
from midcar.core.plate import classify_plate, normalize_plate, validate_plate
from midcar.core.ratelimit import MemoryRateLimitStore, RateLimiter, constant_time_equals
from midcar.core.vin import VinDecoder, decode_vin_basic, validate_vin

__all__ = [
    # Identity
    "validate_dni",
    "validate_nie",
    "validate_cif",
    "validate_national_id",
    "format_national_id",
    # Vehicle
    "validate_vin",
    "decode_vin_basic",
    "VinDecoder",
    "validate_plate",
    "classify_plate",
    "normalize_plate",
    # Formatting
    "format_currency",
    "format_number",
    "format_percentage",
    "format_date",
    "format_short_date",
    "format_relative_time",
    "truncate",
    "slugify",
    "generate_id",
    # Access
    "AccessGuard",
    "RateLimiter",
    "MemoryRateLimitStore",
    "constant_time_equals",
    "client_key_from_headers",
    "resolve_access_code",
    "AccessCodeKeychain",
    "ConfigManager",
]
