"""Spanish registration plate validation."""

import re
from typing import Optional

from midcar.models.vehicle import PlateFormat

# Letters issued in the national scheme: no vowels, no Ñ, no Q
PLATE_CONSONANTS = "BCDFGHJKLMNPRSTVWXYZ"

_MODERN_RE = re.compile(rf"[0-9]{{4}}[{PLATE_CONSONANTS}]{{3}}")
_LEGACY_RE = re.compile(r"[A-Z]{1,2}[0-9]{4}[A-Z]{2}")


def normalize_plate(plate: Optional[str]) -> str:
    """Uppercase and drop separators ('1234-bcd' → '1234BCD')."""
    if not plate:
        return ""
    stripped = re.sub(r"[\s\-.]", "", plate)
    # Non-ASCII text is left as is and never matches a plate format
    return stripped.upper() if stripped.isascii() else stripped


def classify_plate(plate: Optional[str]) -> Optional[PlateFormat]:
    """Return the plate scheme, or None if the plate matches neither."""
    normalized = normalize_plate(plate)
    if _MODERN_RE.fullmatch(normalized):
        return PlateFormat.MODERN
    if _LEGACY_RE.fullmatch(normalized):
        return PlateFormat.LEGACY
    return None


def validate_plate(plate: Optional[str]) -> bool:
    """Check a plate against the modern (1234BCD) and legacy (M1234AB) schemes."""
    return classify_plate(plate) is not None
