"""Vehicle identification models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PlateFormat(str, Enum):
    """Spanish registration plate schemes."""

    MODERN = "modern"  # 1234BCD, since September 2000
    LEGACY = "legacy"  # M1234AB, provincial


class VinBasicInfo(BaseModel):
    """Offline VIN decode from the fixed WMI and year tables."""

    model_config = ConfigDict(frozen=True)

    manufacturer: str
    year: str


class VinDecodedInfo(BaseModel):
    """Extended VIN decode, filled from the NHTSA vPIC service when reachable."""

    is_valid: bool = True
    manufacturer: str = ""
    make: str = ""
    model: str = ""
    year: str = ""
    vehicle_type: str = ""
    body_class: str = ""
    drive_type: str = ""
    fuel_type: str = ""
    engine_cylinders: str = ""
    engine_displacement: str = ""
    transmission: str = ""
    doors: str = ""
    plant_country: str = ""
    plant_city: str = ""
    error_message: Optional[str] = None

    @classmethod
    def from_basic(cls, basic: VinBasicInfo) -> "VinDecodedInfo":
        """Seed an extended result with the offline decode."""
        return cls(
            manufacturer=basic.manufacturer,
            make=basic.manufacturer,
            year=basic.year,
        )

    @property
    def description(self) -> str:
        """Short description, e.g. '2019 Volkswagen Golf'."""
        parts = [self.year, self.make or self.manufacturer, self.model]
        return " ".join(p for p in parts if p)
