"""VIN validation and decoding.

The basic decode is offline: a World Manufacturer Identifier table for the
first three characters and the model-year code in position 10. The full
decode asks the NHTSA vPIC service and falls back to the basic decode
whenever the service cannot answer.

Position 9 (the ISO 3779 check digit) is not verified: European VINs often
carry a filler there and would be rejected.
"""

import logging
import re
from typing import Any, Optional
from urllib.parse import quote

import httpx

from midcar.exceptions import VinServiceError
from midcar.models.config import VinServiceSettings
from midcar.models.vehicle import VinBasicInfo, VinDecodedInfo

logger = logging.getLogger(__name__)

VIN_LENGTH = 17

# 17 ASCII letters or digits, I/O/Q never used
VIN_RE = re.compile(r"[A-HJ-NPR-Za-hj-npr-z0-9]{17}")

UNKNOWN_MANUFACTURER = "Fabricante no identificado"
UNKNOWN_YEAR = "Año no identificado"

WMI_CODES: dict[str, str] = {
    # Germany
    "WVW": "Volkswagen", "WV1": "Volkswagen CV", "WV2": "Volkswagen CV",
    "WBA": "BMW", "WBS": "BMW M", "WBY": "BMW i",
    "WDB": "Mercedes-Benz", "WDC": "Mercedes-Benz", "WDD": "Mercedes-Benz",
    "WAU": "Audi", "WUA": "Audi Quattro",
    "W0L": "Opel",
    # France
    "VF1": "Renault", "VF3": "Peugeot", "VF7": "Citroën",
    # Spain
    "VSS": "SEAT", "VR1": "Citroën Spain", "VSK": "Nissan Spain",
    # Italy
    "ZFA": "Fiat", "ZFF": "Ferrari", "ZAM": "Maserati", "ZAR": "Alfa Romeo",
    "ZLA": "Lancia",
    # Japan
    "JTD": "Toyota", "JMZ": "Mazda", "JN1": "Nissan", "JHM": "Honda",
    # UK
    "SAL": "Land Rover", "SAJ": "Jaguar", "SCC": "Lotus",
    # Czech Republic / Hungary
    "TMB": "Škoda", "TRU": "Audi Hungary",
    # Romania
    "UU1": "Dacia",
    # Sweden
    "YV1": "Volvo", "YS3": "Saab",
    # USA
    "WF0": "Ford", "1FA": "Ford", "1G1": "Chevrolet", "1GC": "GMC",
    "1HD": "Harley-Davidson", "2HM": "Hyundai USA", "5YJ": "Tesla",
    # Korea
    "KMH": "Hyundai", "KNA": "Kia", "KNM": "Renault Samsung",
}

# Model-year code, position 10. Letters I, O, Q, U, Z are never used.
YEAR_CODES: dict[str, str] = {
    "A": "2010", "B": "2011", "C": "2012", "D": "2013", "E": "2014",
    "F": "2015", "G": "2016", "H": "2017", "J": "2018", "K": "2019",
    "L": "2020", "M": "2021", "N": "2022", "P": "2023", "R": "2024",
    "S": "2025", "T": "2026", "V": "2027", "W": "2028", "X": "2029",
    "Y": "2030",
    "1": "2001", "2": "2002", "3": "2003", "4": "2004", "5": "2005",
    "6": "2006", "7": "2007", "8": "2008", "9": "2009",
}

# vPIC variable name → VinDecodedInfo field
_VPIC_FIELDS = {
    "Model": "model",
    "Vehicle Type": "vehicle_type",
    "Body Class": "body_class",
    "Drive Type": "drive_type",
    "Fuel Type - Primary": "fuel_type",
    "Engine Number of Cylinders": "engine_cylinders",
    "Displacement (L)": "engine_displacement",
    "Transmission Style": "transmission",
    "Doors": "doors",
    "Plant Country": "plant_country",
    "Plant City": "plant_city",
}


def validate_vin(vin: Optional[str]) -> bool:
    """Check VIN structure: 17 characters, no I/O/Q, case-insensitive."""
    if not vin:
        return False
    return VIN_RE.fullmatch(vin) is not None


def decode_vin_basic(vin: Optional[str]) -> VinBasicInfo:
    """Decode manufacturer and model year without any network access.

    Never fails: short or malformed input yields the "not identified" labels.
    """
    vin = (vin or "").upper()
    wmi = vin[:3]
    year_code = vin[9:10]

    return VinBasicInfo(
        manufacturer=WMI_CODES.get(wmi, UNKNOWN_MANUFACTURER),
        year=YEAR_CODES.get(year_code, UNKNOWN_YEAR),
    )


class VinDecoder:
    """Full VIN decode through the NHTSA vPIC API."""

    DECODE_PATH = "vehicles/decodevin/{vin}"

    def __init__(
        self,
        settings: Optional[VinServiceSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize decoder.

        Args:
            settings: Service URL and timeout (defaults to the public vPIC API)
            client: Pre-built HTTP client; the caller keeps ownership of it
        """
        self.settings = settings or VinServiceSettings()
        self._client = client

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=httpx.Timeout(self.settings.timeout_seconds),
            headers={"Accept": "application/json"},
            follow_redirects=True,
        )

    async def decode(self, vin: str) -> VinDecodedInfo:
        """Decode a VIN, falling back to the offline tables on any failure.

        Args:
            vin: Vehicle identification number

        Returns:
            VinDecodedInfo; is_valid is False only when the service
            explicitly rejects the VIN
        """
        vin = "".join((vin or "").split()).upper()
        default = VinDecodedInfo.from_basic(decode_vin_basic(vin))

        try:
            if self._client is not None:
                results = await self._fetch(self._client, vin)
            else:
                async with self._build_client() as client:
                    results = await self._fetch(client, vin)
        except VinServiceError as e:
            logger.warning("VIN decode failed, using basic decode: %s (%s)", e.message, e.details)
            return default

        values = {
            str(r.get("Variable")): str(r.get("Value") or "")
            for r in results
            if isinstance(r, dict)
        }

        error_code = values.get("Error Code", "")
        if error_code and error_code != "0":
            logger.info("vPIC rejected VIN: error_code=%s", error_code)
            return default.model_copy(
                update={
                    "is_valid": False,
                    "error_message": values.get("Error Text") or "VIN no válido",
                }
            )

        update: dict[str, Any] = {
            "manufacturer": values.get("Manufacturer Name") or default.manufacturer,
            "make": values.get("Make") or default.manufacturer,
            "year": values.get("Model Year") or default.year,
        }
        for variable, field in _VPIC_FIELDS.items():
            update[field] = values.get(variable, "")

        return default.model_copy(update=update)

    async def _fetch(self, client: httpx.AsyncClient, vin: str) -> list[Any]:
        """Call vPIC and return its Results array.

        Raises:
            VinServiceError: On transport errors, non-2xx answers or bad JSON
        """
        path = self.DECODE_PATH.format(vin=quote(vin, safe=""))
        url = httpx.URL(self.settings.base_url).join(path)

        try:
            response = await client.get(url, params={"format": "json"})
        except httpx.HTTPError as e:
            raise VinServiceError(type(e).__name__) from e

        if response.is_error:
            raise VinServiceError("unexpected response", response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise VinServiceError("invalid JSON") from e

        results = data.get("Results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise VinServiceError("missing Results")
        return results
