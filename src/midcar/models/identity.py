"""National identity document models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class IdType(str, Enum):
    """Spanish identity document types."""

    DNI = "DNI"
    NIE = "NIE"
    CIF = "CIF"
    UNKNOWN = "unknown"


class NationalIdResult(BaseModel):
    """Outcome of classifying and checking an identity document."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    type: IdType
    formatted: str

    @property
    def type_display(self) -> str:
        """Human-readable document type."""
        type_map = {
            IdType.DNI: "DNI (Documento Nacional de Identidad)",
            IdType.NIE: "NIE (Número de Identidad de Extranjero)",
            IdType.CIF: "CIF (Código de Identificación Fiscal)",
            IdType.UNKNOWN: "Unknown",
        }
        return type_map.get(self.type, str(self.type))
