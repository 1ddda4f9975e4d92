"""Spanish identity document validation (DNI, NIE, CIF).

All checks normalize their input first (uppercase, alphanumerics only) and
never raise: malformed input is simply invalid.
"""

import re
from typing import Optional

from midcar.models.identity import IdType, NationalIdResult

# Check letters indexed by number % 23
DNI_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"

# NIE prefix letter → leading digit (X=0, Y=1, Z=2)
NIE_PREFIXES = "XYZ"

# Organization-type letters that open a CIF
CIF_LETTERS = "ABCDEFGHJKLMNPQRSUVW"

# CIF control letters indexed by control digit
CIF_CONTROL_LETTERS = "JABCDEFGHI"

# Organization types whose control character must be a letter / a digit.
# Every other organization type accepts either form.
CIF_LETTER_CONTROL = "KPQS"
CIF_DIGIT_CONTROL = "ABEH"

_DNI_RE = re.compile(r"[0-9]{8}[A-Z]")
_NIE_RE = re.compile(r"[XYZ][0-9]{7}[A-Z]")
_CIF_RE = re.compile(r"[ABCDEFGHJKLMNPQRSUVW][0-9]{7}[0-9A-J]")
_CIF_SHAPE_RE = re.compile(r"[A-Z][0-9]{7}[0-9A-Z]")


def clean_document(value: Optional[str]) -> str:
    """Uppercase and strip everything but letters and digits."""
    if not value:
        return ""
    return re.sub(r"[^0-9A-Za-z]", "", value).upper()


def dni_letter(number: int) -> str:
    """Return the DNI check letter for a document number."""
    return DNI_LETTERS[number % 23]


def validate_dni(dni: Optional[str]) -> bool:
    """Validate a DNI (8 digits + check letter), e.g. '12345678Z'."""
    clean = clean_document(dni)
    if not _DNI_RE.fullmatch(clean):
        return False
    return clean[8] == dni_letter(int(clean[:8]))


def validate_nie(nie: Optional[str]) -> bool:
    """Validate a NIE (X/Y/Z + 7 digits + check letter), e.g. 'X0000000T'."""
    clean = clean_document(nie)
    if not _NIE_RE.fullmatch(clean):
        return False
    number = int(str(NIE_PREFIXES.index(clean[0])) + clean[1:8])
    return clean[8] == dni_letter(number)


def cif_control_digit(digits: str) -> int:
    """Compute the CIF control digit over the 7 central digits.

    Digits at even 0-based positions are doubled (minus 9 above 9), digits
    at odd positions are added as-is.
    """
    total = 0
    for i, ch in enumerate(digits):
        digit = int(ch)
        if i % 2 == 0:
            doubled = digit * 2
            total += doubled - 9 if doubled > 9 else doubled
        else:
            total += digit
    return (10 - total % 10) % 10


def validate_cif(cif: Optional[str]) -> bool:
    """Validate a CIF (organization letter + 7 digits + control character)."""
    clean = clean_document(cif)
    if not _CIF_RE.fullmatch(clean):
        return False

    org_type = clean[0]
    control = clean[8]
    digit = cif_control_digit(clean[1:8])
    letter = CIF_CONTROL_LETTERS[digit]

    if org_type in CIF_LETTER_CONTROL:
        return control == letter
    if org_type in CIF_DIGIT_CONTROL:
        return control == str(digit)
    return control in (str(digit), letter)


def validate_national_id(value: Optional[str]) -> NationalIdResult:
    """Classify a document as DNI, NIE or CIF and check it.

    Args:
        value: Raw document as typed by the user

    Returns:
        NationalIdResult with validity, detected type and cleaned value
    """
    clean = clean_document(value)
    if not clean:
        return NationalIdResult(is_valid=False, type=IdType.UNKNOWN, formatted="")

    if _DNI_RE.fullmatch(clean):
        return NationalIdResult(
            is_valid=validate_dni(clean), type=IdType.DNI, formatted=clean
        )

    if _NIE_RE.fullmatch(clean):
        return NationalIdResult(
            is_valid=validate_nie(clean), type=IdType.NIE, formatted=clean
        )

    if _CIF_SHAPE_RE.fullmatch(clean) and clean[0] in CIF_LETTERS:
        return NationalIdResult(
            is_valid=validate_cif(clean), type=IdType.CIF, formatted=clean
        )

    return NationalIdResult(is_valid=False, type=IdType.UNKNOWN, formatted=clean)


def format_national_id(value: Optional[str]) -> str:
    """Return the normalized document, or the uppercased input as a fallback."""
    if not value:
        return ""
    return validate_national_id(value).formatted or value.upper()
