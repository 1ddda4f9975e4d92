"""Tests for DNI / NIE / CIF validation."""

import pytest

from midcar.core.national_id import (
    DNI_LETTERS,
    cif_control_digit,
    clean_document,
    dni_letter,
    format_national_id,
    validate_cif,
    validate_dni,
    validate_national_id,
    validate_nie,
)
from midcar.models import IdType


class TestDNI:
    def test_valid(self):
        assert validate_dni("12345678Z") is True

    def test_all_zero(self):
        assert validate_dni("00000000T") is True

    def test_lowercase_and_separators(self):
        assert validate_dni("12.345.678-z") is True

    def test_wrong_letter(self):
        assert validate_dni("12345678A") is False

    @pytest.mark.parametrize("number", [0, 1, 22, 23, 12345678, 87654321, 99999999])
    def test_table_letter_is_the_only_valid_one(self, number):
        digits = f"{number:08d}"
        expected = DNI_LETTERS[number % 23]
        assert validate_dni(digits + expected) is True
        for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
            if letter != expected:
                assert validate_dni(digits + letter) is False

    def test_seven_digits(self):
        assert validate_dni("1234567Z") is False

    def test_empty(self):
        assert validate_dni("") is False

    def test_none(self):
        assert validate_dni(None) is False

    def test_non_ascii_letter_dropped(self):
        # "ſ".upper() is "S", the check letter for 00000015
        assert validate_dni("00000015S") is True
        assert validate_dni("00000015\u017f") is False
        assert clean_document("00000015\u017f") == "00000015"

    def test_dni_letter(self):
        assert dni_letter(12345678) == "Z"
        assert dni_letter(0) == "T"


class TestNIE:
    def test_x_prefix(self):
        assert validate_nie("X0000000T") is True
        assert validate_nie("X1234567L") is True

    def test_y_prefix(self):
        assert validate_nie("Y1234567X") is True

    def test_z_prefix(self):
        assert validate_nie("Z1234567R") is True

    def test_prefix_maps_to_dni_number(self):
        # Y → 1: the NIE letter equals the DNI letter of 11234567
        assert validate_dni("11234567X") is True
        assert validate_nie("Y1234567X") is True

    def test_wrong_letter(self):
        assert validate_nie("X1234567A") is False

    def test_invalid_prefix(self):
        assert validate_nie("W1234567L") is False

    def test_empty(self):
        assert validate_nie("") is False


class TestCIF:
    def test_control_digit(self):
        assert cif_control_digit("1234567") == 4
        assert cif_control_digit("2826000") == 8

    def test_digit_required(self):
        assert validate_cif("B12345674") is True
        assert validate_cif("B1234567D") is False

    def test_letter_required(self):
        assert validate_cif("Q2826000H") is True
        assert validate_cif("Q28260008") is False

    def test_either_accepted(self):
        assert validate_cif("G12345674") is True
        assert validate_cif("G1234567D") is True

    def test_wrong_control(self):
        assert validate_cif("B12345675") is False

    def test_invalid_org_letter(self):
        assert validate_cif("I12345674") is False

    def test_control_out_of_range(self):
        assert validate_cif("B1234567K") is False

    def test_separators(self):
        assert validate_cif("b-1234567-4") is True

    def test_empty(self):
        assert validate_cif(None) is False


class TestValidateNationalId:
    def test_dni(self):
        result = validate_national_id("12345678z")
        assert result.is_valid is True
        assert result.type == IdType.DNI
        assert result.formatted == "12345678Z"

    def test_invalid_dni_keeps_type(self):
        result = validate_national_id("12345678A")
        assert result.is_valid is False
        assert result.type == IdType.DNI

    def test_nie(self):
        result = validate_national_id("x-0000000-t")
        assert result.is_valid is True
        assert result.type == IdType.NIE
        assert result.formatted == "X0000000T"

    def test_cif(self):
        result = validate_national_id("B 1234567 4")
        assert result.is_valid is True
        assert result.type == IdType.CIF
        assert result.formatted == "B12345674"

    def test_cif_shape_with_bad_control(self):
        result = validate_national_id("B1234567K")
        assert result.type == IdType.CIF
        assert result.is_valid is False

    def test_unknown(self):
        result = validate_national_id("abc-123")
        assert result.is_valid is False
        assert result.type == IdType.UNKNOWN
        assert result.formatted == "ABC123"

    def test_unknown_org_letter(self):
        result = validate_national_id("I12345674")
        assert result.type == IdType.UNKNOWN

    def test_empty(self):
        result = validate_national_id("")
        assert result.is_valid is False
        assert result.type == IdType.UNKNOWN
        assert result.formatted == ""

    def test_none(self):
        assert validate_national_id(None).type == IdType.UNKNOWN


class TestFormatting:
    def test_clean_document(self):
        assert clean_document(" 12.345.678-z ") == "12345678Z"

    def test_format_national_id(self):
        assert format_national_id("12345678-z") == "12345678Z"

    def test_format_keeps_unknown_cleaned(self):
        assert format_national_id("abc 1") == "ABC1"

    def test_format_symbols_only_falls_back(self):
        assert format_national_id("--") == "--"

    def test_format_empty(self):
        assert format_national_id("") == ""
