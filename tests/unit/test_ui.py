"""Tests for CLI UI helpers."""

import pytest

from midcar.cli.ui import (
    create_details_table,
    error_panel,
    masked_value,
    status_panel,
    success_panel,
    validity_marker,
    warning_panel,
)


class TestMaskedValue:
    def test_long_value(self):
        assert masked_value("s3cret-code") == "*********de"

    def test_short_value(self):
        assert masked_value("ab") == "**"

    def test_custom_visible_chars(self):
        assert masked_value("123456", visible_chars=4) == "**3456"

    def test_empty_string(self):
        assert masked_value("") == ""


class TestValidityMarker:
    def test_valid(self):
        assert "valid" in validity_marker(True)
        assert "green" in validity_marker(True)

    def test_invalid(self):
        assert "invalid" in validity_marker(False)


class TestPanels:
    def test_success_panel(self):
        panel = success_panel("It worked!")
        assert panel.border_style == "green"
        assert panel.title is None
        assert "It worked!" in panel.renderable

    def test_error_panel_with_details(self):
        panel = error_panel("Failed", details="More info here")
        assert panel.border_style == "red"
        assert panel.title == "Error"
        assert "[dim]More info here[/dim]" in panel.renderable

    def test_error_panel_without_details(self):
        assert "[dim]" not in error_panel("Failed").renderable

    def test_warning_panel_with_details(self):
        panel = warning_panel("Watch out!", "Offline data shown.")
        assert panel.border_style == "yellow"
        assert "Offline data shown." in panel.renderable

    def test_unknown_kind(self):
        with pytest.raises(KeyError):
            status_panel("debug", "nope")


class TestDetailsTable:
    def test_skips_empty_values(self):
        table = create_details_table([("VIN", "WVW"), ("Model", "")])
        assert table.row_count == 1

    def test_title(self):
        table = create_details_table([], title="Settings")
        assert table.title == "Settings"
