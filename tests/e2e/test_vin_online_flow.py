"""E2E test: online VIN decode with a mocked decoder."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from midcar.cli.app import app
from midcar.core.config import ConfigManager
from midcar.models import VinDecodedInfo, VinServiceSettings

runner = CliRunner()

VIN = "WVWZZZ3CZLE123456"


@pytest.fixture
def manager(temp_config_dir):
    manager = ConfigManager(config_dir=temp_config_dir)
    with patch("midcar.cli.commands.vehicle.ConfigManager", return_value=manager):
        yield manager


def mock_decoder(info):
    decoder = MagicMock()
    decoder.decode = AsyncMock(return_value=info)
    return patch("midcar.cli.commands.vehicle.VinDecoder", return_value=decoder)


class TestOnlineDecode:
    def test_full_details(self, manager):
        info = VinDecodedInfo(
            manufacturer="VOLKSWAGEN AG",
            make="VOLKSWAGEN",
            model="Passat",
            year="2020",
            fuel_type="Diesel",
            plant_city="EMDEN",
            plant_country="GERMANY",
        )
        with mock_decoder(info) as decoder_cls:
            result = runner.invoke(app, ["vin", VIN, "--online"])
        assert result.exit_code == 0
        assert "Passat" in result.output
        assert "EMDEN, GERMANY" in result.output
        assert "2020 VOLKSWAGEN Passat" in result.output
        decoder_cls.return_value.decode.assert_awaited_once_with(VIN)

    def test_uses_configured_service(self, manager):
        from midcar.models import AppConfig

        manager.save(AppConfig(vin_service=VinServiceSettings(base_url="https://vin.example.com/")))
        with mock_decoder(VinDecodedInfo(manufacturer="Volkswagen", year="2020")) as decoder_cls:
            result = runner.invoke(app, ["vin", VIN, "--online", "--verbose"])
        assert result.exit_code == 0
        assert "vin.example.com" in result.output
        settings = decoder_cls.call_args.args[0]
        assert settings.base_url == "https://vin.example.com/"

    def test_rejected_by_service(self, manager):
        info = VinDecodedInfo(
            is_valid=False,
            manufacturer="Volkswagen",
            year="2020",
            error_message="1 - Check Digit incorrect",
        )
        with mock_decoder(info):
            result = runner.invoke(app, ["vin", VIN, "--online"])
        assert result.exit_code == 1
        assert "Check Digit incorrect" in result.output

    def test_invalid_vin_never_reaches_service(self, manager):
        with mock_decoder(VinDecodedInfo()) as decoder_cls:
            result = runner.invoke(app, ["vin", "SHORT", "--online"])
        assert result.exit_code == 1
        decoder_cls.assert_not_called()
