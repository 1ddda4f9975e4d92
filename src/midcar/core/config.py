"""Settings file management."""

import logging
from pathlib import Path
from typing import Optional

import platformdirs
import tomli
import tomli_w
from pydantic import ValidationError

from midcar.exceptions import ConfigNotFoundError, ConfigValidationError
from midcar.models import AppConfig

logger = logging.getLogger(__name__)

# Newest settings schema this build understands
CURRENT_VERSION = 1


class ConfigManager:
    """Reads and writes the TOML settings file."""

    CONFIG_FILENAME = "config.toml"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Override config directory (for testing)
        """
        if config_dir:
            self._config_dir = Path(config_dir)
        else:
            self._config_dir = Path(platformdirs.user_config_dir("midcar"))

    @property
    def config_path(self) -> Path:
        """Path to the settings file."""
        return self._config_dir / self.CONFIG_FILENAME

    @property
    def exists(self) -> bool:
        """Check if the settings file exists."""
        return self.config_path.exists()

    def save(self, config: AppConfig) -> None:
        """Write settings as TOML, creating the directory if needed."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        config_dict = config.model_dump(mode="json", exclude_none=True)
        self.config_path.write_text(tomli_w.dumps(config_dict), encoding="utf-8")
        logger.debug("Config saved to %s", self.config_path)

    def load(self) -> AppConfig:
        """Load settings from disk.

        Returns:
            Validated AppConfig

        Raises:
            ConfigNotFoundError: If the settings file doesn't exist
            ConfigValidationError: If the file is not valid TOML or settings
        """
        if not self.exists:
            raise ConfigNotFoundError()

        try:
            config_dict = tomli.loads(self.config_path.read_text(encoding="utf-8"))
        except tomli.TOMLDecodeError as e:
            raise ConfigValidationError("config.toml", str(e))

        version = config_dict.get("version", CURRENT_VERSION)
        if isinstance(version, int) and version > CURRENT_VERSION:
            raise ConfigValidationError(
                "version",
                f"Settings schema v{version} is newer than this midcar (v{CURRENT_VERSION}).",
            )

        try:
            return AppConfig.model_validate(config_dict)
        except ValidationError as e:
            field = ".".join(str(p) for p in e.errors()[0]["loc"]) or "config"
            raise ConfigValidationError(field, str(e))

    def load_or_default(self) -> AppConfig:
        """Load settings, or return defaults when no file exists."""
        if not self.exists:
            return AppConfig()
        return self.load()

    def delete(self) -> bool:
        """Delete the settings file.

        Returns:
            True if file was deleted, False if it didn't exist
        """
        if self.exists:
            self.config_path.unlink()
            return True
        return False
