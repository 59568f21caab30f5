import logging
import tomllib
from pathlib import Path
from typing import Any

from forsure_formatter.models import FormatOptions

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file names unknown options or bad values."""


class ForSureConfig:
    """Handles loading and validation of .forsure.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.format_options = FormatOptions()
        self.existing_names: list[str] = []

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return

        section = data.get("tool", {}).get("forsure", {})
        self._apply_format_section(section.get("format", {}), path)
        self._apply_validate_section(section.get("validate", {}), path)

    def _apply_format_section(self, values: dict[str, Any], path: Path):
        try:
            self.format_options = FormatOptions.from_mapping(values, base=self.format_options)
        except ValueError as e:
            raise ConfigError(f"{path}: {e}") from e

    def _apply_validate_section(self, values: dict[str, Any], path: Path):
        existing = values.get("existing", self.existing_names)
        if not isinstance(existing, list) or not all(isinstance(name, str) for name in existing):
            raise ConfigError(f"{path}: validate.existing must be a list of strings")
        self.existing_names = list(existing)

    def disable(self, flags: list[str]) -> FormatOptions:
        """Return the configured options with the given passes switched off."""
        try:
            return FormatOptions.from_mapping({flag: False for flag in flags}, base=self.format_options)
        except ValueError as e:
            raise ConfigError(str(e)) from e


def find_config(path: Path, default: Path = Path(".forsure.toml")) -> Path:
    """Fall back to pyproject.toml when the default .forsure.toml is absent."""
    if path == default and not path.exists():
        pyproject = path.with_name("pyproject.toml")
        if pyproject.exists():
            return pyproject
    return path
