"""
Pydantic Settings for optbridge configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigValidationError
from .models.config import BridgeConfig, LoggingConfig, StoreConfig

CONFIG_DIR_NAME = ".optbridge"
CONFIG_FILE_NAME = "config.toml"


def _get_logger():
    from ..services.logging import OptBridgeLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, OptBridgeLogger)


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .optbridge/config.toml by walking up from start_dir (or cwd).

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        # Also check for pyproject.toml with [tool.optbridge] section
        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "optbridge" in data["tool"]:
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            # Handle pyproject.toml vs .optbridge/config.toml
            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("optbridge", {})

            self._data = data
            self._data["_config_file"] = str(path)

        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to parse config file: {e}"
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class OptBridgeSettings(BaseSettings):
    """optbridge settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (OPTBRIDGE_<section>__<field>)
    3. TOML config file (.optbridge/config.toml or pyproject.toml [tool.optbridge])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "OPTBRIDGE_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    store: StoreConfig = Field(default_factory=StoreConfig)
    bridge: BridgeConfig = Field(default_factory=BridgeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The TOML location cannot be passed through the constructor, so
        load_settings() hands it over via module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were loaded from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Error message if the TOML file could not be read or parsed."""
        return self._config_error

    def resolve_store_path(self, base_dir: Path | None = None) -> Path:
        """
        Resolve the SQLite store path.

        Relative paths are anchored at the directory holding the
        .optbridge directory when settings came from a config file,
        otherwise at base_dir (or cwd).
        """
        path = Path(self.store.path).expanduser()
        if path.is_absolute():
            return path
        if self._config_file:
            config_file = Path(self._config_file)
            if config_file.parent.name == CONFIG_DIR_NAME:
                return config_file.parent.parent / path
            return config_file.parent / path
        return (base_dir or Path.cwd()) / path


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> OptBridgeSettings:
    """Load optbridge settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit section values (highest priority)

    Returns:
        OptBridgeSettings instance with all sources merged

    Raises:
        ConfigValidationError: If a configured value fails validation
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        try:
            settings = OptBridgeSettings(**overrides)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigValidationError(
                f"Invalid configuration: {first['msg']}",
                key=key,
                cause=e,
            ) from e

        # Copy internal fields from TOML source
        toml_source = TomlConfigSource(OptBridgeSettings, config_path, start_dir)
        toml_data = toml_source()
        if "_config_file" in toml_data:
            settings._config_file = toml_data["_config_file"]
        if "_config_error" in toml_data:
            settings._config_error = toml_data["_config_error"]

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
