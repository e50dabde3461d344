"""Client settings.

Settings are resolved with precedence:
1. Environment variables (ANKICONNECT_* prefix)
2. Config file (explicit path, ./.ankiconnect.yaml or
   ~/.ankiconnect/config.yaml, first found)
3. Built-in defaults

Example config file::

    host: 127.0.0.1
    port: 8765
    version: 6
    timeout: 10
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from ankiconnect.protocol.client import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_VERSION

PROJECT_CONFIG = ".ankiconnect.yaml"
GLOBAL_CONFIG = Path(".ankiconnect") / "config.yaml"


class ClientSettings(BaseSettings):
    """Connection settings for the bridge.

    Environment variables:
    - ANKICONNECT_HOST: Bridge host
    - ANKICONNECT_PORT: Bridge port
    - ANKICONNECT_VERSION: Protocol version to speak
    - ANKICONNECT_TIMEOUT: Request timeout in seconds
    - ANKICONNECT_API_KEY: API key, if the bridge requires one

    Environment variables take precedence over constructor arguments, so
    values read from a config file never mask them.

    Attributes:
        host: Bridge host
        port: Bridge port
        version: Protocol version sent with every request
        timeout: Request timeout in seconds
        api_key: Optional API key

    Example:
        >>> settings = ClientSettings.load()
        >>> settings.port
        8765
    """

    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    version: int = Field(default=DEFAULT_VERSION, ge=1)
    timeout: float = Field(default=30, gt=0)
    api_key: str | None = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="ANKICONNECT_",
        case_sensitive=False,
        extra="forbid",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings

    @classmethod
    def load(cls, config_path: Path | None = None) -> ClientSettings:
        """Load settings with precedence: env > config file > defaults.

        Args:
            config_path: Optional explicit config file; when given, the
                project and global files are not read

        Returns:
            Resolved settings

        Raises:
            ValueError: If the config file is missing, is not valid YAML,
                or holds invalid values
        """
        if config_path is not None:
            if not config_path.exists():
                raise ValueError(f"Config file not found: {config_path}")
            data = cls._load_yaml_file(config_path)
        else:
            data = {}
            for candidate in (Path.cwd() / PROJECT_CONFIG, Path.home() / GLOBAL_CONFIG):
                if candidate.exists():
                    data = cls._load_yaml_file(candidate)
                    break

        try:
            return cls(**data)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    @staticmethod
    def _load_yaml_file(path: Path) -> dict[str, Any]:
        """Load and parse a YAML mapping.

        Raises:
            ValueError: If the file cannot be read or is not a YAML mapping
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to read {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data
