# ABOUTME: Plugin configuration store, persisted as a small JSON file.
# ABOUTME: Holds the optional Comic Vine API key used by the sibling Comic Vine provider.

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_CONFIG_PATH = Path.home() / ".bookshelf" / "config.json"

COMICVINE_API_KEY_ENV = "BOOKSHELF_COMICVINE_API_KEY"


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be read or written."""


class PluginConfiguration(BaseSettings):
    """Settings shared by the bookshelf providers.

    Reads BOOKSHELF_* environment variables, which win over values passed in
    (those usually come from the config file). Empty variables are ignored.
    The Google Books provider needs no key; only Comic Vine lookups do.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOKSHELF_",
        env_ignore_empty=True,
        extra="ignore",
    )

    comicvine_api_key: str = Field(default="", description="Comic Vine API key")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (env_settings, init_settings)

    @property
    def has_comicvine_api_key(self) -> bool:
        return bool(self.comicvine_api_key.strip())


class _ConfigFile(BaseModel):
    """On-disk shape of the configuration file (camelCase keys)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    comicvine_api_key: str = Field(default="", alias="comicVineApiKey")


def load_configuration(path: Path | None = None) -> PluginConfiguration:
    """Load configuration from disk, falling back to defaults.

    A missing file is not an error. The BOOKSHELF_COMICVINE_API_KEY
    environment variable, when set, overrides the stored key.

    Args:
        path: Path to the config file. Defaults to ~/.bookshelf/config.json.

    Raises:
        ConfigurationError: If the file exists but cannot be read or is not a
            JSON object with a string comicVineApiKey.
    """
    config_path = path or DEFAULT_CONFIG_PATH
    stored = _ConfigFile()

    if config_path.exists():
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Cannot read {config_path}: {exc}") from exc
        try:
            stored = _ConfigFile.model_validate_json(text)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration in {config_path}: {exc}") from exc

    try:
        return PluginConfiguration(comicvine_api_key=stored.comicvine_api_key)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def save_configuration(config: PluginConfiguration, path: Path | None = None) -> Path:
    """Write configuration to disk, creating parent directories as needed.

    Returns the path written.
    """
    config_path = path or DEFAULT_CONFIG_PATH
    stored = _ConfigFile(comicvine_api_key=config.comicvine_api_key)
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(
            stored.model_dump_json(by_alias=True, indent=2) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise ConfigurationError(f"Cannot write {config_path}: {exc}") from exc
    return config_path
