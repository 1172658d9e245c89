"""Configuration for recents.

Settings are read from ~/.config/recents/config.toml. Every key is
optional; a missing file means the defaults below.

Example:
    app_name = "recents"
    app_exec = "recents"
    default_mime_type = "application/octet-stream"
    registry_path = "~/.local/share/recents/recent-files.jsonl"
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from recents.core.paths import get_config_path
from recents.models.request import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_APP_NAME = "recents"
DEFAULT_APP_EXEC = "recents"


class RecentsConfig(BaseModel):
    """Configuration for registering recent files.

    Attributes:
        app_name: Application name recorded on every entry.
        app_exec: Application command recorded on every entry.
        default_mime_type: Type used when no type can be guessed.
        registry_path: Registry file. None means the XDG data location.
    """

    model_config = ConfigDict(extra="forbid")

    app_name: Annotated[
        str,
        Field(min_length=1, description="Registering application name"),
    ] = DEFAULT_APP_NAME
    app_exec: Annotated[
        str,
        Field(min_length=1, description="Registering application command"),
    ] = DEFAULT_APP_EXEC
    default_mime_type: Annotated[
        str,
        Field(description="Fallback MIME type"),
    ] = DEFAULT_MIME_TYPE
    registry_path: Annotated[
        Path | None,
        Field(description="Registry file (None = XDG data dir)"),
    ] = None

    @field_validator("default_mime_type")
    @classmethod
    def validate_mime_type(cls, v: str) -> str:
        """Require a type/subtype pair."""
        media_type, _, subtype = v.strip().partition("/")
        if not media_type or not subtype:
            msg = f"default_mime_type must look like 'type/subtype', got '{v}'"
            raise ValueError(msg)
        return v.strip()

    @field_validator("registry_path")
    @classmethod
    def expand_registry_path(cls, v: Path | None) -> Path | None:
        """Expand '~' in the registry path."""
        if v is None:
            return None
        return v.expanduser()


class ConfigParseError(ConfigurationError):
    """Raised when the config file is not valid TOML."""


def load_config(path: Path | None = None) -> RecentsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RecentsConfig. Defaults when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigurationError: If the file cannot be read or the content
            doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return get_default_config()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read config {config_path}: {e}") from e

    try:
        return RecentsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config content in {config_path}: {e}") from e


def get_default_config() -> RecentsConfig:
    """Create a default RecentsConfig.

    Returns:
        RecentsConfig with default settings.
    """
    return RecentsConfig()
