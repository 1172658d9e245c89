"""XDG-compliant path management for recents.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and data storage.

XDG defaults:
- Config: ~/.config/recents/
- Data: ~/.local/share/recents/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "recents"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/recents/ (or XDG_CONFIG_HOME/recents/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_data_dir() -> Path:
    """Get the data directory path.

    The recent files registry lives here, next to where desktop
    environments keep their own recently-used lists.

    Returns:
        Path to ~/.local/share/recents/ (or XDG_DATA_HOME/recents/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/recents/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/recents/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_registry_path() -> Path:
    """Get the default registry file path.

    Returns:
        Path to ~/.local/share/recents/recent-files.jsonl.
    """
    return get_data_dir() / "recent-files.jsonl"


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_data_dir(path: Path | None = None) -> Path:
    """Create the data directory if it doesn't exist.

    Args:
        path: Directory to create instead of the default data directory.

    Returns:
        Path to the data directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(path if path is not None else get_data_dir(), "data")
