"""Configuration management for Rescisao Calc.

Configuration is split across files in the config directory:

1. settings.json - Machine-specific settings
   - data_dir: custom data directory (history storage)
   - first_open_done: first-use onboarding completed

2. profile.yaml - Who is using the calculator
   - user_type: "worker" or "hr"
   - name, email, company, cnpj

3. tables.yaml - Optional overrides of the INSS/IRRF bracket tables
   (see taxes.tables)

Config directory resolution:
1. RESCISAO_CONFIG_PATH environment variable (if set)
2. ~/.config/rescisao-calc/ (XDG_CONFIG_HOME fallback)

Data directory resolution:
1. settings.json "data_dir" key
2. XDG_DATA_HOME/rescisao-calc/ or ~/.local/share/rescisao-calc/
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml


APP_NAME = "rescisao-calc"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"
TABLES_FILENAME = "tables.yaml"


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. RESCISAO_CONFIG_PATH environment variable
    2. ~/.config/rescisao-calc/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("RESCISAO_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json."""
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def has_seen_first_open() -> bool:
    """Whether first-use onboarding was completed on this machine."""
    return get_setting("first_open_done", False) is True


def mark_first_open_done() -> Path:
    """Record that first-use onboarding was completed."""
    return set_setting("first_open_done", True)


def get_profile_path() -> Path:
    """Get the path to profile.yaml (may not exist yet)."""
    return get_config_dir() / PROFILE_FILENAME


def load_profile(require_exists: bool = True) -> dict:
    """Load the user profile from profile.yaml.

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Returns:
        Profile dictionary (empty dict if not required and not found)

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    profile_path = get_profile_path()

    if not profile_path.exists():
        if require_exists:
            raise ProfileNotFoundError(
                f"No profile found at {profile_path}\n\n"
                f"Create a profile with: rescisao-calc profile init"
            )
        return {}

    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    """Save the user profile to profile.yaml.

    Returns:
        Path to the saved profile file
    """
    if path is None:
        path = get_profile_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return path


def get_tables_path() -> Path:
    """Get the path to tables.yaml (may not exist yet)."""
    return get_config_dir() / TABLES_FILENAME


def get_data_path() -> Path:
    """Get the data directory path.

    Uses settings.json "data_dir" when set, else XDG_DATA_HOME/rescisao-calc/.

    Returns:
        Path to the data directory (created if doesn't exist)
    """
    custom = get_setting("data_dir")
    if custom:
        data_path = Path(custom).expanduser()
    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
        data_path = Path(xdg_data_home) / APP_NAME
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
