"""
Path management for TrackCreator

Handles platform-specific user directories following standard conventions:
- macOS: ~/Library/Application Support/TrackCreator/
- Linux: ~/.local/share/trackcreator/ (data), ~/.config/trackcreator/ (config)
- Windows: %APPDATA%/TrackCreator/
"""
import os
import sys
from pathlib import Path


APP_NAME = "TrackCreator"


def get_user_data_dir() -> Path:
    """
    Get platform-specific user data directory.

    Returns:
        Path to user data directory (created if missing).
    """
    system = sys.platform

    if system == "darwin":  # macOS
        user_data_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    elif system == "win32":  # Windows
        user_data_dir = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming")) / APP_NAME
    else:  # Linux and other Unix-like
        user_data_dir = Path.home() / ".local" / "share" / APP_NAME.lower()

    user_data_dir.mkdir(parents=True, exist_ok=True)
    return user_data_dir


def get_user_config_dir() -> Path:
    """
    Get platform-specific user config directory.

    Same as the data directory on macOS/Windows, ~/.config/trackcreator/ on Linux.
    """
    if sys.platform in ("darwin", "win32"):
        return get_user_data_dir()

    config_dir = Path.home() / ".config" / APP_NAME.lower()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_logs_dir() -> Path:
    """Directory for application logs (inside the user data directory)."""
    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_settings_path() -> Path:
    """Path to editor settings.json in the user config directory."""
    return get_user_config_dir() / "settings.json"
