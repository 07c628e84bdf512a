"""
Editor Settings

Configuration for an editor session: remote API location, timeline scale,
snapping threshold and logging level.

Loaded from settings.json in the user config directory, with
TRACKCREATOR_BACKEND_URL overriding the stored backend URL.
"""
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from trackcreator.application.settings.base_settings import BaseSettings, validated_field
from trackcreator.features.timeline.constants import DEFAULT_PIXELS_PER_SECOND, DEFAULT_SNAP_THRESHOLD
from trackcreator.shared.infrastructure.api_client import DEFAULT_BACKEND_URL
from trackcreator.utils.message import Log
from trackcreator.utils.paths import get_settings_path

BACKEND_URL_ENV = "TRACKCREATOR_BACKEND_URL"


@dataclass
class EditorSettings(BaseSettings):
    """Settings schema for the track editor."""
    backend_url: str = validated_field(
        DEFAULT_BACKEND_URL,
        required=True,
        pattern=r"^https?://",
        pattern_message="Must be an http(s) URL",
    )
    pixels_per_second: float = validated_field(float(DEFAULT_PIXELS_PER_SECOND), min_value=1.0, max_value=5000.0, allow_none=False)
    snap_threshold: float = validated_field(DEFAULT_SNAP_THRESHOLD, min_value=0.0, max_value=1.0, allow_none=False)
    request_timeout: float = validated_field(10.0, min_value=0.1, max_value=120.0, allow_none=False)
    log_level: str = validated_field("INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])


def load_editor_settings(path: Optional[Union[str, Path]] = None) -> EditorSettings:
    """
    Load editor settings.

    Missing file means defaults. Unreadable or invalid settings are logged
    and replaced by defaults so the editor can always start.

    Args:
        path: settings.json location (defaults to the user config directory)

    Returns:
        Validated EditorSettings
    """
    path = Path(path) if path is not None else get_settings_path()
    data = {}

    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as file:
                data = json.load(file)
            if not isinstance(data, dict):
                Log.warning(f"EditorSettings: {path} does not contain an object, using defaults")
                data = {}
        except (OSError, json.JSONDecodeError) as e:
            Log.error(f"EditorSettings: Failed to read {path}: {e}")
            data = {}

    env_url = os.getenv(BACKEND_URL_ENV)
    if env_url:
        data["backend_url"] = env_url

    settings = EditorSettings.from_dict(data)
    result = settings.validate()
    if not result.valid:
        for error in result.errors:
            Log.warning(f"EditorSettings: {error}")
        Log.warning("EditorSettings: Invalid settings, falling back to defaults")
        settings = EditorSettings()

    Log.set_level(settings.log_level)
    return settings
