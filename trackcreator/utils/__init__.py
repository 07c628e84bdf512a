"""
Utils module - Logging and path utilities.

Contents:
- message.py: Log class for application logging
- paths.py: Platform-specific path utilities
"""
from trackcreator.utils.message import Log
from trackcreator.utils.paths import (
    get_user_data_dir,
    get_user_config_dir,
    get_logs_dir,
    get_settings_path,
)

__all__ = [
    'Log',
    'get_user_data_dir',
    'get_user_config_dir',
    'get_logs_dir',
    'get_settings_path',
]
