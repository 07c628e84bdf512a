"""Settings schema, validation and loading."""
from trackcreator.application.settings.base_settings import (
    BaseSettings,
    ValidationResult,
    FieldValidator,
    validated_field,
)
from trackcreator.application.settings.editor_settings import (
    EditorSettings,
    load_editor_settings,
)

__all__ = [
    'BaseSettings',
    'ValidationResult',
    'FieldValidator',
    'validated_field',
    'EditorSettings',
    'load_editor_settings',
]
