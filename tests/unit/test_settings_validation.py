"""
Tests for the settings validation framework and EditorSettings loading.
"""
import json

import pytest
from dataclasses import dataclass

from trackcreator.application.settings import (
    BaseSettings,
    EditorSettings,
    FieldValidator,
    ValidationResult,
    load_editor_settings,
    validated_field,
)
from trackcreator.application.settings.editor_settings import BACKEND_URL_ENV


class TestValidationResult:
    """Tests for ValidationResult class."""

    def test_initial_state_is_valid(self):
        result = ValidationResult()
        assert result.valid is True
        assert result.errors == []

    def test_add_error_marks_invalid(self):
        result = ValidationResult()
        result.add_error("Test error")
        assert result.valid is False
        assert bool(result) is False

    def test_merge_invalid_makes_target_invalid(self):
        result1 = ValidationResult()
        result2 = ValidationResult()
        result2.add_error("Error")

        result1.merge(result2)
        assert result1.valid is False
        assert result1.errors == ["Error"]


class TestFieldValidator:
    """Tests for FieldValidator class."""

    def test_range_validation(self):
        validator = FieldValidator(min_value=0, max_value=1)
        assert validator.validate(0.5, "snap").valid is True
        assert "below minimum" in validator.validate(-0.1, "snap").errors[0]
        assert "above maximum" in validator.validate(1.5, "snap").errors[0]

    def test_choices_validation(self):
        validator = FieldValidator(choices=["DEBUG", "INFO"])
        assert validator.validate("INFO", "log_level").valid is True
        assert "not in allowed choices" in validator.validate("LOUD", "log_level").errors[0]

    def test_pattern_custom_message(self):
        validator = FieldValidator(pattern=r"^https?://", pattern_message="Must be an http(s) URL")
        assert validator.validate("https://api.test", "backend_url").valid is True
        result = validator.validate("ftp://api.test", "backend_url")
        assert "Must be an http(s) URL" in result.errors[0]

    def test_required_validation(self):
        validator = FieldValidator(required=True)
        assert validator.validate("   ", "name").valid is False
        assert validator.validate(None, "name").valid is False

    def test_allow_none_validation(self):
        validator = FieldValidator(allow_none=False)
        assert "Cannot be None" in validator.validate(None, "name").errors[0]


class TestBaseSettings:
    """Tests for BaseSettings."""

    def test_validate_reports_every_invalid_field(self):
        @dataclass
        class ValidatedSettings(BaseSettings):
            volume: int = validated_field(50, min_value=0, max_value=100)
            name: str = validated_field("x", required=True)

        result = ValidatedSettings(volume=150, name="").validate()
        assert result.valid is False
        assert len(result.errors) == 2

    def test_from_dict_ignores_unknown_and_defaults_missing(self):
        @dataclass
        class SimpleSettings(BaseSettings):
            name: str = "default"
            count: int = 0

        settings = SimpleSettings.from_dict({"count": 3, "legacy_key": True})
        assert settings.name == "default"
        assert settings.count == 3
        assert settings.to_dict() == {"name": "default", "count": 3}


class TestEditorSettings:
    """Tests for EditorSettings defaults and loading."""

    @pytest.fixture(autouse=True)
    def no_env_override(self, monkeypatch):
        monkeypatch.delenv(BACKEND_URL_ENV, raising=False)

    def test_defaults_are_valid(self):
        settings = EditorSettings()
        assert settings.is_valid() is True
        assert settings.pixels_per_second == 300.0
        assert settings.snap_threshold == 0.08

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_editor_settings(tmp_path / "settings.json") == EditorSettings()

    def test_loads_values_from_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"pixels_per_second": 150.0, "snap_threshold": 0.05}))

        settings = load_editor_settings(path)
        assert settings.pixels_per_second == 150.0
        assert settings.snap_threshold == 0.05

    def test_invalid_values_fall_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"pixels_per_second": -5, "log_level": "LOUD"}))
        assert load_editor_settings(path) == EditorSettings()

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        assert load_editor_settings(path) == EditorSettings()

    def test_env_overrides_backend_url(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"backend_url": "http://stored.test"}))
        monkeypatch.setenv(BACKEND_URL_ENV, "https://env.test")

        assert load_editor_settings(path).backend_url == "https://env.test"

    def test_null_numeric_value_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"snap_threshold": None}))
        assert load_editor_settings(path).snap_threshold == 0.08
