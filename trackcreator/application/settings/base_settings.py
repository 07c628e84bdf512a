"""
Base Settings

Dataclass-based settings schema with field validation.

Features:
- Dataclass-based schema with type safety
- Backwards-compatible loading (unknown keys ignored, missing keys defaulted)
- Field validation with ValidationResult

Usage:
    @dataclass
    class MySettings(BaseSettings):
        volume: int = validated_field(50, min_value=0, max_value=100)

    settings = MySettings.from_dict(saved)
    result = settings.validate()
"""
from dataclasses import dataclass, asdict, fields, field
from typing import Optional, Dict, Any, List, Union
from enum import Enum
import re


# =============================================================================
# Validation Framework
# =============================================================================

@dataclass
class ValidationResult:
    """
    Result of validating settings.

    Attributes:
        valid: True if all validations passed
        errors: List of error messages (validation failures)
    """
    valid: bool = True
    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.valid = False

    def merge(self, other: 'ValidationResult'):
        """Merge another ValidationResult into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class FieldValidator:
    """
    Validation rules for a settings field.

    Use in field metadata (or via validated_field()) to define validation rules:

        pixels_per_second: float = validated_field(300.0, min_value=1.0)
        log_level: str = validated_field('INFO', choices=['DEBUG', 'INFO'])
    """
    # Range validation (for numbers)
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None

    # Choice validation (for enums/strings)
    choices: Optional[List[Any]] = None

    # Pattern validation (for strings)
    pattern: Optional[str] = None
    pattern_message: Optional[str] = None

    # Required validation
    required: bool = False  # If True, value cannot be None or empty

    allow_none: bool = True

    def validate(self, value: Any, field_name: str) -> ValidationResult:
        """
        Validate a value against this validator's rules.

        Args:
            value: The value to validate
            field_name: Name of the field (for error messages)

        Returns:
            ValidationResult with any errors
        """
        result = ValidationResult()

        if value is None:
            if not self.allow_none:
                result.add_error(f"{field_name}: Cannot be None")
            elif self.required:
                result.add_error(f"{field_name}: Required field cannot be empty")
            return result

        if self.required and isinstance(value, str) and not value.strip():
            result.add_error(f"{field_name}: Required field cannot be empty")
            return result

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if self.min_value is not None and value < self.min_value:
                result.add_error(f"{field_name}: Value {value} is below minimum {self.min_value}")
            if self.max_value is not None and value > self.max_value:
                result.add_error(f"{field_name}: Value {value} is above maximum {self.max_value}")

        if self.choices is not None:
            check_value = value.value if isinstance(value, Enum) else value
            valid_choices = [c.value if isinstance(c, Enum) else c for c in self.choices]
            if check_value not in valid_choices:
                result.add_error(f"{field_name}: Value '{value}' not in allowed choices: {self.choices}")

        if self.pattern is not None and isinstance(value, str):
            if not re.match(self.pattern, value):
                msg = self.pattern_message or "Value does not match required pattern"
                result.add_error(f"{field_name}: {msg}")

        return result


def validated_field(
    default: Any = None,
    *,
    min_value: Optional[Union[int, float]] = None,
    max_value: Optional[Union[int, float]] = None,
    choices: Optional[List[Any]] = None,
    pattern: Optional[str] = None,
    pattern_message: Optional[str] = None,
    required: bool = False,
    allow_none: bool = True,
    **kwargs
):
    """
    Create a dataclass field with validation metadata.

    Wraps dataclasses.field() with a FieldValidator in the metadata.
    """
    validator = FieldValidator(
        min_value=min_value,
        max_value=max_value,
        choices=choices,
        pattern=pattern,
        pattern_message=pattern_message,
        required=required,
        allow_none=allow_none,
    )

    metadata = kwargs.pop('metadata', {})
    metadata['validator'] = validator

    return field(default=default, metadata=metadata, **kwargs)


@dataclass
class BaseSettings:
    """
    Base class for all settings dataclasses.

    Subclasses should define fields with default values so that settings
    files written by older versions keep loading.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseSettings':
        """
        Create settings from dictionary.

        Unknown keys are dropped and missing keys fall back to defaults.
        """
        valid_keys = {f.name for f in fields(cls)}
        merged = asdict(cls())
        merged.update({k: v for k, v in data.items() if k in valid_keys})
        return cls(**merged)

    def validate(self) -> ValidationResult:
        """
        Validate all settings fields against their validators.

        Fields without validators are skipped (assumed valid).
        """
        result = ValidationResult()

        for f in fields(self):
            validator = f.metadata.get('validator') if f.metadata else None
            if isinstance(validator, FieldValidator):
                result.merge(validator.validate(getattr(self, f.name), f.name))

        return result

    def is_valid(self) -> bool:
        """Quick check if settings are valid."""
        return self.validate().valid
