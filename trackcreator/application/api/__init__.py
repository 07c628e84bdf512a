"""
Application API Layer

Result types shared by the editor services.
"""
from .result_types import CommandResult, ResultStatus

__all__ = [
    "CommandResult",
    "ResultStatus",
]
