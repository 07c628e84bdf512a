"""
Remote API errors
"""
from typing import Any, List, Optional


def normalize_errors(errors: Any) -> List[str]:
    """
    Flatten an API "errors" payload into a list of messages.

    The API reports errors either as a list of strings or as a
    {field: message} mapping.
    """
    if errors is None:
        return []
    if isinstance(errors, dict):
        return [f"{key}: {value}" for key, value in errors.items()]
    if isinstance(errors, (list, tuple)):
        return [str(error) for error in errors]
    return [str(errors)]


class NoteApiError(Exception):
    """Raised when the remote API rejects a request."""

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Any = None):
        self.status_code = status_code
        self.errors = normalize_errors(errors) or [message]
        super().__init__(message)
