"""
Result Types for Application Operations

Structured return types for store and service operations that talk to the
remote API. Failures are absorbed into an error result instead of raised.
"""
from dataclasses import dataclass, field
from typing import Optional, List, TypeVar, Generic
from enum import Enum


class ResultStatus(Enum):
    """Status of an operation"""
    SUCCESS = "success"
    ERROR = "error"


# Type variable for generic CommandResult
T = TypeVar('T')


@dataclass
class CommandResult(Generic[T]):
    """
    Structured result from store and service operations.

    - status: Success or error
    - message: Human-readable result message
    - data: Structured data (Note, Track, ...)
    - errors: List of error messages reported by the remote API

    Examples:
        CommandResult[Note] - Returns a single Note
        CommandResult[None] - Returns no data (delete)
    """
    status: ResultStatus
    message: str
    data: Optional[T] = None
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if operation was successful"""
        return self.status == ResultStatus.SUCCESS

    @property
    def failed(self) -> bool:
        """Check if operation failed"""
        return self.status == ResultStatus.ERROR

    @classmethod
    def success_result(cls, message: str, data: T = None) -> 'CommandResult[T]':
        """
        Create a success result.

        Args:
            message: Human-readable success message
            data: Result data

        Returns:
            CommandResult[T] with SUCCESS status
        """
        return cls(
            status=ResultStatus.SUCCESS,
            message=message,
            data=data
        )

    @classmethod
    def error_result(cls, message: str, errors: List[str] = None) -> 'CommandResult[T]':
        """
        Create an error result.

        Args:
            message: Human-readable error message
            errors: List of detailed error messages

        Returns:
            CommandResult[T] with ERROR status and no data
        """
        return cls(
            status=ResultStatus.ERROR,
            message=message,
            errors=errors or []
        )
