"""
Custom Exceptions for University Matcher

Hierarchical exception classes for proper error handling across layers.
"""

from pathlib import Path
from typing import Optional, Dict, Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    from university_matcher.domain.scoring.interfaces import FieldError


class UniversityMatcherError(Exception):
    """Base exception for all University Matcher errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for callers that render errors."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(UniversityMatcherError):
    """Raised when input validation fails."""
    pass


class ProfileValidationError(ValidationError):
    """
    Raised when a student profile fails one or more field checks.

    Carries every failing field so the caller can show all of them at once.
    No matches are computed when this is raised.
    """

    def __init__(self, errors: List["FieldError"]):
        self.errors = list(errors)
        fields = [error.field for error in self.errors]
        message = "; ".join(error.message for error in self.errors) or "Invalid profile"
        super().__init__(
            message,
            details={
                "fields": fields,
                "errors": [error.to_dict() for error in self.errors],
            },
        )

    @property
    def messages(self) -> List[str]:
        """Human readable messages, one per failing field."""
        return [error.message for error in self.errors]


class CatalogError(UniversityMatcherError):
    """Raised when the bundled catalog or majors list cannot be loaded."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details, original_error)

