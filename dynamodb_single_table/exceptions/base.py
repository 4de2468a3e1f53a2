from typing import Any, Dict, Optional


class SingleTableError(Exception):
    """Base exception for all single-table library errors.

    Attributes:
        message: Human-readable error message
        original_error: The botocore/pydantic exception behind this error (if any)
        context: Table, key or index details describing where the error happened
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The underlying exception, kept for callers that need the raw response
            context: Details such as table_name, key or resource_id
        """
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message followed by its context, e.g. ``... (Context: table_name=records)``."""
        error_str = self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            error_str += f" (Context: {context_str})"
        return error_str

    def __repr__(self) -> str:
        """Return detailed string representation of the error."""
        return f"{self.__class__.__name__}(message={self.message!r}, original_error={self.original_error!r}, context={self.context!r})"
