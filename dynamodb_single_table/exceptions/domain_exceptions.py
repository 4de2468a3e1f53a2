"""
Exceptions raised by the single-table helpers.

Grouped by what went wrong:
1. Bad input (keys, records, query options)
2. Missing items or table resources
3. Conditional write conflicts
4. Connectivity and throttling
"""

from typing import Any, Dict, Optional

from .base import SingleTableError


# =============================================================================
# Input Validation Errors
# =============================================================================

class ValidationError(SingleTableError):
    """Raised when a record, key or query option is invalid.

    Also used for DynamoDB ``ValidationException`` responses.
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Not Found Errors
# =============================================================================

class ItemNotFoundError(SingleTableError):
    """Raised when a write expects an existing item and there is none."""

    def __init__(self, table_name: str, key: dict, original_error: Optional[Exception] = None):
        self.table_name = table_name
        self.key = key
        message = f"Item not found in table '{table_name}' with key: {key}"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, original_error, context)


class NotFoundError(SingleTableError):
    """Raised when the table or the secondary index does not exist."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


# =============================================================================
# Conflict Errors
# =============================================================================

class ConflictError(SingleTableError):
    """Raised when a conditional write fails."""

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure Errors
# =============================================================================

class ConnectionError(SingleTableError):
    """Raised when DynamoDB cannot be reached or refuses the credentials."""

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(SingleTableError):
    """Raised for throttling and transient service failures.

    botocore has already spent its configured retries when this surfaces;
    callers decide whether to try again.
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
