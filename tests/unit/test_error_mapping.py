"""
Tests for DynamoDB error mapping.

Ensures botocore ClientErrors map to library exceptions with the
original error and context preserved.
"""

import logging

import pytest
from botocore.exceptions import ClientError

from dynamodb_single_table.core.table_gateway import map_dynamodb_error
from dynamodb_single_table.exceptions import (
    ConnectionError, ConflictError, NotFoundError,
    RetryableError, SingleTableError, ValidationError
)


def create_client_error(error_code: str, message: str = "Test error") -> ClientError:
    """Helper to create ClientError for testing."""
    return ClientError(
        error_response={
            'Error': {
                'Code': error_code,
                'Message': message
            }
        },
        operation_name='TestOperation'
    )


class TestConflictErrors:

    def test_conditional_check_failed(self):
        error = create_client_error('ConditionalCheckFailedException', 'The conditional request failed')

        result = map_dynamodb_error(error, 'UpdateItem', 'records', 'user#1/metadata')

        assert isinstance(result, ConflictError)
        assert result.resource_id == 'user#1/metadata'
        assert 'user#1/metadata' in str(result)
        assert 'conditional request failed' in str(result).lower()
        assert result.original_error is error

    def test_transaction_conflict(self):
        result = map_dynamodb_error(create_client_error('TransactionConflictException'), 'PutItem', 'records')

        assert isinstance(result, ConflictError)


class TestNotFoundErrors:

    def test_missing_table(self):
        error = create_client_error('ResourceNotFoundException', 'Requested resource not found')

        result = map_dynamodb_error(error, 'Query', 'records', 'gsi')

        assert isinstance(result, NotFoundError)
        assert result.resource_type == 'table'
        assert result.resource_name == 'records'
        assert 'Query on records (resource: gsi)' in str(result)


class TestValidationErrors:

    @pytest.mark.parametrize("code", [
        'ValidationException',
        'ItemCollectionSizeLimitExceededException',
        'SerializationException',
    ])
    def test_validation_codes(self, code):
        result = map_dynamodb_error(create_client_error(code), 'PutItem', 'records')

        assert isinstance(result, ValidationError)
        assert 'PutItem on records' in str(result)


class TestRetryableErrors:

    @pytest.mark.parametrize("code", [
        'ProvisionedThroughputExceededException',
        'RequestLimitExceeded',
        'ThrottlingException',
        'TooManyRequestsException',
        'InternalServerError',
        'ServiceUnavailable',
        'RequestTimeoutException',
    ])
    def test_retryable_codes(self, code):
        result = map_dynamodb_error(create_client_error(code), 'Query', 'records')

        assert isinstance(result, RetryableError)


class TestConnectionErrors:

    @pytest.mark.parametrize("code", [
        'UnrecognizedClientException',
        'AccessDeniedException',
        'ExpiredTokenException',
        'InvalidSignatureException',
    ])
    def test_auth_codes(self, code):
        result = map_dynamodb_error(create_client_error(code), 'GetItem', 'records')

        assert isinstance(result, ConnectionError)
        assert 'Authentication/authorization failed' in str(result)

    def test_unknown_code_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger='dynamodb_single_table.core.table_gateway'):
            result = map_dynamodb_error(create_client_error('SomethingNew'), 'GetItem', 'records')

        assert isinstance(result, ConnectionError)
        assert "Unknown DynamoDB error code 'SomethingNew'" in caplog.text


class TestExceptionHierarchy:

    @pytest.mark.parametrize("code", [
        'ConditionalCheckFailedException',
        'ResourceNotFoundException',
        'ValidationException',
        'ThrottlingException',
        'AccessDeniedException',
        'SomethingNew',
    ])
    def test_all_mapped_errors_share_base(self, code):
        result = map_dynamodb_error(create_client_error(code), 'GetItem', 'records')

        assert isinstance(result, SingleTableError)

    def test_repr_and_context(self):
        error = ConflictError("Conflict", resource_id="a/b")

        assert str(error) == "Conflict (Context: resource_id=a/b)"
        assert repr(error) == "ConflictError(message='Conflict', original_error=None, context={'resource_id': 'a/b'})"
