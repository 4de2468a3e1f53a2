"""
Thin DynamoDB Table Gateway

A lightweight wrapper around the boto3 ``Table`` resource of the single table.
The gateway:

1. Creates the boto3 session, resource and ``Table`` handle lazily
2. Passes request parameters through unchanged
3. Maps botocore ``ClientError`` to library exceptions

Request building and soft-delete filtering live in the read/write APIs;
the gateway knows nothing about the record layout beyond logging keys.
"""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ..config import DynamoDBConfig
from ..exceptions import (
    ConnectionError,
    ConflictError,
    NotFoundError,
    ValidationError,
    RetryableError
)
from ..utils import configure_logging

logger = logging.getLogger(__name__)


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map DynamoDB ClientError to library exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "GetItem", "Query")
        table_name: The DynamoDB table name
        resource_id: Optional record identifier for context

    Returns:
        ConflictError: For conditional check and transaction conflicts
        NotFoundError: For a missing table or index
        ValidationError: For rejected requests
        RetryableError: For throttling and transient service failures
        ConnectionError: For auth failures and anything unrecognised
    """
    error_code = error.response.get('Error', {}).get('Code', 'Unknown')
    error_message = error.response.get('Error', {}).get('Message', str(error))

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ConditionalCheckFailedException':
        return ConflictError(f"Conditional check failed - {full_message}", resource_id, original_error=error)

    elif error_code in ['TransactionConflictException', 'ResourceInUseException']:
        return ConflictError(f"Conflict - {full_message}", resource_id, original_error=error)

    elif error_code == 'ResourceNotFoundException':
        return NotFoundError(
            f"Table or index not found - {full_message}",
            resource_type='table',
            resource_name=table_name,
            original_error=error
        )

    elif error_code in ['ValidationException', 'ItemCollectionSizeLimitExceededException',
                        'SerializationException']:
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code in [
        'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
        'ThrottlingException', 'TooManyRequestsException'
    ]:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in [
        'InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException',
        'RequestTimeoutException'
    ]:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in [
        'UnrecognizedClientException', 'AccessDeniedException',
        'ExpiredTokenException', 'InvalidSignatureException'
    ]:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


def _key_id(key: Dict[str, Any]) -> Optional[str]:
    """Render a ppk/psk key as 'ppk/psk' for error context."""
    if not key:
        return None
    parts = [str(key[name]) for name in ('ppk', 'psk') if key.get(name) is not None]
    return "/".join(parts) or None


class TableGateway:
    """
    Thin gateway for operations on the single table.

    Used by the record read/write APIs rather than directly by clients.
    """

    def __init__(self, config: DynamoDBConfig, table_name: str):
        """Initialize table gateway.

        Args:
            config: DynamoDB configuration
            table_name: Fully resolved name of the DynamoDB table
        """
        self.config = config
        self.table_name = table_name
        self._dynamodb = None
        self._table = None
        configure_logging(config)

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    region_name=self.config.region_name
                )

                dynamodb_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                dynamodb_config['config'] = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )

                self._dynamodb = session.resource('dynamodb', **dynamodb_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e
        return self._dynamodb

    @property
    def table(self):
        """boto3 ``Table`` resource for the configured table."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except ConnectionError:
                raise
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise ConnectionError(f"Failed to access table '{self.table_name}': {e}", e) from e
        return self._table

    def get_item(self, key: Dict[str, Any], **kwargs) -> Optional[Dict[str, Any]]:
        """
        Fetch a single item by its primary key.

        Args:
            key: Primary key of the item
            **kwargs: Extra boto3 get_item parameters (e.g. ConsistentRead)

        Returns:
            The raw item, or None when it does not exist
        """
        try:
            response = self.table.get_item(Key=key, **kwargs)
            return response.get('Item')
        except ClientError as e:
            logger.error(f"GetItem failed on {self.table_name}: {e}")
            raise map_dynamodb_error(e, "GetItem", self.table_name, _key_id(key)) from e

    def query(self, **kwargs) -> Dict[str, Any]:
        """
        Execute DynamoDB Query operation.

        Raw pass-through to boto3 with error handling.

        Example:
            response = gateway.query(
                IndexName='gsi',
                KeyConditionExpression='spk = :spk',
                ExpressionAttributeValues={':spk': 'tenant#1'},
                Limit=50
            )
        """
        try:
            return self.table.query(**kwargs)
        except ClientError as e:
            logger.error(f"Query failed on {self.table_name}: {e}")
            raise map_dynamodb_error(e, "Query", self.table_name, kwargs.get('IndexName')) from e

    def put_item(self, item: Dict[str, Any], condition_expression=None) -> None:
        """
        Put item into the table.

        Args:
            item: Item to store
            condition_expression: Optional condition for put operation
        """
        try:
            put_kwargs = {'Item': item}
            if condition_expression is not None:
                put_kwargs['ConditionExpression'] = condition_expression

            self.table.put_item(**put_kwargs)
            logger.info(f"Put item in {self.table_name}: {_key_id(item)}")
        except ClientError as e:
            logger.error(f"PutItem failed on {self.table_name}: {e}")
            raise map_dynamodb_error(e, "PutItem", self.table_name, _key_id(item)) from e

    def update_item(
        self,
        key: Dict[str, Any],
        update_expression: str,
        expression_attribute_values: Optional[Dict[str, Any]] = None,
        expression_attribute_names: Optional[Dict[str, str]] = None,
        condition_expression=None,
        return_values: str = 'NONE'
    ) -> Optional[Dict[str, Any]]:
        """
        Update item in the table.

        Returns:
            Updated attributes if return_values != 'NONE'
        """
        try:
            update_kwargs = {
                'Key': key,
                'UpdateExpression': update_expression,
                'ReturnValues': return_values
            }

            if expression_attribute_values:
                update_kwargs['ExpressionAttributeValues'] = expression_attribute_values
            if expression_attribute_names:
                update_kwargs['ExpressionAttributeNames'] = expression_attribute_names
            if condition_expression is not None:
                update_kwargs['ConditionExpression'] = condition_expression

            response = self.table.update_item(**update_kwargs)
            logger.info(f"Updated item in {self.table_name}: {_key_id(key)}")

            return response.get('Attributes') if return_values != 'NONE' else None

        except ClientError as e:
            logger.error(f"UpdateItem failed on {self.table_name}: {e}")
            raise map_dynamodb_error(e, "UpdateItem", self.table_name, _key_id(key)) from e

    def delete_item(
        self,
        key: Dict[str, Any],
        condition_expression=None,
        return_values: str = 'NONE'
    ) -> Optional[Dict[str, Any]]:
        """
        Delete item from the table.

        Returns:
            Deleted attributes if return_values != 'NONE'
        """
        try:
            delete_kwargs = {
                'Key': key,
                'ReturnValues': return_values
            }

            if condition_expression is not None:
                delete_kwargs['ConditionExpression'] = condition_expression

            response = self.table.delete_item(**delete_kwargs)
            logger.info(f"Deleted item from {self.table_name}: {_key_id(key)}")

            return response.get('Attributes') if return_values != 'NONE' else None

        except ClientError as e:
            logger.error(f"DeleteItem failed on {self.table_name}: {e}")
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, _key_id(key)) from e


def create_table_gateway(config: DynamoDBConfig, table_name: Optional[str] = None) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: DynamoDB configuration
        table_name: Base table name (defaults to ``config.table_name``)

    Returns:
        Configured TableGateway instance
    """
    full_table_name = config.get_table_name(table_name)
    return TableGateway(config, full_table_name)
