"""
Record Write API

Write operations over the single table:
- PutItem of a full record (keys plus payload)
- DeleteItem by primary key (physical removal)
- UpdateItem setting the soft-delete marker on an existing record
"""

import logging
from typing import Any, Mapping, Optional, Union

from boto3.dynamodb.conditions import Attr

from ...config import DynamoDBConfig
from ...core import TableGateway, create_table_gateway
from ...exceptions import (
    ConflictError,
    ConnectionError,
    ItemNotFoundError,
    SingleTableError,
    ValidationError,
)
from ...models import PRIMARY_PARTITION_KEY, PRIMARY_SORT_KEY, SOFT_DELETE_ATTRIBUTE, RecordItem
from ...utils import require_key

logger = logging.getLogger(__name__)


class RecordWriteApi:
    """
    Write-only API for records.

    Writes are unconditional except for soft deletes, which require the
    record to exist.
    """

    def __init__(self, config: DynamoDBConfig, gateway: Optional[TableGateway] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.gateway = gateway or create_table_gateway(config)

    def put_item(self, item: Union[RecordItem, Mapping[str, Any]]) -> RecordItem:
        """
        Store a record, replacing any record with the same primary key.

        DynamoDB Operation: PutItem

        Args:
            item: RecordItem, or a mapping validated into one

        Returns:
            The stored RecordItem

        Raises:
            ValidationError: Missing/empty keys or invalid isDeleted marker
        """
        # Records read back from the table skipped write validation
        data = item.model_dump(by_alias=True) if isinstance(item, RecordItem) else dict(item)
        try:
            record = RecordItem.model_validate(data)
        except Exception as e:
            raise ValidationError(f"Invalid record: {e}", original_error=e) from e
        if not isinstance(item, RecordItem):
            item = record

        try:
            self.gateway.put_item(record.to_dynamodb_item())
        except SingleTableError:
            raise
        except Exception as e:
            logger.error(f"Error in put_item: {e}")
            raise ConnectionError(f"Failed to put record {item.ppk}/{item.psk}: {e}", e) from e

        return item

    def delete_item(self, primary_key: str, sort_key: str) -> None:
        """
        Physically delete a record by its primary key.

        DynamoDB Operation: DeleteItem with Key={ppk, psk}. Deleting a record
        that does not exist is not an error.
        """
        require_key("primary_key", primary_key)
        require_key("sort_key", sort_key)

        key = {PRIMARY_PARTITION_KEY: primary_key, PRIMARY_SORT_KEY: sort_key}

        try:
            self.gateway.delete_item(key)
        except SingleTableError:
            raise
        except Exception as e:
            logger.error(f"Error in delete_item: {e}")
            raise ConnectionError(f"Failed to delete record {primary_key}/{sort_key}: {e}", e) from e

    def soft_delete_item(self, primary_key: str, sort_key: str) -> None:
        """
        Flag a record as deleted without removing it.

        DynamoDB Operation: UpdateItem SET isDeleted = true
        Condition: attribute_exists(ppk)

        Raises:
            ItemNotFoundError: No record with this primary key exists
        """
        require_key("primary_key", primary_key)
        require_key("sort_key", sort_key)

        key = {PRIMARY_PARTITION_KEY: primary_key, PRIMARY_SORT_KEY: sort_key}

        try:
            self.gateway.update_item(
                key=key,
                update_expression=f"SET {SOFT_DELETE_ATTRIBUTE} = :deleted",
                expression_attribute_values={':deleted': True},
                condition_expression=Attr(PRIMARY_PARTITION_KEY).exists()
            )
        except ConflictError as e:
            raise ItemNotFoundError(self.gateway.table_name, key, original_error=e) from e
        except SingleTableError:
            raise
        except Exception as e:
            logger.error(f"Error in soft_delete_item: {e}")
            raise ConnectionError(f"Failed to soft delete record {primary_key}/{sort_key}: {e}", e) from e
