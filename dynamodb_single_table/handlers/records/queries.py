"""
Record Read API

Read operations over the single table:
- GetItem on the primary key (ppk, psk)
- Query on the primary index by ppk, optionally by psk prefix
- Query on the secondary index by spk, optionally by ssk prefix

Every read hides records whose ``isDeleted`` marker is True.
"""

import logging
from typing import List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ...config import DynamoDBConfig
from ...core import TableGateway, create_table_gateway
from ...exceptions import ConnectionError, SingleTableError, ValidationError
from ...models import (
    PRIMARY_PARTITION_KEY,
    PRIMARY_SORT_KEY,
    SECONDARY_PARTITION_KEY,
    SECONDARY_SORT_KEY,
    SOFT_DELETE_ATTRIBUTE,
    QueryOptions,
    RecordItem,
    RecordKeyView,
)
from ...utils import build_key_condition_expression, filter_deleted_items, require_key

logger = logging.getLogger(__name__)


class RecordReadApi:
    """
    Read-only API for records.

    Query results are filtered client-side after DynamoDB returns them, so a
    ``limit`` caps the items evaluated, not the items returned.
    """

    def __init__(self, config: DynamoDBConfig, gateway: Optional[TableGateway] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.gateway = gateway or create_table_gateway(config)

    def get_item(self, primary_key: str, sort_key: str) -> Optional[RecordItem]:
        """
        Get a record by its primary key.

        DynamoDB Operation: GetItem with Key={ppk, psk}

        Returns:
            RecordItem if found and not soft-deleted, None otherwise
        """
        require_key("primary_key", primary_key)
        require_key("sort_key", sort_key)

        key = {PRIMARY_PARTITION_KEY: primary_key, PRIMARY_SORT_KEY: sort_key}

        try:
            item = self.gateway.get_item(key)
        except SingleTableError:
            raise
        except Exception as e:
            logger.error(f"Error in get_item: {e}")
            raise ConnectionError(f"Failed to get record {primary_key}/{sort_key}: {e}", e) from e

        item = filter_deleted_items(item)
        if item is None:
            return None

        try:
            return RecordItem.from_dynamodb_item(item)
        except ValidationError as e:
            logger.error(f"Unreadable record {primary_key}/{sort_key}: {e}")
            raise

    def query_primary_index(
        self,
        primary_key: str,
        sort_key_begins_with: Optional[str] = None,
        options: Optional[QueryOptions] = None
    ) -> List[Union[RecordItem, RecordKeyView]]:
        """
        Query records sharing a primary partition key.

        DynamoDB Operation: Query on the table key schema
        Key condition: ppk = :ppk [and begins_with(psk, :psk)]

        Args:
            primary_key: Primary partition key value
            sort_key_begins_with: Prefix the primary sort key must start with
            options: Limit and pk_only projection

        Returns:
            Non-deleted records in sort key order (RecordKeyView when pk_only)
        """
        require_key("primary_key", primary_key)

        return self._query(
            PRIMARY_PARTITION_KEY,
            primary_key,
            PRIMARY_SORT_KEY,
            sort_key_begins_with,
            options
        )

    def query_secondary_index(
        self,
        secondary_key: str,
        sort_key_begins_with: Optional[str] = None,
        options: Optional[QueryOptions] = None
    ) -> List[Union[RecordItem, RecordKeyView]]:
        """
        Query records sharing a secondary partition key.

        DynamoDB Operation: Query on the secondary index (``gsi`` by default)
        Key condition: spk = :spk [and begins_with(ssk, :ssk)]

        Args:
            secondary_key: Secondary partition key value
            sort_key_begins_with: Prefix the secondary sort key must start with
            options: Limit and pk_only projection

        Returns:
            Non-deleted records in secondary sort key order (RecordKeyView when pk_only)
        """
        require_key("secondary_key", secondary_key)

        return self._query(
            SECONDARY_PARTITION_KEY,
            secondary_key,
            SECONDARY_SORT_KEY,
            sort_key_begins_with,
            options,
            index_name=self.config.secondary_index_name
        )

    def _query(
        self,
        partition_attr: str,
        partition_value: str,
        sort_attr: str,
        sort_prefix: Optional[str],
        options: Optional[QueryOptions],
        index_name: Optional[str] = None
    ) -> List[Union[RecordItem, RecordKeyView]]:
        key_condition, values = build_key_condition_expression(
            partition_attr, partition_value, sort_attr, sort_prefix
        )

        query_kwargs = {
            'KeyConditionExpression': key_condition,
            'ExpressionAttributeValues': values,
        }
        if index_name:
            query_kwargs['IndexName'] = index_name

        if options is not None:
            if options.pk_only:
                # isDeleted rides along so the soft-delete filter still applies
                query_kwargs['ProjectionExpression'] = f"{partition_attr}, {SOFT_DELETE_ATTRIBUTE}"
            if options.limit is not None:
                query_kwargs['Limit'] = options.limit

        try:
            response = self.gateway.query(**query_kwargs)
        except SingleTableError:
            raise
        except Exception as e:
            logger.error(f"Error querying {index_name or 'primary index'}: {e}")
            raise ConnectionError(f"Failed to query {partition_attr}={partition_value}: {e}", e) from e

        items = filter_deleted_items(response.get('Items') or [])
        logger.debug(
            f"Query '{key_condition}' on {index_name or 'primary index'} "
            f"returned {len(items)} visible item(s)"
        )

        view_class = RecordKeyView if options is not None and options.pk_only else RecordItem
        return self._to_models(items, view_class)

    def _to_models(self, items, view_class) -> List[Union[RecordItem, RecordKeyView]]:
        """Build models item by item; an unreadable item is skipped, not fatal."""
        models = []
        for item in items:
            try:
                if view_class is RecordItem:
                    models.append(RecordItem.from_dynamodb_item(item))
                else:
                    models.append(view_class.model_validate(item))
            except (ValidationError, PydanticValidationError) as e:
                logger.warning(f"Skipping unreadable item {item.get(PRIMARY_PARTITION_KEY)!r}: {e}")
        return models
