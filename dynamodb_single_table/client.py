"""
Single-table client.

One object for callers who don't need the read/write split: it owns a
TableGateway and hands it to a RecordReadApi and a RecordWriteApi.
"""

import logging
import os
from typing import Any, List, Mapping, Optional, Union

from .config import DynamoDBConfig
from .core import TableGateway, create_table_gateway
from .handlers import RecordReadApi, RecordWriteApi
from .models import QueryOptions, RecordItem, RecordKeyView

logger = logging.getLogger(__name__)


class SingleTableClient:
    """Put, get, delete and query records of the single table."""

    def __init__(self, config: DynamoDBConfig):
        self.config = config
        self.gateway: TableGateway = create_table_gateway(config)
        self.read_api = RecordReadApi(config, self.gateway)
        self.write_api = RecordWriteApi(config, self.gateway)

    @classmethod
    def from_environment(cls) -> 'SingleTableClient':
        """Build a client from DYNAMODB_TABLE and DYNAMODB_REGION.

        AWS_REGION is used when DYNAMODB_REGION is not set.
        """
        kwargs = {'table_name': os.getenv("DYNAMODB_TABLE", "")}
        region = os.getenv("DYNAMODB_REGION") or os.getenv("AWS_REGION")
        if region:
            kwargs['region_name'] = region
        return cls(DynamoDBConfig(**kwargs))

    @property
    def table(self) -> str:
        """Resolved table name."""
        return self.gateway.table_name

    @property
    def region(self) -> str:
        """Configured region; us-east-1 unless DYNAMODB_REGION or AWS_REGION is set."""
        return self.config.region_name

    @property
    def document_client(self):
        """The boto3 Table resource requests go through."""
        return self.gateway.table

    def put_item(self, item: Union[RecordItem, Mapping[str, Any]]) -> RecordItem:
        return self.write_api.put_item(item)

    def get_item(self, primary_key: str, sort_key: str) -> Optional[RecordItem]:
        return self.read_api.get_item(primary_key, sort_key)

    def delete_item(self, primary_key: str, sort_key: str) -> None:
        self.write_api.delete_item(primary_key, sort_key)

    def soft_delete_item(self, primary_key: str, sort_key: str) -> None:
        self.write_api.soft_delete_item(primary_key, sort_key)

    def query_primary_index(
        self,
        primary_key: str,
        sort_key_begins_with: Optional[str] = None,
        options: Optional[QueryOptions] = None
    ) -> List[Union[RecordItem, RecordKeyView]]:
        return self.read_api.query_primary_index(primary_key, sort_key_begins_with, options)

    def query_secondary_index(
        self,
        secondary_key: str,
        sort_key_begins_with: Optional[str] = None,
        options: Optional[QueryOptions] = None
    ) -> List[Union[RecordItem, RecordKeyView]]:
        return self.read_api.query_secondary_index(secondary_key, sort_key_begins_with, options)
