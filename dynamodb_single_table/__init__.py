"""
DynamoDB Single Table

Access helpers for a single DynamoDB table with a fixed key layout
(ppk/psk on the table, spk/ssk on the ``gsi`` index) and soft deletes,
built on boto3 and Pydantic.
"""

from .config import DynamoDBConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    ItemNotFoundError,
    NotFoundError,
    RetryableError,
    SingleTableError,
    ValidationError,
)
from .models import (
    QueryOptions,
    RecordItem,
    RecordKeyView,
)
from .core import (
    TableGateway,
    create_table_gateway,
)
from .handlers import (
    RecordReadApi,
    RecordWriteApi,
)
from .client import SingleTableClient
from .utils import filter_deleted_items, build_key_condition_expression

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "ConflictError",
    "ConnectionError",
    "ItemNotFoundError",
    "NotFoundError",
    "RetryableError",
    "SingleTableError",
    "ValidationError",

    # Models
    "QueryOptions",
    "RecordItem",
    "RecordKeyView",

    # TableGateway architecture
    "TableGateway",
    "create_table_gateway",

    # CQRS APIs
    "RecordReadApi",
    "RecordWriteApi",

    # Facade
    "SingleTableClient",

    # Helpers
    "build_key_condition_expression",
    "filter_deleted_items",
]
