from .record import (
    PRIMARY_PARTITION_KEY,
    PRIMARY_SORT_KEY,
    SECONDARY_PARTITION_KEY,
    SECONDARY_SORT_KEY,
    SOFT_DELETE_ATTRIBUTE,
    QueryOptions,
    RecordItem,
)
from .views import RecordKeyView

__all__ = [
    # Key layout
    "PRIMARY_PARTITION_KEY",
    "PRIMARY_SORT_KEY",
    "SECONDARY_PARTITION_KEY",
    "SECONDARY_SORT_KEY",
    "SOFT_DELETE_ATTRIBUTE",

    # Models
    "QueryOptions",
    "RecordItem",
    "RecordKeyView",
]
