"""
Record CQRS APIs

Queries (read operations):
- GetItem on the primary key
- Prefix queries on the primary and secondary index
- Soft-deleted records are never returned

Commands (write operations):
- Put, physical delete and soft delete

Usage:
    read_api = RecordReadApi(config)
    write_api = RecordWriteApi(config)
"""

from .queries import RecordReadApi
from .commands import RecordWriteApi

__all__ = [
    "RecordReadApi",
    "RecordWriteApi",
]
