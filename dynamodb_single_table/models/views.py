"""
Read-side views for projected queries.

A ``pk_only`` query returns just the queried partition key, which is not
enough to build a full RecordItem.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class RecordKeyView(BaseModel):
    """Partition key of a record returned by a ``pk_only`` query."""

    ppk: Optional[str] = None
    spk: Optional[str] = None

    model_config = ConfigDict(extra="ignore")
