"""
Record and query option models.

Every record in the table shares one key layout:

- ``ppk`` / ``psk``: primary partition and sort key (table key schema)
- ``spk`` / ``ssk``: secondary partition and sort key (keys of the ``gsi`` index)
- ``isDeleted``: soft-delete marker honoured by all read paths

Anything else on a record is payload and is stored as-is.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from ..exceptions import ValidationError
from ..utils import to_dynamodb_value

logger = logging.getLogger(__name__)

PRIMARY_PARTITION_KEY = "ppk"
PRIMARY_SORT_KEY = "psk"
SECONDARY_PARTITION_KEY = "spk"
SECONDARY_SORT_KEY = "ssk"
SOFT_DELETE_ATTRIBUTE = "isDeleted"

# Validation context flag for items read back from the table
STORED_ITEM = "stored_item"


class RecordItem(BaseModel):
    """A single item of the table: key attributes plus arbitrary payload."""

    ppk: str = Field(..., min_length=1, description="Primary partition key")
    psk: str = Field(..., min_length=1, description="Primary sort key")
    spk: Optional[Any] = Field(None, description="Secondary partition key")
    ssk: Optional[Any] = Field(None, description="Secondary sort key")
    is_deleted: Optional[Any] = Field(
        None,
        alias=SOFT_DELETE_ATTRIBUTE,
        description="Soft-delete marker; True hides the record from reads"
    )

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def check_write_rules(self, info: ValidationInfo):
        """
        Enforce the write-side key and marker rules.

        Records built by callers must carry non-empty string secondary keys
        and a boolean isDeleted. Items read back from the table skip these
        checks: whatever another writer stored is returned as-is, and only
        a boolean True marker hides a record.
        """
        if info.context and info.context.get(STORED_ITEM):
            return self

        for name in (SECONDARY_PARTITION_KEY, SECONDARY_SORT_KEY):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, str) or not value):
                raise ValueError(f"{name} must be a non-empty string")

        if self.is_deleted is not None and not isinstance(self.is_deleted, bool):
            raise ValueError(f"{SOFT_DELETE_ATTRIBUTE} must be a boolean")

        return self

    @property
    def payload(self) -> Dict[str, Any]:
        """Attributes that are not part of the key layout."""
        return dict(self.model_extra or {})

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Convert the record to an item ready for ``Table.put_item``.

        Attribute names use their stored form (``isDeleted``), ``None`` values
        are dropped and floats become ``Decimal``. Booleans are kept native so
        ``isDeleted`` is stored as a DynamoDB BOOL.
        """
        return to_dynamodb_value(self.model_dump(by_alias=True, exclude_none=True))

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]) -> 'RecordItem':
        """
        Create a record from a raw DynamoDB item.

        Raises:
            ValidationError: If the item lacks its primary key attributes
        """
        try:
            return cls.model_validate(item, context={STORED_ITEM: True})
        except Exception as e:
            raise ValidationError(f"Failed to convert DynamoDB item to {cls.__name__}: {e}", original_error=e) from e


class QueryOptions(BaseModel):
    """Optional knobs for index queries."""

    limit: Optional[int] = Field(None, ge=1, description="Maximum number of items DynamoDB evaluates")
    pk_only: bool = Field(
        False,
        alias="pkOnly",
        description="Project only the queried partition key attribute"
    )

    model_config = ConfigDict(populate_by_name=True)
