"""
Single-table helper utilities.

- Key argument validation and key condition building for index queries
- Soft-delete filtering of read results
- Value conversion for writes (float -> Decimal)
- Logging setup driven by configuration
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "dynamodb_single_table"


# =============================================================================
# Logging
# =============================================================================

def configure_logging(config) -> None:
    """Raise the package logger to DEBUG when the config asks for it."""
    if getattr(config, 'enable_debug_logging', False):
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)


# =============================================================================
# Serialization
# =============================================================================

def to_dynamodb_value(obj: Any) -> Any:
    """Recursively convert floats to Decimal so boto3 can serialize them.

    Args:
        obj: Value, dict or list to convert

    Returns:
        Same structure with every float replaced by an equivalent Decimal
    """
    if isinstance(obj, dict):
        return {k: to_dynamodb_value(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [to_dynamodb_value(v) for v in obj]
    elif isinstance(obj, bool):
        return obj
    elif isinstance(obj, float):
        # str() keeps the shortest repr, Decimal(float) would not
        return Decimal(str(obj))
    return obj


# =============================================================================
# Query Building
# =============================================================================

def require_key(name: str, value: Any) -> None:
    """Reject key arguments that are not non-empty strings."""
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{name} must be a non-empty string", {name: value})


def build_key_condition_expression(
    partition_attr: str,
    partition_value: Any,
    sort_attr: Optional[str] = None,
    sort_prefix: Optional[str] = None
) -> Tuple[str, Dict[str, Any]]:
    """Build a KeyConditionExpression string with its attribute values.

    The partition key is matched with equality. The sort key is matched by
    prefix only when a non-empty prefix is given.

    Args:
        partition_attr: Partition key attribute name ('ppk' or 'spk')
        partition_value: Partition key value
        sort_attr: Sort key attribute name ('psk' or 'ssk')
        sort_prefix: Required prefix of the sort key, ignored when None or ''

    Returns:
        Tuple of (KeyConditionExpression, ExpressionAttributeValues)

    Example:
        >>> build_key_condition_expression('ppk', 'user#1', 'psk', 'order#')
        ('ppk = :ppk and begins_with(psk, :psk)', {':ppk': 'user#1', ':psk': 'order#'})
    """
    expression = f"{partition_attr} = :{partition_attr}"
    values = {f":{partition_attr}": partition_value}

    if sort_attr and sort_prefix is not None and sort_prefix != "":
        expression += f" and begins_with({sort_attr}, :{sort_attr})"
        values[f":{sort_attr}"] = sort_prefix

    return expression, values


# =============================================================================
# Soft Delete Filtering
# =============================================================================

def is_soft_deleted(item: Any) -> bool:
    """True only when the item's isDeleted marker is the boolean True."""
    if item is None:
        return False
    if isinstance(item, Mapping):
        marker = item.get('isDeleted')
    else:
        marker = getattr(item, 'is_deleted', None)
    return marker is True


def filter_deleted_items(items: Union[None, Any, List[Any]]) -> Union[None, Any, List[Any]]:
    """Hide soft-deleted records.

    A list is filtered in order. A single item is returned unchanged, or
    None when it is soft-deleted.
    """
    if isinstance(items, list):
        return [item for item in items if not is_soft_deleted(item)]

    if is_soft_deleted(items):
        return None
    return items
