"""
Core infrastructure for DynamoDB operations.

- TableGateway: Thin wrapper over the boto3 Table resource
- create_table_gateway: Factory resolving the configured table name
"""

from .table_gateway import TableGateway, create_table_gateway, map_dynamodb_error

__all__ = [
    "TableGateway",
    "create_table_gateway",
    "map_dynamodb_error",
]
