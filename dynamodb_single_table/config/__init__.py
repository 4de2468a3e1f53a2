from .config import DEFAULT_SECONDARY_INDEX, DynamoDBConfig

__all__ = [
    "DEFAULT_SECONDARY_INDEX",
    "DynamoDBConfig",
]
