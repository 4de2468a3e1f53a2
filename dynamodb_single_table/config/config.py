import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()

DEFAULT_SECONDARY_INDEX = "gsi"


def _region_from_env() -> str:
    return os.getenv("DYNAMODB_REGION") or os.getenv("AWS_REGION") or "us-east-1"


class DynamoDBConfig(BaseModel):
    """Configuration for the single DynamoDB table and its connection."""

    table_name: str = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TABLE", ""),
        description="Name of the single table all records live in"
    )

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    region_name: str = Field(
        default_factory=_region_from_env,
        description="AWS region name"
    )

    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    table_prefix: str = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TABLE_PREFIX", ""),
        description="Prefix to add to the table name"
    )

    secondary_index_name: str = Field(
        default_factory=lambda: os.getenv("DYNAMODB_SECONDARY_INDEX", DEFAULT_SECONDARY_INDEX),
        description="Name of the GSI keyed on spk/ssk"
    )

    # Passed straight to botocore
    max_pool_connections: int = Field(
        default=50,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of retry attempts botocore makes for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('max_pool_connections', 'retries')
    @classmethod
    def validate_positive_int(cls, v, info):
        if v < 1:
            raise ValueError(f"{info.field_name} must be at least 1")
        return v

    @field_validator('timeout_seconds')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("timeout_seconds must be positive")
        return v

    @field_validator('secondary_index_name')
    @classmethod
    def validate_index_name(cls, v):
        if not v:
            raise ValueError("Secondary index name is required")
        return v

    def get_table_name(self, base_name: Optional[str] = None) -> str:
        """Get the full table name with prefix.

        Args:
            base_name: Table name to resolve (defaults to ``table_name``)

        Returns:
            ``<prefix>_<name>`` when a prefix is configured, the bare name otherwise
        """
        name = self.table_name if base_name is None else base_name

        if self.table_prefix and name:
            return f"{self.table_prefix}_{name}"
        return name

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Create configuration from environment variables."""
        return cls()

    @classmethod
    def for_local_development(cls, table_name: str) -> 'DynamoDBConfig':
        """Create configuration for DynamoDB Local on port 8000."""
        return cls(
            table_name=table_name,
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            table_prefix="",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
