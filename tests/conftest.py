"""
Test configuration and fixtures for the single-table library.

Provides a test configuration and a moto-backed table with the
ppk/psk key schema and a ``gsi`` index over spk/ssk.
"""

import sys
from pathlib import Path

# Add project root to path so we can import dynamodb_single_table
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from dynamodb_single_table import DynamoDBConfig

TEST_TABLE = "records"


@pytest.fixture
def mock_config():
    """Configuration for tests that never reach AWS."""
    return DynamoDBConfig(
        table_name=TEST_TABLE,
        region_name="us-east-1",
        table_prefix="",
        endpoint_url=None,
        aws_access_key_id="fake_key",
        aws_secret_access_key="fake_secret"
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def records_table(mock_dynamodb_resource):
    """Create the single table with its secondary index."""
    table = mock_dynamodb_resource.create_table(
        TableName=TEST_TABLE,
        KeySchema=[
            {'AttributeName': 'ppk', 'KeyType': 'HASH'},
            {'AttributeName': 'psk', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'ppk', 'AttributeType': 'S'},
            {'AttributeName': 'psk', 'AttributeType': 'S'},
            {'AttributeName': 'spk', 'AttributeType': 'S'},
            {'AttributeName': 'ssk', 'AttributeType': 'S'}
        ],
        GlobalSecondaryIndexes=[
            {
                'IndexName': 'gsi',
                'KeySchema': [
                    {'AttributeName': 'spk', 'KeyType': 'HASH'},
                    {'AttributeName': 'ssk', 'KeyType': 'RANGE'}
                ],
                'Projection': {'ProjectionType': 'ALL'}
            }
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    return table
