#!/usr/bin/env python3
"""
Basic usage of the single-table helpers.

1. Configure the table from the environment (or DynamoDB Local)
2. Put records with keys for both indexes
3. Get, query and soft delete them
"""

from dynamodb_single_table import (
    DynamoDBConfig,
    QueryOptions,
    RecordItem,
    RecordReadApi,
    RecordWriteApi,
    SingleTableClient,
)


def main():
    """Walk through the record operations."""

    print("1. Setting up configuration...")
    config = DynamoDBConfig.from_env()  # DYNAMODB_TABLE, DYNAMODB_REGION, ...

    # For DynamoDB Local:
    # config = DynamoDBConfig.for_local_development("records")

    client = SingleTableClient(config)
    print(f"   table={client.table} region={client.region}")

    print("2. Writing records...")
    client.put_item(RecordItem(
        ppk="user#1",
        psk="metadata",
        spk="tenant#acme",
        ssk="user#1",
        name="Ada Lovelace",
    ))
    for order_id in ("001", "002", "003"):
        client.put_item({"ppk": "user#1", "psk": f"order#{order_id}", "total": 19.99})

    print("3. Reading records...")
    user = client.get_item("user#1", "metadata")
    print(f"   user: {user.payload if user else None}")

    orders = client.query_primary_index("user#1", "order#", QueryOptions(limit=10))
    print(f"   orders: {[order.psk for order in orders]}")

    members = client.query_secondary_index("tenant#acme", options=QueryOptions(pk_only=True))
    print(f"   tenant members: {len(members)}")

    print("4. Soft deleting an order...")
    client.soft_delete_item("user#1", "order#002")
    orders = client.query_primary_index("user#1", "order#")
    print(f"   visible orders: {[order.psk for order in orders]}")

    print("5. Using the read/write APIs directly...")
    read_api = RecordReadApi(config)
    write_api = RecordWriteApi(config)
    write_api.delete_item("user#1", "order#003")
    print(f"   order#003 after delete: {read_api.get_item('user#1', 'order#003')}")


if __name__ == "__main__":
    main()
