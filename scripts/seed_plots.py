"""Create the PlotLedger DynamoDB tables and load the bundled demo data.

Usage:
    python scripts/seed_plots.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from plotledger.persistence.dynamodb_backend import user_guard_keys
from plotledger.persistence.fixtures import DEMO_RECORDS, DEMO_USERS

TABLE_DEFINITIONS: list[dict[str, Any]] = [
    {"name": "plotledger-plots", "key": "ID"},
    {"name": "plotledger-users", "key": "id"},
]


def create_tables(ddb: Any, suffix: str = "") -> None:
    """Create the plots and users tables. Skips tables that already exist."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    for defn in TABLE_DEFINITIONS:
        table_name = f"{defn['name']}{suffix}"
        if table_name in existing:
            print(f"  Table {table_name} already exists, skipping")
            continue
        client.create_table(
            TableName=table_name,
            KeySchema=[{"AttributeName": defn["key"], "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": defn["key"], "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"  Created table {table_name}")


def seed_demo_data(ddb: Any, suffix: str = "", records: list[dict[str, Any]] | None = None) -> int:
    """Write plot records (demo records by default) and the demo users. Returns the plot count."""
    records = DEMO_RECORDS if records is None else records

    tbl = ddb.Table(f"plotledger-plots{suffix}")
    with tbl.batch_writer() as batch:
        for record in records:
            # Empty columns are left out, the same as a cleared column.
            batch.put_item(Item={k: str(v) for k, v in record.items() if v not in (None, "")})
    print(f"  Seeded {len(records)} plot records")

    tbl = ddb.Table(f"plotledger-users{suffix}")
    with tbl.batch_writer() as batch:
        for user in DEMO_USERS:
            batch.put_item(Item=dict(user))
            for key in user_guard_keys(user["username"], user.get("email")):
                batch.put_item(Item={"id": key, "user_id": user["id"]})
    print(f"  Seeded {len(DEMO_USERS)} users")
    return len(records)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (LocalStack)")
    parser.add_argument("--region", default="ap-south-1")
    parser.add_argument("--suffix", default="", help='Table suffix, e.g. "-dev"')
    args = parser.parse_args()

    kwargs: dict = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url
    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.suffix)
    print("Seeding data...")
    seed_demo_data(ddb, suffix=args.suffix)
    print("Done.")


if __name__ == "__main__":
    main()
