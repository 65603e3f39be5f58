"""
DynamoDB single-table client.

All trip data lives in one table keyed by PK/SK strings. Points at DynamoDB
Local when an endpoint URL is configured (DYNAMODB_ENDPOINT), at AWS
otherwise.
"""

from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from wayfarer.utils.logging import get_logger

logger = get_logger(__name__)

KEY_SCHEMA = [
    {"AttributeName": "PK", "KeyType": "HASH"},
    {"AttributeName": "SK", "KeyType": "RANGE"},
]


def _key(pk: str, sk: str) -> dict[str, str]:
    return {"PK": pk, "SK": sk}


class DynamoDBClient:
    """Thin wrapper over a boto3 Table for PK/SK items."""

    def __init__(
        self,
        table_name: str,
        region: str = "ap-northeast-1",
        endpoint_url: str | None = None,
    ):
        self.table_name = table_name
        resource_kwargs: dict[str, Any] = {"region_name": region}
        if endpoint_url:
            resource_kwargs["endpoint_url"] = endpoint_url
            logger.info(f"Using DynamoDB Local at {endpoint_url}")

        self.table = boto3.resource("dynamodb", **resource_kwargs).Table(table_name)

    def put_item(self, item: dict[str, Any]) -> None:
        self.table.put_item(Item=item)

    def query(self, pk: str, sk_prefix: str | None = None) -> list[dict[str, Any]]:
        """Return the items of one partition, following pagination."""
        condition = Key("PK").eq(pk)
        if sk_prefix:
            condition &= Key("SK").begins_with(sk_prefix)

        request: dict[str, Any] = {"KeyConditionExpression": condition}
        items: list[dict[str, Any]] = []
        while True:
            page = self.table.query(**request)
            items.extend(page.get("Items", []))
            last_key = page.get("LastEvaluatedKey")
            if not last_key:
                return items
            request["ExclusiveStartKey"] = last_key

    def delete_item(self, pk: str, sk: str) -> bool:
        """Delete one item. Returns False if there was nothing to delete."""
        response = self.table.delete_item(Key=_key(pk, sk), ReturnValues="ALL_OLD")
        return bool(response.get("Attributes"))

    def create_table_if_not_exists(self) -> None:
        """Create the table on demand (DynamoDB Local development)."""
        try:
            self.table.load()
        except ClientError:
            self.table.meta.client.create_table(
                TableName=self.table_name,
                KeySchema=KEY_SCHEMA,
                AttributeDefinitions=[
                    {"AttributeName": "PK", "AttributeType": "S"},
                    {"AttributeName": "SK", "AttributeType": "S"},
                ],
                BillingMode="PAY_PER_REQUEST",
            )
            logger.info(f"Created table {self.table_name}")
        else:
            logger.info(f"Table {self.table_name} already exists")
