"""backend.common.store

DynamoDB access for driver records.

`DriverStore` is the only reader and writer of the drivers table. Every
method maps to exactly one DynamoDB call on a boto3 `Table` resource and
converts between plain Python values and DynamoDB items:

- floats are written as `Decimal` (the resource API rejects `float`);
- `Decimal` values read back become `int` when integral, `float` otherwise.

`scan_all` and `query_by_partition` read a single page. Tables larger than
one page are truncated and a warning is logged.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from backend.common.errors import RecordNotFound

logger = logging.getLogger(__name__)

PARTITION_KEY = "team"
SORT_KEY = "driverId"


def to_item(value: Any) -> Any:
    """Convert a JSON-style value into something the DynamoDB resource accepts."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: to_item(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_item(v) for v in value]
    return value


def from_item(value: Any) -> Any:
    """Convert a DynamoDB item (or attribute) back into JSON-style values."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: from_item(v) for k, v in value.items()}
    if isinstance(value, list):
        return [from_item(v) for v in value]
    if isinstance(value, set):
        return [from_item(v) for v in sorted(value)]
    return value


class DriverStore:
    def __init__(self, table):
        self.table = table

    @classmethod
    def from_settings(cls, settings) -> "DriverStore":
        dynamodb = boto3.resource("dynamodb", region_name=settings.region)
        return cls(dynamodb.Table(settings.table_name))

    def put_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or overwrite the item at (team, driverId). Last write wins."""
        self.table.put_item(Item=to_item(record))
        return record

    def get_record(self, team: str, driver_id: str) -> Optional[Dict[str, Any]]:
        response = self.table.get_item(Key={PARTITION_KEY: team, SORT_KEY: driver_id})
        item = response.get("Item")
        return from_item(item) if item is not None else None

    def scan_all(self) -> List[Dict[str, Any]]:
        response = self.table.scan()
        self._warn_if_truncated(response, "scan")
        return [from_item(item) for item in response.get("Items", [])]

    def query_by_partition(self, team: str) -> List[Dict[str, Any]]:
        response = self.table.query(KeyConditionExpression=Key(PARTITION_KEY).eq(team))
        self._warn_if_truncated(response, f"query team={team}")
        return [from_item(item) for item in response.get("Items", [])]

    def update_fields(self, team: str, driver_id: str, field_values: Dict[str, Any]) -> Dict[str, Any]:
        """SET exactly `field_values` on an existing item and return the new item.

        The write is conditional on the item existing, so an update never
        creates a record. Raises `RecordNotFound` when the key is absent.
        """
        if not field_values:
            raise ValueError("update_fields requires at least one field")

        names = {}
        values = {}
        assignments = []
        for index, (field, value) in enumerate(field_values.items()):
            names[f"#field{index}"] = field
            values[f":value{index}"] = to_item(value)
            assignments.append(f"#field{index} = :value{index}")

        try:
            response = self.table.update_item(
                Key={PARTITION_KEY: team, SORT_KEY: driver_id},
                UpdateExpression="SET " + ", ".join(assignments),
                ConditionExpression=Attr(PARTITION_KEY).exists() & Attr(SORT_KEY).exists(),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise RecordNotFound(team, driver_id) from e
            raise

        return from_item(response.get("Attributes", {}))

    def batch_put(self, records: Iterable[Dict[str, Any]]) -> int:
        """Write many records through the table's batch writer."""
        count = 0
        with self.table.batch_writer() as batch:
            for record in records:
                batch.put_item(Item=to_item(record))
                count += 1
        return count

    def _warn_if_truncated(self, response, operation):
        if response.get("LastEvaluatedKey"):
            logger.warning(
                "%s on %s returned a partial page; remaining items were not read",
                operation,
                self.table.name,
            )
