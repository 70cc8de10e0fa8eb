"""DynamoDB backends implementing IRecordStore and IUserStore."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import boto3
from boto3.dynamodb.conditions import Attr
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from plotledger.core.exceptions import RecordStoreError, UserExistsError
from plotledger.models.plot_record import ID_FIELD, PlotRecord
from plotledger.models.user import StoredUser

logger = logging.getLogger(__name__)

USERNAME_GUARD = "USERNAME#"
EMAIL_GUARD = "EMAIL#"

_serializer = TypeSerializer()


def _resource(region: str, endpoint_url: str | None):
    kwargs: dict = {"region_name": region}
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url
    return boto3.resource("dynamodb", **kwargs)


def _equals_all(criteria: Mapping[str, str]):
    """AND together equality conditions; None when there are no criteria."""
    condition = None
    for column, wanted in criteria.items():
        clause = Attr(column).eq(wanted)
        condition = clause if condition is None else condition & clause
    return condition


def _scan_all(table, **kwargs: Any) -> list[dict[str, Any]]:
    """Scan every page. Pages are collected before returning so a failure yields nothing."""
    items: list[dict[str, Any]] = []
    while True:
        resp = table.scan(**kwargs)
        items.extend(resp.get("Items", []))
        last_key = resp.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


class DynamoDBRecordStore:
    """Production IRecordStore backed by a DynamoDB table keyed on ``ID``."""

    def __init__(self, table_name: str = "plotledger-plots", table_suffix: str = "",
                 region: str = "ap-south-1", endpoint_url: str | None = None) -> None:
        self._table_name = f"{table_name}{table_suffix}"
        self._region = region
        self._endpoint_url = endpoint_url
        self._ddb = _resource(region, endpoint_url)

    @property
    def table_name(self) -> str:
        return self._table_name

    def _table(self):
        return self._ddb.Table(self._table_name)

    def list_records(
        self,
        criteria: Mapping[str, str] | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[PlotRecord]:
        kwargs: dict[str, Any] = {}
        condition = _equals_all(criteria or {})
        if condition is not None:
            kwargs["FilterExpression"] = condition
        if fields:
            names = {f"#p{i}": f for i, f in enumerate(fields)}
            kwargs["ProjectionExpression"] = ", ".join(names)
            kwargs["ExpressionAttributeNames"] = names

        try:
            items = _scan_all(self._table(), **kwargs)
        except (ClientError, BotoCoreError) as exc:
            logger.error("Scan of %s failed: %s", self._table_name, exc)
            raise RecordStoreError(f"DynamoDB scan failed for {self._table_name!r}: {exc}") from exc
        return [PlotRecord.model_validate(item) for item in items]

    def get_record(self, record_id: str) -> PlotRecord | None:
        try:
            resp = self._table().get_item(Key={ID_FIELD: str(record_id)})
        except (ClientError, BotoCoreError) as exc:
            logger.error("GetItem %s from %s failed: %s", record_id, self._table_name, exc)
            raise RecordStoreError(f"DynamoDB get failed for ID={record_id!r}: {exc}") from exc
        item = resp.get("Item")
        return PlotRecord.model_validate(item) if item else None

    def update_record(self, record_id: str, fields: Mapping[str, str | None]) -> bool:
        if not fields:
            return self.get_record(record_id) is not None

        names: dict[str, str] = {"#id": ID_FIELD}
        values: dict[str, Any] = {}
        sets: list[str] = []
        removes: list[str] = []
        for i, (column, value) in enumerate(fields.items()):
            names[f"#f{i}"] = column
            if value is None:
                removes.append(f"#f{i}")
            else:
                values[f":v{i}"] = value
                sets.append(f"#f{i} = :v{i}")

        expression = []
        if sets:
            expression.append("SET " + ", ".join(sets))
        if removes:
            expression.append("REMOVE " + ", ".join(removes))

        kwargs: dict[str, Any] = {
            "Key": {ID_FIELD: str(record_id)},
            "UpdateExpression": " ".join(expression),
            "ConditionExpression": "attribute_exists(#id)",
            "ExpressionAttributeNames": names,
        }
        if values:
            kwargs["ExpressionAttributeValues"] = values

        try:
            self._table().update_item(**kwargs)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                return False
            logger.error("UpdateItem %s in %s failed: %s", record_id, self._table_name, exc)
            raise RecordStoreError(f"DynamoDB update failed for ID={record_id!r}: {exc}") from exc
        except BotoCoreError as exc:
            logger.error("UpdateItem %s in %s failed: %s", record_id, self._table_name, exc)
            raise RecordStoreError(f"DynamoDB update failed for ID={record_id!r}: {exc}") from exc
        return True


def user_guard_keys(username: str, email: str | None) -> list[str]:
    """Ids of the marker items that reserve a username and (non-empty) email."""
    keys = [f"{USERNAME_GUARD}{username}"]
    if email:
        keys.append(f"{EMAIL_GUARD}{email}")
    return keys


class DynamoDBUserStore:
    """Production IUserStore backed by a DynamoDB table keyed on ``id``.

    Usernames and emails are reserved by marker items (``USERNAME#<name>``,
    ``EMAIL#<email>``) written in the same transaction as the user, each
    under ``attribute_not_exists(id)``. Marker items carry no ``username``
    attribute, so lookups never return them.
    """

    def __init__(self, table_name: str = "plotledger-users", table_suffix: str = "",
                 region: str = "ap-south-1", endpoint_url: str | None = None) -> None:
        self._table_name = f"{table_name}{table_suffix}"
        self._ddb = _resource(region, endpoint_url)

    def _table(self):
        return self._ddb.Table(self._table_name)

    def _find(self, attribute: str, value: str) -> StoredUser | None:
        try:
            items = _scan_all(self._table(), FilterExpression=Attr(attribute).eq(value))
        except (ClientError, BotoCoreError) as exc:
            raise RecordStoreError(f"DynamoDB user lookup failed on {attribute}: {exc}") from exc
        return StoredUser.model_validate(items[0]) if items else None

    def get_by_id(self, user_id: str) -> StoredUser | None:
        try:
            item = self._table().get_item(Key={"id": str(user_id)}).get("Item")
        except (ClientError, BotoCoreError) as exc:
            raise RecordStoreError(f"DynamoDB user get failed for id={user_id!r}: {exc}") from exc
        return StoredUser.model_validate(item) if item and "username" in item else None

    def get_by_username(self, username: str) -> StoredUser | None:
        return self._find("username", username)

    def get_by_email(self, email: str) -> StoredUser | None:
        return self._find("email", email) if email else None

    def add(self, user: StoredUser) -> StoredUser:
        items = [user.model_dump(mode="json", exclude_none=True)]
        items += [{"id": key, "user_id": user.id} for key in user_guard_keys(user.username, user.email)]
        transact = [
            {
                "Put": {
                    "TableName": self._table_name,
                    "Item": {k: _serializer.serialize(v) for k, v in item.items()},
                    "ConditionExpression": "attribute_not_exists(id)",
                }
            }
            for item in items
        ]
        try:
            self._ddb.meta.client.transact_write_items(TransactItems=transact)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in (
                "TransactionCanceledException",
                "ConditionalCheckFailedException",
            ):
                logger.info("Rejected duplicate user %s", user.username)
                raise UserExistsError() from exc
            raise RecordStoreError(f"DynamoDB user insert failed for {user.username!r}: {exc}") from exc
        except BotoCoreError as exc:
            raise RecordStoreError(f"DynamoDB user insert failed for {user.username!r}: {exc}") from exc
        return user

    def set_password_hash(self, user_id: str, password_hash: str) -> bool:
        try:
            self._table().update_item(
                Key={"id": str(user_id)},
                UpdateExpression="SET password_hash = :h",
                ConditionExpression="attribute_exists(id) AND attribute_exists(username)",
                ExpressionAttributeValues={":h": password_hash},
            )
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                return False
            raise RecordStoreError(f"DynamoDB password update failed for id={user_id!r}: {exc}") from exc
        return True
