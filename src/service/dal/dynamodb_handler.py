"""
Shared DynamoDB mechanics for the entity DAL handlers.

Each table is keyed by a single string attribute ``id`` and holds flat items.
This base class wraps the four store calls the service needs (put, get,
full scan, delete) together with the float/Decimal conversion boto3 requires.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import ClientError

from service.dal import DeleteResult
from service.handlers.utils.observability import logger, tracer

# Server-assigned attributes an update payload may never overwrite
IMMUTABLE_ATTRIBUTES = ('id', 'createdAt', 'updatedAt')


def to_dynamodb_value(value: Any) -> Any:
    """Convert Python floats to Decimal, recursively."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {key: to_dynamodb_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_dynamodb_value(item) for item in value]
    return value


def from_dynamodb_value(value: Any) -> Any:
    """Convert boto3 Decimals back to int or float, recursively."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {key: from_dynamodb_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [from_dynamodb_value(item) for item in value]
    return value


class DynamoDbHandler:
    """DynamoDB table access shared by the pets and vaccines handlers."""

    def __init__(self, table_name: str, dynamodb: Any = None) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            dynamodb: boto3 DynamoDB service resource; a default resource
                is created when omitted
        """
        self.table_name = table_name
        self.dynamodb = dynamodb if dynamodb is not None else boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)
        logger.debug(f'DynamoDB handler initialized for table: {table_name}')

    @tracer.capture_method
    def _put_item(self, item: Dict[str, Any]) -> None:
        """
        Write an item unconditionally (last write wins).

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            self.table.put_item(Item=to_dynamodb_value(item))
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error writing item: {error_code}', extra={
                'table_name': self.table_name,
                'item_id': item.get('id'),
            })
            raise

    @tracer.capture_method
    def _get_item(self, item_id: str) -> Optional[Dict[str, Any]]:
        """
        Point lookup by ``id``.

        Returns:
            The item, or None when it does not exist

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            response = self.table.get_item(Key={'id': item_id})
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error retrieving item {item_id}: {error_code}', extra={
                'table_name': self.table_name,
            })
            raise

        item = response.get('Item')
        if not item:
            logger.info(f'Item not found: {item_id}', extra={'table_name': self.table_name})
            return None
        return from_dynamodb_value(item)

    @tracer.capture_method
    def _scan_all(self, filter_expression: Any = None) -> List[Dict[str, Any]]:
        """
        Scan the whole table, following LastEvaluatedKey until exhausted.

        Args:
            filter_expression: Optional boto3 condition applied by the store

        Returns:
            Every matching item in store order

        Raises:
            ClientError: If DynamoDB operation fails
        """
        scan_kwargs: Dict[str, Any] = {}
        if filter_expression is not None:
            scan_kwargs['FilterExpression'] = filter_expression

        items: List[Dict[str, Any]] = []
        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                items.extend(from_dynamodb_value(item) for item in response.get('Items', []))
                last_key = response.get('LastEvaluatedKey')
                if not last_key:
                    break
                scan_kwargs['ExclusiveStartKey'] = last_key
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error scanning table: {error_code}', extra={
                'table_name': self.table_name,
            })
            raise

        tracer.put_metadata('scan', {'table_name': self.table_name, 'count': len(items)})
        return items

    @tracer.capture_method
    def _delete_item(self, item_id: str) -> DeleteResult:
        """
        Delete by ``id``. Deleting a missing item succeeds.

        Store failures are reported in the result instead of raised.
        """
        try:
            self.table.delete_item(Key={'id': item_id})
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error deleting item {item_id}: {error_code}', extra={
                'table_name': self.table_name,
            })
            return DeleteResult(deleted=False, error=error_code)

        logger.info(f'Successfully deleted item: {item_id}', extra={'table_name': self.table_name})
        return DeleteResult(deleted=True)

    @staticmethod
    def _merge_updates(existing: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
        """Shallow merge keeping server-assigned attributes and advancing updatedAt."""
        allowed = {key: value for key, value in updates.items() if key not in IMMUTABLE_ATTRIBUTES}
        return {
            **existing,
            **allowed,
            'updatedAt': datetime.now(timezone.utc).isoformat(),
        }
