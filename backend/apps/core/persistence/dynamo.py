"""
DynamoDB persistence primitives.

Entities that live in a DynamoDB table implement ``DynamoItem``; repositories
extend ``DynamoRepository`` to get table lookup, key building and error
translation for free.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings

from apps.core.services.base import BaseService, StorageError

T = TypeVar('T', bound='DynamoItem')


class DynamoItem(ABC):
    """
    Contract between an entity and its DynamoDB table.

    Table and key names are fixed per entity type. ``range_name`` returns
    None for single-key tables.
    """

    @classmethod
    @abstractmethod
    def table_name(cls) -> str:
        ...

    @classmethod
    @abstractmethod
    def hash_name(cls) -> str:
        ...

    @classmethod
    def range_name(cls) -> Optional[str]:
        return None

    @classmethod
    @abstractmethod
    def hydrate(cls: Type[T], item: Dict[str, Any]) -> T:
        """Build the entity from a stored item."""

    @abstractmethod
    def output(self) -> Dict[str, Any]:
        """Flat attribute map written to the table."""


def get_dynamodb_resource():
    """
    Create a DynamoDB resource from the configured region and endpoint.

    Each resource gets its own session: the default boto3 session is not
    safe to build resources from on several threads at once.
    """
    session = boto3.session.Session()
    return session.resource(
        'dynamodb',
        region_name=settings.AWS_REGION,
        endpoint_url=settings.DYNAMODB_ENDPOINT_URL,
    )


class DynamoRepository(BaseService):
    """
    Base class for table-backed repositories.

    Each call is a single request to DynamoDB. Failures are raised as
    ``StorageError`` and never retried here.
    """

    def __init__(self, resource=None, table_prefix: Optional[str] = None):
        super().__init__()
        self.resource = resource if resource is not None else get_dynamodb_resource()
        if table_prefix is None:
            table_prefix = getattr(settings, 'DYNAMODB_TABLE_PREFIX', '')
        self.table_prefix = table_prefix

    def table_name_for(self, item_cls: Type[DynamoItem]) -> str:
        return f"{self.table_prefix}{item_cls.table_name()}"

    @staticmethod
    def key_for(item_cls: Type[DynamoItem], hash_value: Any,
                range_value: Any = None) -> Dict[str, Any]:
        """Build the primary key map for an item lookup."""
        key = {item_cls.hash_name(): hash_value}
        range_name = item_cls.range_name()
        if range_name is not None:
            if range_value is None:
                raise ValueError(
                    f"{item_cls.__name__} needs a value for range key '{range_name}'")
            key[range_name] = range_value
        return key

    def put(self, item: DynamoItem) -> None:
        table_name = self.table_name_for(type(item))
        try:
            self.resource.Table(table_name).put_item(Item=item.output())
        except (ClientError, BotoCoreError) as e:
            raise self._storage_error('write', table_name, e) from e

    def get(self, item_cls: Type[T], hash_value: Any,
            range_value: Any = None) -> Optional[T]:
        """Fetch one item by key, or None when it does not exist."""
        table_name = self.table_name_for(item_cls)
        try:
            response = self.resource.Table(table_name).get_item(
                Key=self.key_for(item_cls, hash_value, range_value))
        except (ClientError, BotoCoreError) as e:
            raise self._storage_error('read', table_name, e) from e

        item = response.get('Item')
        if item is None:
            return None
        return item_cls.hydrate(item)

    def _storage_error(self, operation: str, table_name: str,
                       error: Exception) -> StorageError:
        if isinstance(error, ClientError):
            code = error.response.get('Error', {}).get('Code', 'STORAGE_ERROR')
        else:
            code = 'STORE_UNAVAILABLE'

        self.log_error(
            f"DynamoDB {operation} failed on {table_name}",
            exception=error,
            table=table_name,
            error_code=code
        )
        return StorageError(
            f"Could not {operation} item in {table_name}",
            code=code,
            details={'table': table_name}
        )
