"""
DynamoDB client with automatic retry.

``execute`` talks to the low-level client (attribute values in DynamoDB JSON),
``execute_table`` to the boto3 Table resource, which marshals native Python
types the way the DynamoDB document client does.
"""

from typing import Any, Dict

import boto3

from awpaki.clients.retry import RetryingClient, RetryOptionsInput
from awpaki.handlers.utils.observability import logger, tracer


class DynamoDbClient(RetryingClient):
    """
    Example:
        dynamodb_client.execute_table("Users", "get_item", Key={"id": "123"})
        dynamodb_client.execute_table("Users", "put_item", retry_options={"retries": 5}, Item={"id": "123"})
        dynamodb_client.execute("describe_table", TableName="Users")
    """

    service_name = 'dynamodb'

    def __init__(self) -> None:
        super().__init__()
        self._resource: Any = None
        self._tables: Dict[str, Any] = {}

    @property
    def resource(self) -> Any:
        """The boto3 DynamoDB resource, created on first use."""
        if self._resource is None:
            self._resource = boto3.resource(self.service_name, **self._session_config())
            logger.debug("dynamodb resource initialized")
        return self._resource

    def table(self, table_name: str) -> Any:
        if table_name not in self._tables:
            self._tables[table_name] = self.resource.Table(table_name)
        return self._tables[table_name]

    def reset(self) -> None:
        super().reset()
        self._resource = None
        self._tables = {}

    @tracer.capture_method(capture_response=False)
    def execute_table(
        self,
        table_name: str,
        operation: str,
        retry_options: RetryOptionsInput = None,
        **params: Any,
    ) -> Any:
        """
        Execute a Table resource operation with automatic retry.

        Args:
            table_name: DynamoDB table name
            operation: Table method, e.g. "get_item", "put_item", "query"
            retry_options: Optional retry configuration, full or partial
            **params: Operation parameters, with native Python values

        Returns:
            The operation response
        """
        method = getattr(self.table(table_name), operation)
        tracer.put_annotation(key="table_name", value=table_name)
        return self.call_with_retry(method, operation, retry_options, **params)


dynamodb_client = DynamoDbClient()
