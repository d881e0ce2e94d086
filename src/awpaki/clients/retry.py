"""
Retrying wrapper around boto3 clients.

Every service client is created lazily from the toolkit environment variables
(region and endpoint overrides) and reused for the lifetime of the execution
environment. Calls go through tenacity with exponential backoff; only AWS
client and transport errors are retried.

For On-Call Engineers:
    - Defaults: 3 retries, waits between 1s and 3s
    - Each retry is logged at WARNING with the attempt number and the error
    - After the last attempt the original botocore error is re-raised
"""

from typing import Any, Callable, Dict, Mapping, Optional, Union

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict, Field
from tenacity import RetryCallState, Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from awpaki.handlers.models.env_vars import get_toolkit_env_vars
from awpaki.handlers.utils.observability import logger, tracer

RETRYABLE_ERRORS = (ClientError, BotoCoreError)


class RetryOptions(BaseModel):
    """Retry configuration. Timeouts are in milliseconds."""

    model_config = ConfigDict(frozen=True)

    retries: int = Field(default=3, ge=0, description='Maximum number of retries after the first attempt')
    min_timeout: int = Field(default=1000, ge=0, description='Minimum wait between attempts (ms)')
    max_timeout: int = Field(default=3000, ge=0, description='Maximum wait between attempts (ms)')


DEFAULT_RETRY_OPTIONS = RetryOptions()

RetryOptionsInput = Union[RetryOptions, Mapping[str, Any], None]


def resolve_retry_options(retry_options: RetryOptionsInput = None) -> RetryOptions:
    """Merge partial retry options over the defaults."""
    if retry_options is None:
        return DEFAULT_RETRY_OPTIONS
    if isinstance(retry_options, RetryOptions):
        return retry_options
    return RetryOptions.model_validate({**DEFAULT_RETRY_OPTIONS.model_dump(), **retry_options})


def _error_code(error: Optional[BaseException]) -> Optional[str]:
    if isinstance(error, ClientError):
        return error.response.get('Error', {}).get('Code')
    return None


class RetryingClient:
    """
    Base class for the service client singletons.

    Subclasses only set ``service_name``; ``execute`` calls any boto3 client
    operation by its snake_case name.

    Example:
        sqs_client.execute("send_message", QueueUrl=queue_url, MessageBody="{}")
        sqs_client.execute("send_message", retry_options={"retries": 5}, QueueUrl=queue_url, MessageBody="{}")
    """

    service_name: str = ''

    def __init__(self) -> None:
        self._client: Any = None

    def _session_config(self) -> Dict[str, Any]:
        env_vars = get_toolkit_env_vars()
        session_config: Dict[str, Any] = {}
        if env_vars.region:
            session_config['region_name'] = env_vars.region
        endpoint_url = env_vars.endpoint_url(self.service_name)
        if endpoint_url:
            session_config['endpoint_url'] = endpoint_url
        return session_config

    @property
    def client(self) -> Any:
        """The underlying boto3 client, created on first use."""
        if self._client is None:
            session_config = self._session_config()
            self._client = boto3.client(self.service_name, **session_config)
            logger.debug(f"{self.service_name} client initialized", extra=session_config)
        return self._client

    def reset(self) -> None:
        """Drop the cached boto3 client so the next call rebuilds it from the environment."""
        self._client = None

    def _retrying(self, operation: str, options: RetryOptions) -> Retrying:
        def log_before_sleep(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            logger.warning(
                f"Retrying {self.service_name} {operation}",
                extra={
                    "attempt": retry_state.attempt_number,
                    "max_attempts": options.retries + 1,
                    "sleep_seconds": retry_state.next_action.sleep if retry_state.next_action else None,
                    "error_code": _error_code(error),
                    "error_message": str(error),
                },
            )

        min_wait = options.min_timeout / 1000
        max_wait = max(options.max_timeout, options.min_timeout) / 1000

        return Retrying(
            stop=stop_after_attempt(options.retries + 1),
            wait=wait_exponential(multiplier=min_wait, min=min_wait, max=max_wait),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            before_sleep=log_before_sleep,
            reraise=True,
        )

    def call_with_retry(
        self,
        func: Callable[..., Any],
        operation: str,
        retry_options: RetryOptionsInput = None,
        **params: Any,
    ) -> Any:
        """Call ``func(**params)`` under the retry policy."""
        options = resolve_retry_options(retry_options)
        return self._retrying(operation, options)(func, **params)

    @tracer.capture_method(capture_response=False)
    def execute(self, operation: str, retry_options: RetryOptionsInput = None, **params: Any) -> Any:
        """
        Execute a boto3 client operation with automatic retry.

        Args:
            operation: boto3 operation name, e.g. "send_message" or "get_item"
            retry_options: Optional retry configuration, full or partial
            **params: Operation parameters as accepted by boto3

        Returns:
            The operation response

        Raises:
            ClientError, BotoCoreError: When the last attempt fails
            AttributeError: When the operation does not exist for the service
        """
        method = getattr(self.client, operation)
        tracer.put_annotation(key="aws_operation", value=f"{self.service_name}.{operation}")
        return self.call_with_retry(method, operation, retry_options, **params)
