"""
AWS service clients with automatic retry.

Each client is a module level singleton configured from AWS_REGION /
AWS_DEFAULT_REGION and AWS_ENDPOINT_URL_<SERVICE> / AWS_ENDPOINT_URL.
"""

from awpaki.clients.dynamodb import DynamoDbClient, dynamodb_client
from awpaki.clients.lambda_ import LambdaClient, lambda_client
from awpaki.clients.retry import DEFAULT_RETRY_OPTIONS, RetryingClient, RetryOptions, resolve_retry_options
from awpaki.clients.s3 import S3Client, s3_client
from awpaki.clients.sns import SnsClient, sns_client
from awpaki.clients.sqs import SqsClient, sqs_client

__all__ = [
    "RetryOptions",
    "DEFAULT_RETRY_OPTIONS",
    "resolve_retry_options",
    "RetryingClient",
    "DynamoDbClient",
    "SqsClient",
    "SnsClient",
    "S3Client",
    "LambdaClient",
    "dynamodb_client",
    "sqs_client",
    "sns_client",
    "s3_client",
    "lambda_client",
]
