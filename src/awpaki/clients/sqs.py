"""SQS client with automatic retry."""

from awpaki.clients.retry import RetryingClient


class SqsClient(RetryingClient):
    """
    Example:
        sqs_client.execute(
            "send_message",
            QueueUrl="https://sqs.us-east-1.amazonaws.com/123456789012/MyQueue",
            MessageBody=json.dumps({"key": "value"}),
        )
    """

    service_name = 'sqs'


sqs_client = SqsClient()
