"""SNS client with automatic retry."""

from awpaki.clients.retry import RetryingClient


class SnsClient(RetryingClient):
    """
    Example:
        sns_client.execute(
            "publish",
            TopicArn="arn:aws:sns:us-east-1:123456789012:MyTopic",
            Message=json.dumps({"key": "value"}),
        )
    """

    service_name = 'sns'


sns_client = SnsClient()
