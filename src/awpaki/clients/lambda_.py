"""Lambda client with automatic retry."""

from awpaki.clients.retry import RetryingClient


class LambdaClient(RetryingClient):
    """
    Example:
        lambda_client.execute(
            "invoke",
            FunctionName="my-function",
            Payload=json.dumps({"key": "value"}),
        )
    """

    service_name = 'lambda'


lambda_client = LambdaClient()
