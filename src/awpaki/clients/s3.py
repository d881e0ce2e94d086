"""S3 client with automatic retry."""

from awpaki.clients.retry import RetryingClient


class S3Client(RetryingClient):
    """
    Example:
        s3_client.execute("get_object", Bucket="my-bucket", Key="path/to/file.json")
    """

    service_name = 's3'


s3_client = S3Client()
