from .aws_client import AWSClient

__all__ = ["AWSClient"]
