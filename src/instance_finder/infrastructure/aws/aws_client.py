import boto3
from botocore.config import Config

from instance_finder.config.schemas import AWSConfig
from instance_finder.helpers.logger import get_logger

logger = get_logger(__name__)


class AWSClient:
    """
    Centralized AWS client management.
    Builds the EC2 and SSM clients the inventories are queried through.
    """

    def __init__(self, aws_config: AWSConfig, timeout_seconds: float):
        """
        Initialize AWS clients with configuration.

        Credentials are resolved by boto3's default chain (optionally from a
        named profile); they are not validated here.

        Args:
            aws_config: Region, profile and endpoint settings
            timeout_seconds: Connect and read timeout applied to every call.
                botocore applies it to each socket operation, so it is not a
                hard deadline for the whole call: a response that keeps
                trickling in can take longer.
        """
        self.region_name = aws_config.region
        self.config = Config(
            region_name=aws_config.region,
            retries={
                'max_attempts': aws_config.max_attempts,
                'mode': 'standard'
            },
            connect_timeout=timeout_seconds,
            read_timeout=timeout_seconds
        )

        self.session = boto3.session.Session(
            profile_name=aws_config.profile,
            region_name=aws_config.region
        )

        client_kwargs = {'config': self.config}
        if aws_config.endpoint_url:
            client_kwargs['endpoint_url'] = aws_config.endpoint_url

        self.ec2_client = self.session.client('ec2', **client_kwargs)
        self.ssm_client = self.session.client('ssm', **client_kwargs)

        logger.debug(
            "AWS clients initialized",
            region=self.region_name,
            profile=aws_config.profile,
            endpoint_url=aws_config.endpoint_url,
            timeout_seconds=timeout_seconds,
        )
