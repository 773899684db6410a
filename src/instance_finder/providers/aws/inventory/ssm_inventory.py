"""SSM implementation of AgentInventoryPort."""
from typing import Any, List

from botocore.exceptions import BotoCoreError, ClientError

from instance_finder.domain.instance.value_objects import AgentRecord, QueryFilter, ResourceType
from instance_finder.helpers.logger import get_logger
from instance_finder.infrastructure.exceptions import InventoryBackendError


class SSMInventory:
    """Queries SSM DescribeInstanceInformation for agent-registered instances."""

    def __init__(self, ssm_client: Any):
        self._ssm_client = ssm_client
        self._logger = get_logger(__name__)

    def describe_instance_information(self, filters: List[QueryFilter]) -> List[AgentRecord]:
        """
        Describe SSM instance information matching all filters.

        Only the first page of results is read.

        Raises:
            InventoryBackendError: If the SSM call fails or times out
        """
        aws_filters = [{'Key': f.name, 'Values': list(f.values)} for f in filters]
        self._logger.debug("Describing SSM instance information", filters=aws_filters)

        try:
            response = self._ssm_client.describe_instance_information(Filters=aws_filters)
        except (ClientError, BotoCoreError) as e:
            raise InventoryBackendError("ssm", "DescribeInstanceInformation", str(e)) from e

        return [
            AgentRecord(
                instance_id=info['InstanceId'],
                name=info.get('Name') or '',
                resource_type=ResourceType.from_aws(info.get('ResourceType'))
            )
            for info in response.get('InstanceInformationList', [])
        ]
