"""EC2 implementation of VMInventoryPort."""
from typing import Any, List

from botocore.exceptions import BotoCoreError, ClientError

from instance_finder.domain.instance.value_objects import QueryFilter, Tag, VMRecord
from instance_finder.helpers.logger import get_logger
from instance_finder.infrastructure.exceptions import InventoryBackendError


class EC2Inventory:
    """Queries EC2 DescribeInstances and flattens reservations into VMRecords."""

    def __init__(self, ec2_client: Any):
        self._ec2_client = ec2_client
        self._logger = get_logger(__name__)

    def describe_instances(self, filters: List[QueryFilter]) -> List[VMRecord]:
        """
        Describe EC2 instances matching all filters.

        Only the first page of results is read.

        Raises:
            InventoryBackendError: If the EC2 call fails or times out
        """
        aws_filters = [{'Name': f.name, 'Values': list(f.values)} for f in filters]
        self._logger.debug("Describing EC2 instances", filters=aws_filters)

        try:
            response = self._ec2_client.describe_instances(Filters=aws_filters)
        except (ClientError, BotoCoreError) as e:
            raise InventoryBackendError("ec2", "DescribeInstances", str(e)) from e

        records = []
        for reservation in response.get('Reservations', []):
            for aws_instance in reservation.get('Instances', []):
                records.append(VMRecord(
                    instance_id=aws_instance['InstanceId'],
                    tags=[Tag.from_dict(tag) for tag in aws_instance.get('Tags', [])]
                ))
        return records
