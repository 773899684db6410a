# src/instance_finder/application/instance/service.py
from typing import List, Tuple

from instance_finder.domain.base.ports import AgentInventoryPort, VMInventoryPort
from instance_finder.domain.instance.exceptions import (
    InstanceNotFoundError,
    NoManagedInstancesError,
)
from instance_finder.domain.instance.identifier import classify
from instance_finder.domain.instance.value_objects import (
    AgentRecord,
    Instance,
    QueryFilter,
    VMRecord,
)
from instance_finder.helpers.logger import get_logger

PING_STATUS_ONLINE = "Online"
INSTANCE_STATE_RUNNING = "running"


class InstanceFinderService:
    """Resolves identifiers into instances reachable through the SSM agent.

    Holds no state beyond its two inventory ports; backend errors propagate
    to the caller unchanged.
    """

    def __init__(self,
                 agent_inventory: AgentInventoryPort,
                 vm_inventory: VMInventoryPort):
        self._agent_inventory = agent_inventory
        self._vm_inventory = vm_inventory
        self._logger = get_logger(__name__)

    def find_all(self) -> List[Instance]:
        """
        List every instance that is online in SSM.

        EC2-backed agent records are re-checked against EC2, which drops
        instances that are no longer running and supplies their Name tag.
        Agent-only managed instances are returned as reported by SSM.

        Returns:
            EC2 instances followed by agent-only managed instances

        Raises:
            NoManagedInstancesError: If SSM reports no online instances
        """
        vm_backed, managed = self._find_online_agent_records()

        instances: List[Instance] = []
        if vm_backed:
            filters = [
                QueryFilter(name="instance-state-name", values=[INSTANCE_STATE_RUNNING]),
                QueryFilter(name="instance-id", values=[r.instance_id for r in vm_backed]),
            ]
            records = self._vm_inventory.describe_instances(filters)
            instances.extend(record.to_instance() for record in records)
            self._logger.debug(
                "Enriched EC2-backed instances",
                requested=len(vm_backed),
                running=len(records),
            )

        instances.extend(record.to_instance() for record in managed)
        return instances

    def find_by_identifier(self, identifier: str) -> List[Instance]:
        """
        Find the EC2 instances matching an identifier.

        Only the EC2 inventory is queried, and no state filter is applied.

        Args:
            identifier: Instance ID, IP address, DNS name or Name tag

        Returns:
            Non-empty list of matching instances

        Raises:
            InstanceNotFoundError: If nothing matches
        """
        identifier_filter = classify(identifier)
        self._logger.debug(
            "Classified identifier",
            identifier=identifier,
            filter=identifier_filter.kind.value,
        )

        records: List[VMRecord] = self._vm_inventory.describe_instances(
            [identifier_filter.to_query_filter()]
        )
        instances = [record.to_instance() for record in records]

        if not instances:
            raise InstanceNotFoundError(identifier)

        return instances

    def _find_online_agent_records(self) -> Tuple[List[AgentRecord], List[AgentRecord]]:
        """Fetch online SSM records, split into (EC2-backed, agent-only)."""
        records = self._agent_inventory.describe_instance_information(
            [QueryFilter(name="PingStatus", values=[PING_STATUS_ONLINE])]
        )
        if not records:
            raise NoManagedInstancesError()

        vm_backed = [r for r in records if r.is_vm_backed]
        managed = [r for r in records if not r.is_vm_backed]
        self._logger.debug(
            "Partitioned online agent records",
            ec2_instances=len(vm_backed),
            managed_instances=len(managed),
        )
        return vm_backed, managed
