"""Domain ports for the two inventory backends."""

from typing import List, Protocol, runtime_checkable

from instance_finder.domain.instance.value_objects import AgentRecord, QueryFilter, VMRecord


@runtime_checkable
class AgentInventoryPort(Protocol):
    """Inventory of machines with a checked-in management agent."""

    def describe_instance_information(self, filters: List[QueryFilter]) -> List[AgentRecord]:
        """List agent-registered instances matching all filters."""
        ...


@runtime_checkable
class VMInventoryPort(Protocol):
    """Inventory of provider-issued virtual machines."""

    def describe_instances(self, filters: List[QueryFilter]) -> List[VMRecord]:
        """List virtual machines matching all filters."""
        ...
