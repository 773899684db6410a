"""Domain ports for infrastructure concerns."""

from .inventory_port import AgentInventoryPort, VMInventoryPort

__all__ = [
    "AgentInventoryPort",
    "VMInventoryPort",
]
