"""AWS inventory adapters."""

from .ec2_inventory import EC2Inventory
from .ssm_inventory import SSMInventory

__all__ = ["EC2Inventory", "SSMInventory"]
