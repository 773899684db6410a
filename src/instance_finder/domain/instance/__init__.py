"""Instance domain - value objects, identifier classification and errors."""

from .exceptions import (
    InstanceFinderError,
    InstanceNotFoundError,
    NoManagedInstancesError,
)
from .identifier import classify
from .value_objects import (
    AgentRecord,
    FilterKind,
    IdentifierFilter,
    Instance,
    QueryFilter,
    ResourceType,
    Tag,
    VMRecord,
)

__all__ = [
    # Value objects
    "AgentRecord",
    "FilterKind",
    "IdentifierFilter",
    "Instance",
    "QueryFilter",
    "ResourceType",
    "Tag",
    "VMRecord",
    # Classification
    "classify",
    # Exceptions
    "InstanceFinderError",
    "InstanceNotFoundError",
    "NoManagedInstancesError",
]
