"""Instance value objects.

This module holds the immutable types exchanged between the finder service
and the inventory ports:
- Lookup results (Instance)
- Backend records (AgentRecord, VMRecord, Tag, ResourceType)
- Query predicates (QueryFilter, IdentifierFilter, FilterKind)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

NAME_TAG_KEY = "Name"


@dataclass(frozen=True)
class Tag:
    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"

    @classmethod
    def from_dict(cls, data: dict) -> Tag:
        return cls(key=data["Key"], value=data.get("Value", ""))

    def to_dict(self) -> dict:
        return {"Key": self.key, "Value": self.value}


class Instance(BaseModel):
    """A resolved instance: its Name tag (empty if untagged) and its ID."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    id: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "id": self.id}


class ResourceType(str, Enum):
    """Resource type reported by the SSM agent inventory."""

    EC2_INSTANCE = "EC2Instance"
    MANAGED_INSTANCE = "ManagedInstance"
    OTHER = "Other"

    @classmethod
    def from_aws(cls, value: Optional[str]) -> ResourceType:
        """Map an SSM ResourceType string, treating unknown values as OTHER."""
        for member in cls:
            if member.value == value:
                return member
        return cls.OTHER


class AgentRecord(BaseModel):
    """An instance registered with the SSM agent inventory."""

    model_config = ConfigDict(frozen=True)

    instance_id: str
    name: str = ""
    resource_type: ResourceType = ResourceType.OTHER

    @property
    def is_vm_backed(self) -> bool:
        return self.resource_type == ResourceType.EC2_INSTANCE

    def to_instance(self) -> Instance:
        return Instance(name=self.name, id=self.instance_id)


class VMRecord(BaseModel):
    """An instance returned by the EC2 inventory, flattened out of its reservation."""

    model_config = ConfigDict(frozen=True)

    instance_id: str
    tags: List[Tag] = Field(default_factory=list)

    @property
    def name(self) -> str:
        """Value of the first tag keyed "Name", or an empty string."""
        for tag in self.tags:
            if tag.key == NAME_TAG_KEY:
                return tag.value
        return ""

    def to_instance(self) -> Instance:
        return Instance(name=self.name, id=self.instance_id)


class QueryFilter(BaseModel):
    """A backend predicate: attribute name and acceptable values."""

    model_config = ConfigDict(frozen=True)

    name: str
    values: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "values": list(self.values)}


class FilterKind(str, Enum):
    """Which attribute of an instance an identifier refers to.

    The value of each member is the EC2 DescribeInstances filter name.
    """

    INSTANCE_ID = "instance-id"
    PRIVATE_IP = "private-ip-address"
    PUBLIC_IP = "ip-address"
    PUBLIC_DNS = "dns-name"
    PRIVATE_DNS = "private-dns-name"
    NAME_TAG = "tag:Name"


class IdentifierFilter(BaseModel):
    """A classified identifier, ready to be turned into a backend query."""

    model_config = ConfigDict(frozen=True)

    kind: FilterKind
    value: str

    def to_query_filter(self) -> QueryFilter:
        return QueryFilter(name=self.kind.value, values=[self.value])

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.name, "filter": self.kind.value, "value": self.value}
