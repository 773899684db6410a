"""Instance domain exceptions."""

from instance_finder.domain.core.exceptions import DomainException

# Shared by both lookup paths, matching the message callers already match on.
NO_MANAGED_INSTANCES_MESSAGE = "no ssm managed instances found"


class InstanceFinderError(DomainException):
    """Base exception for instance lookup errors."""


class NoManagedInstancesError(InstanceFinderError):
    """Raised when the agent inventory reports no online instances."""

    def __init__(self, message: str = NO_MANAGED_INSTANCES_MESSAGE):
        super().__init__(message)


class InstanceNotFoundError(InstanceFinderError):
    """Raised when an identifier matches no instance."""

    def __init__(self, identifier: str, message: str = NO_MANAGED_INSTANCES_MESSAGE):
        super().__init__(message)
        self.identifier = identifier
