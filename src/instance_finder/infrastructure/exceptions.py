from typing import Any, Optional


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class InventoryBackendError(InfrastructureError):
    """Raised when an inventory service call fails, including timeouts."""

    def __init__(self, service: str, operation: str, message: str):
        super().__init__(message, details={"service": service, "operation": operation})
        self.service = service
        self.operation = operation
