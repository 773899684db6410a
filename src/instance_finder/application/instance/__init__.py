from .service import InstanceFinderService

__all__ = ["InstanceFinderService"]
