"""Application bootstrap - wires configuration, logging and the AWS inventories."""

from __future__ import annotations

from typing import Any, Dict, Optional

from instance_finder.application.instance.service import InstanceFinderService
from instance_finder.config import AppConfig, ConfigurationManager
from instance_finder.helpers.logger import get_logger, setup_logging
from instance_finder.infrastructure.aws.aws_client import AWSClient
from instance_finder.providers.aws.inventory import EC2Inventory, SSMInventory


class Application:
    """Application context holding the typed configuration and the finder service."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.logger = get_logger(__name__)
        self._finder: Optional[InstanceFinderService] = None

    @property
    def finder(self) -> InstanceFinderService:
        """Finder service, built on first use so offline commands need no AWS clients."""
        if self._finder is None:
            self._finder = create_finder(self.config)
        return self._finder


def create_finder(config: AppConfig) -> InstanceFinderService:
    """Build an InstanceFinderService backed by the AWS EC2 and SSM inventories."""
    aws_client = AWSClient(config.aws, timeout_seconds=config.timeout_seconds)
    return InstanceFinderService(
        agent_inventory=SSMInventory(aws_client.ssm_client),
        vm_inventory=EC2Inventory(aws_client.ec2_client),
    )


def create_application(config_path: Optional[str] = None,
                       overrides: Optional[Dict[str, Any]] = None) -> Application:
    """
    Load configuration, set up logging and return the application context.

    Args:
        config_path: Optional JSON configuration file
        overrides: Partial configuration applied last (e.g. CLI flags)

    Raises:
        ConfigurationError: If configuration cannot be loaded or is invalid
    """
    config_manager = ConfigurationManager(config_path)
    if overrides:
        config_manager.update_config(overrides)
    app_config = config_manager.get_typed()

    setup_logging(app_config.logging)

    app = Application(app_config)
    app.logger.debug(
        "Application initialized",
        region=app_config.aws.region,
        timeout_seconds=app_config.timeout_seconds,
    )
    return app
