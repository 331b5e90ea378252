#!/usr/bin/env python3
"""
Azure API functionality.
Azure Resource Manager SDK wrapper for the VM lifecycle.
"""

import logging

from azure.core.credentials import TokenCredential
from azure.identity import DefaultAzureCredential
from azure.mgmt.compute import ComputeManagementClient
from azure.mgmt.compute.models import VirtualMachine
from azure.mgmt.network import NetworkManagementClient
from azure.mgmt.network.models import NetworkInterface

from launchvm.cloud.cloud_api import CloudApi, wait_for_operation
from launchvm.cloud.defaults import (
    DEFAULT_OPERATION_TIMEOUT,
    DEFAULT_POLL_INTERVAL,
)
from launchvm.config import LaunchConfigs

logger = logging.getLogger(__name__)


class AzureApi(CloudApi):
    """Azure implementation of CloudApi.

    All operations target a single resource group. Each `begin_*` call is
    waited on until it finishes or `timeout` seconds pass.
    """

    def __init__(
        self,
        compute_client: ComputeManagementClient,
        network_client: NetworkManagementClient,
        resource_group: str,
        timeout: float = DEFAULT_OPERATION_TIMEOUT,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self.compute_client = compute_client
        self.network_client = network_client
        self.resource_group = resource_group
        self.timeout = timeout
        self.poll_interval = poll_interval

    @classmethod
    def from_configs(
        cls,
        configs: LaunchConfigs,
        credential: TokenCredential | None = None,
    ) -> "AzureApi":
        """Build the SDK clients for the configured subscription."""
        if credential is None:
            logger.debug("Using DefaultAzureCredential")
            credential = DefaultAzureCredential()
        return cls(
            compute_client=ComputeManagementClient(
                credential, configs.subscription_id
            ),
            network_client=NetworkManagementClient(
                credential, configs.subscription_id
            ),
            resource_group=configs.resource_group,
            timeout=configs.timeout,
        )

    def _wait(self, poller, operation_name: str):
        return wait_for_operation(
            poller,
            operation_name,
            timeout=self.timeout,
            poll_interval=self.poll_interval,
        )

    def create_network_interface(
        self, name: str, request: NetworkInterface
    ) -> str:
        logger.info(f"Creating network interface: {name}")
        poller = self.network_client.network_interfaces.begin_create_or_update(
            self.resource_group, name, request
        )
        nic = self._wait(poller, f"network interface {name} creation")
        return nic.id

    def create_virtual_machine(self, name: str, request: VirtualMachine) -> str:
        logger.info(
            f"Creating virtual machine: {name}. This takes a few minutes..."
        )
        poller = self.compute_client.virtual_machines.begin_create_or_update(
            self.resource_group, name, request
        )
        vm = self._wait(poller, f"virtual machine {name} creation")
        return vm.id

    def delete_virtual_machine(self, name: str) -> None:
        logger.info(
            f"Deleting virtual machine {name} in resource group "
            f"{self.resource_group}. This takes a few minutes..."
        )
        poller = self.compute_client.virtual_machines.begin_delete(
            self.resource_group, name
        )
        self._wait(poller, f"virtual machine {name} deletion")

    def delete_disk(self, name: str) -> None:
        logger.info(
            f"Deleting disk {name} from resource group {self.resource_group}"
        )
        poller = self.compute_client.disks.begin_delete(
            self.resource_group, name
        )
        self._wait(poller, f"disk {name} deletion")

    def delete_network_interface(self, name: str) -> None:
        logger.info(f"Deleting network interface: {name}")
        poller = self.network_client.network_interfaces.begin_delete(
            self.resource_group, name
        )
        self._wait(poller, f"network interface {name} deletion")
