"""
Create-then-delete lifecycle for a single VM.

Creation runs NIC -> VM (or VM alone when the NIC is inlined); deletion runs
VM -> disk -> NIC. Steps run one at a time, each waiting for its remote
operation to finish. The first error aborts the run; nothing already created
is rolled back.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from launchvm.cloud.azure.requests import (
    build_network_interface,
    build_ssh_config,
    build_vm_request,
)
from launchvm.cloud.cloud_api import CloudApi
from launchvm.config import LaunchConfigs, VmResources

logger = logging.getLogger(__name__)


class LifecycleState(str, Enum):
    IDLE = "idle"
    NIC_CREATING = "nic_creating"
    NIC_CREATED = "nic_created"
    VM_CREATING = "vm_creating"
    VM_CREATED = "vm_created"
    VM_DELETING = "vm_deleting"
    VM_DELETED = "vm_deleted"
    DISK_DELETING = "disk_deleting"
    DISK_DELETED = "disk_deleted"
    NIC_DELETING = "nic_deleting"
    NIC_DELETED = "nic_deleted"
    DONE = "done"
    FAILED = "failed"


class Lifecycle:
    def __init__(self, configs: LaunchConfigs, api: CloudApi):
        self.configs = configs
        self.api = api
        self.resources = VmResources.for_vm(configs.vm_name)

        self.state = LifecycleState.IDLE
        self.history: list[LifecycleState] = [LifecycleState.IDLE]
        self.nic_id: str | None = None
        self.vm_id: str | None = None
        # Names of resources that exist as far as we know, in creation order
        self.live: list[str] = []

    def _transition(self, state: LifecycleState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def _step(
        self,
        running: LifecycleState,
        finished: LifecycleState,
        action: Callable[..., Any],
        *args: Any,
    ) -> Any:
        self._transition(running)
        try:
            result = action(*args)
        except Exception as e:
            self._transition(LifecycleState.FAILED)
            remaining = ", ".join(self.live) or "none"
            logger.error(
                f"Step {running.value} failed: {e}. "
                f"Resources that may remain: {remaining}"
            )
            raise
        self._transition(finished)
        return result

    def create(self) -> VmResources:
        """Create the NIC (unless inlined) and the VM."""
        resources = self.resources
        logger.info("Start creating virtual machine...")

        # Must fail before anything is created
        try:
            ssh_config = build_ssh_config(
                self.configs.admin_username, self.configs.ssh_public_key_path
            )
        except (OSError, ValueError):
            self._transition(LifecycleState.FAILED)
            raise

        if not self.configs.inline_network:
            self.nic_id = self._step(
                LifecycleState.NIC_CREATING,
                LifecycleState.NIC_CREATED,
                self.api.create_network_interface,
                resources.nic_name,
                build_network_interface(
                    self.configs.location, self.configs.subnet_id
                ),
            )
            self.live.append(resources.nic_name)
            logger.info(f"Created network interface: {self.nic_id}")

        request = build_vm_request(
            self.configs, resources, ssh_config, nic_id=self.nic_id
        )
        self.vm_id = self._step(
            LifecycleState.VM_CREATING,
            LifecycleState.VM_CREATED,
            self.api.create_virtual_machine,
            resources.vm_name,
            request,
        )
        self.live.insert(0, resources.vm_name)
        self.live.insert(1, resources.disk_name)
        if self.configs.inline_network:
            self.live.append(resources.nic_name)
        logger.info(f"Created virtual machine: {self.vm_id}")
        logger.info("Virtual machine created successfully")
        return resources

    def cleanup(self) -> None:
        """Delete the VM, then its disk, then its NIC."""
        resources = self.resources
        logger.info("Start deleting virtual machine...")

        steps = [
            (
                LifecycleState.VM_DELETING,
                LifecycleState.VM_DELETED,
                self.api.delete_virtual_machine,
                resources.vm_name,
                "virtual machine",
            ),
            (
                LifecycleState.DISK_DELETING,
                LifecycleState.DISK_DELETED,
                self.api.delete_disk,
                resources.disk_name,
                "disk",
            ),
            (
                LifecycleState.NIC_DELETING,
                LifecycleState.NIC_DELETED,
                self.api.delete_network_interface,
                resources.nic_name,
                "network interface",
            ),
        ]
        for running, finished, action, name, kind in steps:
            self._step(running, finished, action, name)
            if name in self.live:
                self.live.remove(name)
            logger.info(f"Deleted {kind}: {name}")

        logger.info("Virtual machine deleted successfully")

    def run(self) -> VmResources:
        """Create the resources, then delete them unless configured to keep."""
        resources = self.create()
        if self.configs.keep:
            logger.info(f"Keeping resources: {resources.to_dict()}")
        else:
            self.cleanup()
        self._transition(LifecycleState.DONE)
        return resources
