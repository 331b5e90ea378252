from pathlib import Path

import pytest

from launchvm.cloud.cloud_api import CloudApi
from launchvm.config import LaunchConfigs

ENV_VARS = [
    "RESOURCE_GROUP",
    "SUBNET_ID",
    "IMAGE_ID",
    "SUBSCRIPTION_ID",
    "LOCATION",
    "VM_NAME",
    "INSTANCE_SIZE",
    "SSH_PUBLIC_KEY",
    "ADMIN_USERNAME",
    "NETWORK_MODE",
    "DISK_SIZE_GB",
    "OPERATION_TIMEOUT",
]

SSH_KEY = "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIFakeKeyForTests user@host"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "lifecycle: VM lifecycle ordering")
    config.addinivalue_line("markers", "requests: Azure request builders")
    config.addinivalue_line("markers", "config: parsing and configuration")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's shell from leaking into argument defaults."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ssh_key(tmp_path) -> Path:
    path = tmp_path / "id_ed25519.pub"
    path.write_text(SSH_KEY + "\n")
    return path


@pytest.fixture
def make_configs(ssh_key):
    """Build LaunchConfigs for the standard test VM, with overrides."""

    def _make(**overrides) -> LaunchConfigs:
        values = {
            "resource_group": "rg1",
            "subnet_id": "/subs/x/subnet1",
            "image_id": "/subs/x/img1",
            "subscription_id": "sub1",
            "ssh_public_key_path": ssh_key,
            "vm_name": "vm1",
        }
        values.update(overrides)
        return LaunchConfigs(**values)

    return _make


class RecordingApi(CloudApi):
    """CloudApi that records calls instead of talking to Azure.

    `fail_on` maps a call name to the exception that call should raise.
    """

    def __init__(self, fail_on: dict[str, Exception] | None = None):
        self.calls: list[tuple[str, str]] = []
        self.requests: dict[str, object] = {}
        self.fail_on = fail_on or {}

    def _record(self, call: str, name: str) -> None:
        self.calls.append((call, name))
        if call in self.fail_on:
            raise self.fail_on[call]

    def create_network_interface(self, name, request):
        self.requests[name] = request
        self._record("create_nic", name)
        return f"/subscriptions/sub1/networkInterfaces/{name}"

    def create_virtual_machine(self, name, request):
        self.requests[name] = request
        self._record("create_vm", name)
        return f"/subscriptions/sub1/virtualMachines/{name}"

    def delete_virtual_machine(self, name):
        self._record("delete_vm", name)

    def delete_disk(self, name):
        self._record("delete_disk", name)

    def delete_network_interface(self, name):
        self._record("delete_nic", name)


@pytest.fixture
def recording_api():
    return RecordingApi
