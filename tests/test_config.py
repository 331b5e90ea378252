"""
Argument parsing and configuration resolution tests.
"""

from pathlib import Path

import pytest

from launchvm.cloud.defaults import (
    DEFAULT_LOCATION,
    DEFAULT_OPERATION_TIMEOUT,
    DEFAULT_VM_NAME,
    DEFAULT_VM_SIZE,
)
from launchvm.config import LaunchConfigs, VmResources
from launchvm.parser import parse_args

REQUIRED = [
    "-g", "rg1",
    "-n", "/subs/x/subnet1",
    "-i", "/subs/x/img1",
    "-s", "sub1",
]


@pytest.mark.config
@pytest.mark.parametrize("vm_name", ["vm1", "test-vm", "a", "node-7.prod"])
def test_derived_resource_names(vm_name):
    resources = VmResources.for_vm(vm_name)
    assert resources.vm_name == vm_name
    assert resources.nic_name == f"{vm_name}-nic"
    assert resources.disk_name == f"{vm_name}-disk"


@pytest.mark.config
def test_defaults_applied(ssh_key):
    args = parse_args(REQUIRED + ["-p", str(ssh_key)])
    configs = LaunchConfigs.from_args(args)

    assert configs.resource_group == "rg1"
    assert configs.subnet_id == "/subs/x/subnet1"
    assert configs.image_id == "/subs/x/img1"
    assert configs.subscription_id == "sub1"
    assert configs.location == DEFAULT_LOCATION == "westeurope"
    assert configs.vm_name == DEFAULT_VM_NAME == "test-vm"
    assert configs.size == DEFAULT_VM_SIZE == "Standard_DC2as_v5"
    assert configs.timeout == DEFAULT_OPERATION_TIMEOUT
    assert configs.network_mode == "standalone"
    assert configs.disk_size_gb is None
    assert not configs.secure_boot
    assert not configs.confidential
    assert not configs.keep
    assert configs.ssh_public_key_path == ssh_key


@pytest.mark.config
def test_default_ssh_key_path_resolved_against_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    configs = LaunchConfigs.from_args(parse_args(REQUIRED))
    assert configs.ssh_public_key_path == tmp_path / ".ssh" / "id_ed25519.pub"


@pytest.mark.config
def test_env_fallback(monkeypatch, ssh_key):
    monkeypatch.setenv("RESOURCE_GROUP", "env-rg")
    monkeypatch.setenv("SUBNET_ID", "/subs/env/subnet")
    monkeypatch.setenv("IMAGE_ID", "/subs/env/img")
    monkeypatch.setenv("SUBSCRIPTION_ID", "env-sub")
    monkeypatch.setenv("LOCATION", "eastus")
    monkeypatch.setenv("VM_NAME", "env-vm")
    monkeypatch.setenv("INSTANCE_SIZE", "Standard_DC4as_v5")
    monkeypatch.setenv("SSH_PUBLIC_KEY", str(ssh_key))

    configs = LaunchConfigs.from_args(parse_args([]))

    assert configs.resource_group == "env-rg"
    assert configs.subnet_id == "/subs/env/subnet"
    assert configs.image_id == "/subs/env/img"
    assert configs.subscription_id == "env-sub"
    assert configs.location == "eastus"
    assert configs.vm_name == "env-vm"
    assert configs.size == "Standard_DC4as_v5"
    assert configs.ssh_public_key_path == ssh_key


@pytest.mark.config
def test_flags_override_env(monkeypatch):
    monkeypatch.setenv("RESOURCE_GROUP", "env-rg")
    configs = LaunchConfigs.from_args(parse_args(REQUIRED))
    assert configs.resource_group == "rg1"


@pytest.mark.config
def test_boolean_flags():
    args = parse_args(REQUIRED + ["-b", "-c", "-k", "-v"])
    configs = LaunchConfigs.from_args(args)
    assert configs.secure_boot
    assert configs.confidential
    assert configs.keep
    assert configs.show_logs


@pytest.mark.config
def test_missing_required_reports_all():
    args = parse_args(["-g", "rg1"])
    with pytest.raises(ValueError) as e:
        LaunchConfigs.from_args(args)
    message = str(e.value)
    assert "--subnet-id" in message and "SUBNET_ID" in message
    assert "--image-id" in message
    assert "--subscription-id" in message
    assert "--resource-group" not in message


@pytest.mark.config
def test_empty_env_is_unset(monkeypatch):
    monkeypatch.setenv("SUBSCRIPTION_ID", "")
    args = parse_args(REQUIRED[:6])
    with pytest.raises(ValueError, match="--subscription-id"):
        LaunchConfigs.from_args(args)


@pytest.mark.config
@pytest.mark.parametrize(
    "extra",
    [
        ["--timeout", "0"],
        ["--timeout", "soon"],
        ["--disk-size-gb", "-1"],
        ["--disk-size-gb", "big"],
    ],
)
def test_invalid_numbers(extra):
    with pytest.raises(ValueError):
        LaunchConfigs.from_args(parse_args(REQUIRED + extra))


@pytest.mark.config
def test_invalid_network_mode_from_env(monkeypatch):
    monkeypatch.setenv("NETWORK_MODE", "bridged")
    with pytest.raises(ValueError, match="Invalid network mode"):
        LaunchConfigs.from_args(parse_args(REQUIRED))


@pytest.mark.config
def test_optional_values():
    args = parse_args(
        REQUIRED
        + [
            "--network-mode", "inline",
            "--disk-size-gb", "64",
            "--timeout", "120",
            "--admin-username", "ops",
        ]
    )
    configs = LaunchConfigs.from_args(args)
    assert configs.inline_network
    assert configs.disk_size_gb == 64
    assert configs.timeout == 120
    assert configs.admin_username == "ops"
    assert configs.to_dict()["diskSizeGb"] == 64


@pytest.mark.config
def test_configs_are_immutable(make_configs):
    configs = make_configs()
    with pytest.raises(AttributeError):
        configs.vm_name = "other"
    assert isinstance(configs.ssh_public_key_path, Path)
