"""Launch configuration dataclass."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from launchvm.cloud.defaults import (
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_LOCATION,
    DEFAULT_NETWORK_MODE,
    DEFAULT_OPERATION_TIMEOUT,
    DEFAULT_VM_NAME,
    DEFAULT_VM_SIZE,
    NETWORK_MODE_INLINE,
    validate_network_mode,
)
from launchvm.utils.paths import resolve_ssh_key_path

# (attribute on the namespace, flag, env var)
REQUIRED_ARGS = (
    ("resource_group", "--resource-group", "RESOURCE_GROUP"),
    ("subnet_id", "--subnet-id", "SUBNET_ID"),
    ("image_id", "--image-id", "IMAGE_ID"),
    ("subscription_id", "--subscription-id", "SUBSCRIPTION_ID"),
)


def _positive_int(value: str | int | None, flag: str) -> int | None:
    if value is None or value == "":
        return None
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{flag} must be an integer, got {value!r}") from e
    if number <= 0:
        raise ValueError(f"{flag} must be positive, got {number}")
    return number


@dataclass(frozen=True)
class LaunchConfigs:
    resource_group: str
    subnet_id: str
    image_id: str
    subscription_id: str
    ssh_public_key_path: Path
    location: str = DEFAULT_LOCATION
    vm_name: str = DEFAULT_VM_NAME
    size: str = DEFAULT_VM_SIZE
    admin_username: str = DEFAULT_ADMIN_USERNAME
    secure_boot: bool = False
    confidential: bool = False
    keep: bool = False
    network_mode: str = DEFAULT_NETWORK_MODE
    disk_size_gb: int | None = None
    timeout: int = DEFAULT_OPERATION_TIMEOUT
    show_logs: bool = False

    @staticmethod
    def from_args(args: argparse.Namespace) -> "LaunchConfigs":
        missing = [
            f"{flag} (or ${env})"
            for attr, flag, env in REQUIRED_ARGS
            if not getattr(args, attr, None)
        ]
        if missing:
            raise ValueError(
                "Missing required arguments: " + ", ".join(missing)
            )

        validate_network_mode(args.network_mode)
        timeout = _positive_int(args.timeout, "--timeout")

        return LaunchConfigs(
            resource_group=args.resource_group,
            subnet_id=args.subnet_id,
            image_id=args.image_id,
            subscription_id=args.subscription_id,
            ssh_public_key_path=resolve_ssh_key_path(args.pub_key),
            location=args.location or DEFAULT_LOCATION,
            vm_name=args.name or DEFAULT_VM_NAME,
            size=args.size or DEFAULT_VM_SIZE,
            admin_username=args.admin_username or DEFAULT_ADMIN_USERNAME,
            secure_boot=args.secure_boot,
            confidential=args.confidential,
            keep=args.keep,
            network_mode=args.network_mode,
            disk_size_gb=_positive_int(args.disk_size_gb, "--disk-size-gb"),
            timeout=timeout or DEFAULT_OPERATION_TIMEOUT,
            show_logs=args.logs,
        )

    @property
    def inline_network(self) -> bool:
        return self.network_mode == NETWORK_MODE_INLINE

    def to_dict(self) -> dict[str, Any]:
        kwargs = {}
        if self.disk_size_gb:
            kwargs["diskSizeGb"] = self.disk_size_gb
        return {
            "resourceGroup": self.resource_group,
            "subnetId": self.subnet_id,
            "imageId": self.image_id,
            "subscriptionId": self.subscription_id,
            "sshPublicKeyPath": str(self.ssh_public_key_path),
            "location": self.location,
            "vmName": self.vm_name,
            "size": self.size,
            "adminUsername": self.admin_username,
            "secureBoot": self.secure_boot,
            "confidential": self.confidential,
            "keep": self.keep,
            "networkMode": self.network_mode,
            **kwargs,
            "timeout": self.timeout,
        }
