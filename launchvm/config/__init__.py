"""Configuration dataclasses for VM launches."""

from launchvm.config.launch_config import LaunchConfigs
from launchvm.config.vm_resources import VmResources

__all__ = [
    "LaunchConfigs",
    "VmResources",
]
