"""Cloud API abstraction and the Azure implementation."""

from launchvm.cloud.cloud_api import CloudApi, wait_for_operation

# Note: launchvm.cloud.azure is NOT imported here to avoid circular imports,
# since the Azure modules depend on launchvm.config.

__all__ = [
    "CloudApi",
    "wait_for_operation",
]
