"""Deployment module for the VM lifecycle."""

from launchvm.deployment.lifecycle import Lifecycle, LifecycleState

__all__ = [
    "Lifecycle",
    "LifecycleState",
]
