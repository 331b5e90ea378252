#!/usr/bin/env python3
"""
Base Cloud API abstraction.
Defines the remote operations the lifecycle orchestrator relies on.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Protocol

from launchvm.cloud.defaults import DEFAULT_POLL_INTERVAL

logger = logging.getLogger(__name__)


class Poller(Protocol):
    """The subset of a long-running-operation handle we poll on."""

    def done(self) -> bool: ...

    def wait(self, timeout: float | None = None) -> None: ...

    def result(self, timeout: float | None = None) -> Any: ...


def wait_for_operation(
    poller: Poller,
    operation_name: str,
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> Any:
    """
    Block until a long-running operation reaches a terminal state.

    Args:
        poller: The operation handle returned by a begin_* call
        operation_name: Human-readable name for logging
        timeout: Maximum time to wait in seconds

    Returns:
        The operation's final result

    Raises:
        TimeoutError: If the operation is still running after `timeout`
        Whatever the operation itself failed with, unchanged
    """
    start_time = time.monotonic()

    while not poller.done():
        elapsed = time.monotonic() - start_time
        if elapsed >= timeout:
            raise TimeoutError(
                f"{operation_name} timed out after {timeout} seconds"
            )

        logger.debug(f"Waiting for {operation_name}...")
        poller.wait(min(poll_interval, timeout - elapsed))

    return poller.result()


class CloudApi(ABC):
    """Abstract base class for the remote resource operations.

    Every method issues one remote operation and only returns once that
    operation has finished.
    """

    @abstractmethod
    def create_network_interface(self, name: str, request: Any) -> str:
        """Create or update a standalone network interface.

        Returns:
            The resource id of the network interface
        """
        raise NotImplementedError

    @abstractmethod
    def create_virtual_machine(self, name: str, request: Any) -> str:
        """Create or update a virtual machine.

        Returns:
            The resource id of the virtual machine
        """
        raise NotImplementedError

    @abstractmethod
    def delete_virtual_machine(self, name: str) -> None:
        """Delete a virtual machine."""
        raise NotImplementedError

    @abstractmethod
    def delete_disk(self, name: str) -> None:
        """Delete a managed disk."""
        raise NotImplementedError

    @abstractmethod
    def delete_network_interface(self, name: str) -> None:
        """Delete a network interface."""
        raise NotImplementedError
