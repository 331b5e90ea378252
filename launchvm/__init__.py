"""Provision a single Azure VM with its NIC and OS disk, then tear it down."""

__version__ = "0.1.0"
