"""
Azure deployment utilities.

This package contains all Azure-specific functionality:
- api: Azure SDK wrapper implementing CloudApi
- requests: builders for the VM and NIC create requests

Import directly from the submodules; they depend on launchvm.config.
"""
