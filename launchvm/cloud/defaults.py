"""
Default values for VM launches.
"""

# VM configuration
DEFAULT_LOCATION = "westeurope"
DEFAULT_VM_NAME = "test-vm"
# AMD SEV-SNP capable, also fine for trusted launch
DEFAULT_VM_SIZE = "Standard_DC2as_v5"
DEFAULT_ADMIN_USERNAME = "azureuser"

# Relative to $HOME
DEFAULT_SSH_PUBLIC_KEY = "~/.ssh/id_ed25519.pub"

# Seconds to wait on any single remote operation
DEFAULT_OPERATION_TIMEOUT = 1800
DEFAULT_POLL_INTERVAL = 5

# Network attachment
NETWORK_MODE_STANDALONE = "standalone"
NETWORK_MODE_INLINE = "inline"
NETWORK_MODES = (NETWORK_MODE_STANDALONE, NETWORK_MODE_INLINE)
DEFAULT_NETWORK_MODE = NETWORK_MODE_STANDALONE

# Request constants
IP_CONFIG_NAME = "ip-config"
NETWORK_API_VERSION = "2020-11-01"
COMMUNITY_GALLERY_PREFIX = "/CommunityGalleries"
NIC_SUFFIX = "-nic"
DISK_SUFFIX = "-disk"


def validate_network_mode(mode: str) -> None:
    """Validate that the network attachment mode is known.

    Args:
        mode: The network mode to validate

    Raises:
        ValueError: If the mode is not valid
    """
    if mode not in NETWORK_MODES:
        valid_modes = ", ".join(NETWORK_MODES)
        msg = (
            f"Invalid network mode: {mode}. "
            f"Valid network modes are: {valid_modes}"
        )
        raise ValueError(msg)
