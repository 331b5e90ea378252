"""
Request builders for the Azure compute and network APIs.

Each builder returns SDK model objects; nothing here talks to Azure.
"""

import logging
from pathlib import Path

from azure.mgmt.compute.models import (
    BootDiagnostics,
    CachingTypes,
    DeleteOptions,
    DiagnosticsProfile,
    DiskCreateOptionTypes,
    DiskDeleteOptionTypes,
    HardwareProfile,
    ImageReference,
    LinuxConfiguration,
    ManagedDiskParameters,
    NetworkInterfaceReference,
    NetworkProfile,
    OSDisk,
    OSProfile,
    ResourceIdentityType,
    SecurityEncryptionTypes,
    SecurityProfile,
    SecurityTypes,
    SshConfiguration,
    SshPublicKey,
    StorageAccountTypes,
    StorageProfile,
    SubResource,
    UefiSettings,
    VirtualMachine,
    VirtualMachineIdentity,
    VirtualMachineNetworkInterfaceConfiguration,
    VirtualMachineNetworkInterfaceIPConfiguration,
    VMDiskSecurityProfile,
)
from azure.mgmt.network.models import (
    IPAllocationMethod,
    NetworkInterface,
    NetworkInterfaceIPConfiguration,
    Subnet,
)

from launchvm.cloud.defaults import (
    COMMUNITY_GALLERY_PREFIX,
    IP_CONFIG_NAME,
    NETWORK_API_VERSION,
)
from launchvm.config import LaunchConfigs, VmResources
from launchvm.utils.paths import authorized_keys_path

logger = logging.getLogger(__name__)


# Network
def build_network_interface(location: str, subnet_id: str) -> NetworkInterface:
    """Standalone NIC with a single dynamic, primary IP configuration."""
    ip_config = NetworkInterfaceIPConfiguration(
        name=IP_CONFIG_NAME,
        subnet=Subnet(id=subnet_id),
        private_ip_allocation_method=IPAllocationMethod.DYNAMIC,
        primary=True,
    )
    return NetworkInterface(location=location, ip_configurations=[ip_config])


def build_network_interface_config(
    nic_name: str, subnet_id: str
) -> VirtualMachineNetworkInterfaceConfiguration:
    """NIC configuration the VM creates itself and deletes along with it."""
    ip_config = VirtualMachineNetworkInterfaceIPConfiguration(
        name=IP_CONFIG_NAME,
        subnet=SubResource(id=subnet_id),
        primary=True,
    )
    return VirtualMachineNetworkInterfaceConfiguration(
        name=nic_name,
        primary=True,
        delete_option=DeleteOptions.DELETE,
        ip_configurations=[ip_config],
    )


def build_network_profile(
    configs: LaunchConfigs,
    resources: VmResources,
    nic_id: str | None = None,
) -> NetworkProfile:
    """Attach either the pre-created NIC or an inline NIC configuration."""
    if configs.inline_network:
        return NetworkProfile(
            network_api_version=NETWORK_API_VERSION,
            network_interface_configurations=[
                build_network_interface_config(
                    resources.nic_name, configs.subnet_id
                )
            ],
        )

    if not nic_id:
        raise ValueError(
            f"Network mode {configs.network_mode} needs the id of "
            f"network interface {resources.nic_name}"
        )
    return NetworkProfile(
        network_interfaces=[
            NetworkInterfaceReference(
                id=nic_id,
                primary=True,
                delete_option=DeleteOptions.DELETE,
            )
        ]
    )


# Storage
def build_image_ref(image_id: str) -> ImageReference:
    """Reference a community gallery image or a managed image by id.

    The API accepts only one of the two fields.
    """
    if image_id.startswith(COMMUNITY_GALLERY_PREFIX):
        return ImageReference(community_gallery_image_id=image_id)
    return ImageReference(id=image_id)


def build_os_disk(
    disk_name: str,
    confidential: bool,
    disk_size_gb: int | None = None,
) -> OSDisk:
    managed_disk = ManagedDiskParameters(
        storage_account_type=StorageAccountTypes.STANDARD_LRS,
    )
    if confidential:
        managed_disk.security_profile = VMDiskSecurityProfile(
            security_encryption_type=SecurityEncryptionTypes.NON_PERSISTED_TPM,
        )

    return OSDisk(
        name=disk_name,
        create_option=DiskCreateOptionTypes.FROM_IMAGE,
        caching=CachingTypes.READ_WRITE,
        delete_option=DiskDeleteOptionTypes.DELETE,
        disk_size_gb=disk_size_gb,
        managed_disk=managed_disk,
    )


# Security
def build_security_profile(
    secure_boot: bool, confidential: bool
) -> SecurityProfile:
    """Trusted launch by default, confidential VM when requested."""
    security_type = (
        SecurityTypes.CONFIDENTIAL_VM
        if confidential
        else SecurityTypes.TRUSTED_LAUNCH
    )
    return SecurityProfile(
        security_type=security_type,
        uefi_settings=UefiSettings(
            secure_boot_enabled=secure_boot,
            v_tpm_enabled=True,
        ),
    )


def build_ssh_config(username: str, key_path: Path) -> SshConfiguration:
    """Authorize the local public key for `username`.

    Raises:
        FileNotFoundError: If there is no key at `key_path`
        OSError: If the key cannot be read
    """
    if not key_path.is_file():
        raise FileNotFoundError(f"SSH public key not found: {key_path}")

    with open(key_path) as f:
        key_data = f.read().strip()
    if not key_data:
        raise ValueError(f"SSH public key is empty: {key_path}")

    logger.debug(f"Using ssh public key {key_path} for user {username}")
    return SshConfiguration(
        public_keys=[
            SshPublicKey(
                path=authorized_keys_path(username),
                key_data=key_data,
            )
        ]
    )


# Virtual machine
def build_vm_request(
    configs: LaunchConfigs,
    resources: VmResources,
    ssh_config: SshConfiguration,
    nic_id: str | None = None,
) -> VirtualMachine:
    """Assemble the full VM create request."""
    return VirtualMachine(
        location=configs.location,
        identity=VirtualMachineIdentity(type=ResourceIdentityType.NONE),
        storage_profile=StorageProfile(
            image_reference=build_image_ref(configs.image_id),
            os_disk=build_os_disk(
                resources.disk_name,
                configs.confidential,
                configs.disk_size_gb,
            ),
        ),
        hardware_profile=HardwareProfile(vm_size=configs.size),
        os_profile=OSProfile(
            computer_name=resources.vm_name,
            admin_username=configs.admin_username,
            linux_configuration=LinuxConfiguration(
                disable_password_authentication=True,
                ssh=ssh_config,
            ),
        ),
        security_profile=build_security_profile(
            configs.secure_boot, configs.confidential
        ),
        diagnostics_profile=DiagnosticsProfile(
            boot_diagnostics=BootDiagnostics(enabled=True),
        ),
        network_profile=build_network_profile(configs, resources, nic_id),
    )
