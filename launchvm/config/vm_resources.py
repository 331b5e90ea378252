"""VM identity bundle."""

from dataclasses import dataclass

from launchvm.cloud.defaults import DISK_SUFFIX, NIC_SUFFIX


@dataclass(frozen=True)
class VmResources:
    vm_name: str
    nic_name: str
    disk_name: str

    @staticmethod
    def for_vm(vm_name: str) -> "VmResources":
        """Derive the NIC and OS disk names from the VM name."""
        return VmResources(
            vm_name=vm_name,
            nic_name=f"{vm_name}{NIC_SUFFIX}",
            disk_name=f"{vm_name}{DISK_SUFFIX}",
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "vmName": self.vm_name,
            "nicName": self.nic_name,
            "diskName": self.disk_name,
        }
