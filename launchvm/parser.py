import argparse
import os

from launchvm.cloud.defaults import (
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_LOCATION,
    DEFAULT_NETWORK_MODE,
    DEFAULT_OPERATION_TIMEOUT,
    DEFAULT_SSH_PUBLIC_KEY,
    DEFAULT_VM_NAME,
    DEFAULT_VM_SIZE,
    NETWORK_MODES,
)


def _env(name: str, default: str | None = None) -> str | None:
    """Read an env var, treating an empty value as unset."""
    value = os.environ.get(name)
    return value if value else default


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launch-vm",
        description=(
            "Create an Azure VM with its NIC and OS disk, "
            "then delete them again unless --keep is given"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Required; may come from the environment instead
    parser.add_argument(
        "-g",
        "--resource-group",
        type=str,
        default=_env("RESOURCE_GROUP"),
        help="Resource group name [env: RESOURCE_GROUP]",
    )
    parser.add_argument(
        "-n",
        "--subnet-id",
        type=str,
        default=_env("SUBNET_ID"),
        help="Subnet id to attach the nic to [env: SUBNET_ID]",
    )
    parser.add_argument(
        "-i",
        "--image-id",
        type=str,
        default=_env("IMAGE_ID"),
        help=(
            "Image id to use for the virtual machine. Ids starting with "
            "/CommunityGalleries are community gallery images [env: IMAGE_ID]"
        ),
    )
    parser.add_argument(
        "-s",
        "--subscription-id",
        type=str,
        default=_env("SUBSCRIPTION_ID"),
        help="Subscription id [env: SUBSCRIPTION_ID]",
    )

    # Security
    parser.add_argument(
        "-b",
        "--secure-boot",
        action="store_true",
        default=False,
        help="Enable secure boot for the virtual machine",
    )
    parser.add_argument(
        "-c",
        "--confidential",
        action="store_true",
        default=False,
        help="Enable confidential computing for the virtual machine",
    )

    # VM configuration
    parser.add_argument(
        "-l",
        "--location",
        type=str,
        default=_env("LOCATION", DEFAULT_LOCATION),
        help=(
            "Location of the virtual machine "
            f"(default: {DEFAULT_LOCATION}) [env: LOCATION]"
        ),
    )
    parser.add_argument(
        "--name",
        type=str,
        default=_env("VM_NAME", DEFAULT_VM_NAME),
        help=(
            "Name of the virtual machine "
            f"(default: {DEFAULT_VM_NAME}) [env: VM_NAME]"
        ),
    )
    parser.add_argument(
        "-z",
        "--size",
        type=str,
        default=_env("INSTANCE_SIZE", DEFAULT_VM_SIZE),
        help=(
            "Instance size of the virtual machine "
            f"(default: {DEFAULT_VM_SIZE}) [env: INSTANCE_SIZE]"
        ),
    )
    parser.add_argument(
        "--admin-username",
        type=str,
        default=_env("ADMIN_USERNAME", DEFAULT_ADMIN_USERNAME),
        help=(
            "Admin user the ssh key is authorized for "
            f"(default: {DEFAULT_ADMIN_USERNAME}) [env: ADMIN_USERNAME]"
        ),
    )
    parser.add_argument(
        "-p",
        "--pub-key",
        type=str,
        default=_env("SSH_PUBLIC_KEY", DEFAULT_SSH_PUBLIC_KEY),
        help=(
            "Ssh public key path "
            f"(default: {DEFAULT_SSH_PUBLIC_KEY}) [env: SSH_PUBLIC_KEY]"
        ),
    )
    parser.add_argument(
        "--disk-size-gb",
        type=str,
        default=_env("DISK_SIZE_GB"),
        help=(
            "OS disk size in GB. Defaults to the image's disk size "
            "[env: DISK_SIZE_GB]"
        ),
    )
    parser.add_argument(
        "--network-mode",
        type=str,
        choices=NETWORK_MODES,
        default=_env("NETWORK_MODE", DEFAULT_NETWORK_MODE),
        help=(
            "standalone: create the nic first and attach it by id. "
            "inline: let the VM create its own nic "
            f"(default: {DEFAULT_NETWORK_MODE}) [env: NETWORK_MODE]"
        ),
    )

    # Lifecycle
    parser.add_argument(
        "-k",
        "--keep",
        action="store_true",
        default=False,
        help="Do not delete the resources after creating them",
    )
    parser.add_argument(
        "--timeout",
        type=str,
        default=_env("OPERATION_TIMEOUT", str(DEFAULT_OPERATION_TIMEOUT)),
        help=(
            "Seconds to wait for each create or delete operation "
            f"(default: {DEFAULT_OPERATION_TIMEOUT}) [env: OPERATION_TIMEOUT]"
        ),
    )

    # Logging
    parser.add_argument(
        "-v",
        "--logs",
        action="store_true",
        help="If flagged, print debug logs including Azure SDK output",
        default=False,
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse launch arguments.

    Defaults for unset values are read from the environment when the parser
    is built, so env vars set before this call are honoured.
    """
    return create_parser().parse_args(argv)
