from pathlib import Path

from launchvm.cloud.defaults import DEFAULT_SSH_PUBLIC_KEY


def resolve_ssh_key_path(path: str | None) -> Path:
    """Resolve an ssh public key path, falling back to the default key.

    `~` is expanded against the current user's home. The file is not
    checked for existence here; reading it is the request builder's job.
    """
    if not path:
        path = DEFAULT_SSH_PUBLIC_KEY
    return Path(path).expanduser().absolute()


def authorized_keys_path(username: str) -> str:
    """Remote authorized_keys path for a Linux user."""
    return f"/home/{username}/.ssh/authorized_keys"
