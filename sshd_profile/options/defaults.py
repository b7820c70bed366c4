"""Fixed server-option defaults applied on every configuration run."""

from typing import Any

DEFAULT_PORT = 22
DEFAULT_PASSWORD_AUTHENTICATION = "no"
DEFAULT_HOST_KEYS = (
    "/etc/ssh/ssh_host_rsa_key",
    "/etc/ssh/ssh_host_ecdsa_key",
    "/etc/ssh/ssh_host_ed25519_key",
)

# Exported resources are never collected by this profile.
STORECONFIGS_ENABLED = False


def default_host_keys() -> list[str]:
    return list(DEFAULT_HOST_KEYS)


def default_server_options() -> dict[str, Any]:
    """Return a fresh copy of the default server options."""
    return {
        "Port": [DEFAULT_PORT],
        "HostKey": default_host_keys(),
        "PasswordAuthentication": DEFAULT_PASSWORD_AUTHENTICATION,
    }
