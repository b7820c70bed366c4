"""Merge profile parameters with the fixed defaults into sshd server options.

``Port`` is the only key merged element-wise: ports supplied through
``options['Port']`` come first, the explicit ``port`` parameter is appended,
and duplicates are dropped keeping the first occurrence. Every other key in
``options`` replaces the default wholesale, ``HostKey`` included.
"""

from copy import deepcopy
from typing import Any, Mapping

from .._logging import get_logger
from .config import SSHClassParameters, SSHDProfileConfig
from .defaults import (
    DEFAULT_PASSWORD_AUTHENTICATION,
    DEFAULT_PORT,
    STORECONFIGS_ENABLED,
    default_host_keys,
)

logger = get_logger("options.merger")


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _unique(values: list[Any]) -> list[Any]:
    seen: list[Any] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def merge_ports(port: int = DEFAULT_PORT, option_port: Any = None) -> list[Any]:
    """Return option ports followed by ``port``, without duplicates."""
    if option_port is None:
        return [port]
    return _unique(_as_list(option_port) + [port])


def build_server_options(
    port: int = DEFAULT_PORT,
    password_authentication: str = DEFAULT_PASSWORD_AUTHENTICATION,
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the effective server options for one configuration run."""
    options = options or {}

    server_options: dict[str, Any] = {
        "Port": None,
        "HostKey": default_host_keys(),
        "PasswordAuthentication": password_authentication,
    }
    for key, value in options.items():
        if key != "Port":
            server_options[key] = deepcopy(value)

    server_options["Port"] = merge_ports(port, deepcopy(options.get("Port")))
    logger.debug("Resolved sshd ports %s", server_options["Port"])
    return server_options


def build_class_parameters(config: SSHDProfileConfig | None = None) -> SSHClassParameters:
    """Build the full applier parameter record from profile parameters."""
    config = config or SSHDProfileConfig()
    return SSHClassParameters(
        storeconfigs_enabled=STORECONFIGS_ENABLED,
        server_options=build_server_options(
            port=config.port,
            password_authentication=config.password_authentication,
            options=config.options,
        ),
        client_options={},
    )
