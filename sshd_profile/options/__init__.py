from .config import SSHClassParameters, SSHDProfileConfig
from .defaults import DEFAULT_HOST_KEYS, STORECONFIGS_ENABLED, default_server_options
from .merger import build_class_parameters, build_server_options, merge_ports

__all__ = [
    "DEFAULT_HOST_KEYS",
    "STORECONFIGS_ENABLED",
    "SSHClassParameters",
    "SSHDProfileConfig",
    "build_class_parameters",
    "build_server_options",
    "default_server_options",
    "merge_ports",
]
