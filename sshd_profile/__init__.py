"""Public entrypoints for building and applying the sshd profile."""

from ._config import load_profile_config
from .appliers import BaseSSHApplier, JSONApplier, RecordingApplier
from .options import (
    SSHClassParameters,
    SSHDProfileConfig,
    build_class_parameters,
    build_server_options,
    default_server_options,
    merge_ports,
)
from .profile import configure_sshd

__all__ = [
    "BaseSSHApplier",
    "JSONApplier",
    "RecordingApplier",
    "SSHClassParameters",
    "SSHDProfileConfig",
    "build_class_parameters",
    "build_server_options",
    "configure_sshd",
    "default_server_options",
    "load_profile_config",
    "merge_ports",
]
