"""Abstract contract for the component that writes sshd configuration."""

from abc import ABC, abstractmethod
from typing import Any


class BaseSSHApplier(ABC):
    @abstractmethod
    def apply(
        self,
        *,
        storeconfigs_enabled: bool,
        server_options: dict[str, Any],
        client_options: dict[str, Any],
    ) -> None:
        """Make the SSH daemon and client reflect the given options."""
        pass
