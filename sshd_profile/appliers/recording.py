from typing import Any

from ..options.config import SSHClassParameters
from .base_applier import BaseSSHApplier


class RecordingApplier(BaseSSHApplier):
    """Keep every apply call in memory instead of touching the host."""

    def __init__(self):
        self.calls: list[SSHClassParameters] = []

    def apply(
        self,
        *,
        storeconfigs_enabled: bool,
        server_options: dict[str, Any],
        client_options: dict[str, Any],
    ) -> None:
        self.calls.append(
            SSHClassParameters(
                storeconfigs_enabled=storeconfigs_enabled,
                server_options=server_options,
                client_options=client_options,
            )
        )

    @property
    def last_call(self) -> SSHClassParameters | None:
        return self.calls[-1] if self.calls else None
