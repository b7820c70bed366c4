import json
import sys
from typing import Any, TextIO

from .._logging import get_logger
from .base_applier import BaseSSHApplier


class JSONApplier(BaseSSHApplier):
    """Write the apply call as a single JSON document to a text stream."""

    def __init__(self, stream: TextIO | None = None, indent: int | None = 2):
        self.stream = stream if stream is not None else sys.stdout
        self.indent = indent
        self.logger = get_logger("appliers.json_output")

    def apply(
        self,
        *,
        storeconfigs_enabled: bool,
        server_options: dict[str, Any],
        client_options: dict[str, Any],
    ) -> None:
        document = {
            "storeconfigs_enabled": storeconfigs_enabled,
            "server_options": server_options,
            "client_options": client_options,
        }
        self.stream.write(json.dumps(document, indent=self.indent, default=str))
        self.stream.write("\n")
        self.logger.info("Wrote %s server options as JSON", len(server_options))
