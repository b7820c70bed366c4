from .base_applier import BaseSSHApplier
from .json_output import JSONApplier
from .recording import RecordingApplier

__all__ = ["BaseSSHApplier", "JSONApplier", "RecordingApplier"]
