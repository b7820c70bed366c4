import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import DEFAULT_PASSWORD_AUTHENTICATION, DEFAULT_PORT, STORECONFIGS_ENABLED


def _yes_no(value: Any) -> Any:
    """Map booleans back to the sshd_config yes/no keywords."""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (list, tuple)):
        return [_yes_no(item) for item in value]
    return value


class SSHDProfileConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    port: int = DEFAULT_PORT
    password_authentication: str = DEFAULT_PASSWORD_AUTHENTICATION
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("password_authentication", mode="before")
    @classmethod
    def decode_password_authentication(cls, value: Any) -> Any:
        # YAML reads unquoted yes/no as booleans.
        return _yes_no(value)

    @field_validator("options", mode="before")
    @classmethod
    def decode_options(cls, value: Any) -> Any:
        # Environment layers deliver options as a JSON object string.
        if isinstance(value, str):
            value = json.loads(value) if value.strip() else {}
        if value is None:
            return {}
        if isinstance(value, dict):
            return {key: _yes_no(item) for key, item in value.items()}
        return value


class SSHClassParameters(BaseModel):
    """Parameters handed to the SSH configuration applier."""

    model_config = ConfigDict(extra="forbid")

    storeconfigs_enabled: bool = STORECONFIGS_ENABLED
    server_options: dict[str, Any] = Field(default_factory=dict)
    client_options: dict[str, Any] = Field(default_factory=dict)
