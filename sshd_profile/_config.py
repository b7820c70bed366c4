"""Layered parameter loader for the sshd profile."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from ._logging import get_logger
from .options.config import SSHDProfileConfig
from .options.defaults import DEFAULT_PASSWORD_AUTHENTICATION, DEFAULT_PORT

LOGGER = get_logger("config")

_ENV_KEYS = ("port", "password_authentication", "options")


def _read_prefixed_env(prefix: str) -> dict[str, Any]:
    """Read the known <PREFIX>_* parameter keys from the environment."""
    prefix_token = f"{prefix.upper()}_"
    values: dict[str, Any] = {}

    for key in _ENV_KEYS:
        env_key = f"{prefix_token}{key.upper()}"
        if env_key in os.environ:
            values[key] = os.environ[env_key]

    LOGGER.info("Loaded %s profile keys from environment prefix %s", len(values), prefix_token)
    return values


def _validate_mapping_root(data: Any) -> dict[str, Any]:
    """Ensure parameter files deserialize to a mapping root."""
    if isinstance(data, dict):
        return data
    raise ValueError("Profile parameter file must contain a key-value object at the root")


def _read_parameter_file(file_path: str | Path | None) -> dict[str, Any]:
    """Read a JSON or YAML parameter file when provided, otherwise return an empty mapping."""
    if not file_path:
        LOGGER.info("No parameter file path provided")
        return {}

    path = Path(file_path)
    if not path.exists():
        LOGGER.error("Parameter file not found: %s", file_path)
        raise FileNotFoundError(f"Parameter file not found: {file_path}")

    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")

    if suffix == ".json":
        data = json.loads(content)
    elif suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(content)
    else:
        raise ValueError("Unsupported parameter file format. Use JSON (.json) or YAML (.yaml/.yml).")

    LOGGER.info("Loaded parameter file %s", file_path)
    return _validate_mapping_root(data)


def _not_none_values(values: dict[str, Any] | None) -> dict[str, Any]:
    """Drop keys with None values to avoid overriding previous layers."""
    if not values:
        return {}
    return {key: value for key, value in values.items() if value is not None}


def _merge_parameter_layers(layers: list[dict[str, Any]]) -> dict[str, Any]:
    """Merge parameter dictionaries in order where last layer wins."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    LOGGER.info("Merged %s parameter layers", len(layers))
    return merged


def load_profile_config(
    config: dict[str, Any] | None = None,
    *,
    file_path: str | Path | None = None,
    env_prefix: str | None = "SSHD",
    overrides: dict[str, Any] | None = None,
) -> SSHDProfileConfig:
    """Resolve profile parameters from defaults, file, env, config, and overrides."""
    LOGGER.info(
        "Loading profile parameters with env_prefix=%s, file_path=%s",
        env_prefix,
        file_path,
    )
    env_config = _read_prefixed_env(env_prefix) if env_prefix else {}
    merged = _merge_parameter_layers(
        [
            {
                "port": DEFAULT_PORT,
                "password_authentication": DEFAULT_PASSWORD_AUTHENTICATION,
                "options": {},
            },
            _read_parameter_file(file_path),
            env_config,
            config or {},
            _not_none_values(overrides),
        ]
    )

    resolved = SSHDProfileConfig.model_validate(merged)
    LOGGER.info(
        "Profile parameters resolved: port=%s password_authentication=%s option_keys=%s",
        resolved.port,
        resolved.password_authentication,
        sorted(resolved.options),
    )
    return resolved
