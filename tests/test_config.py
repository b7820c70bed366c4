import json
import os
import unittest
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sshd_profile._config import load_profile_config
from sshd_profile.options.merger import build_server_options


class LoadProfileConfigTests(unittest.TestCase):
    def test_defaults_without_layers(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_profile_config()

        self.assertEqual(config.port, 22)
        self.assertEqual(config.password_authentication, "no")
        self.assertEqual(config.options, {})

    def test_env_layer_parses_values(self):
        env = {
            "SSHD_PORT": "2222",
            "SSHD_PASSWORD_AUTHENTICATION": "yes",
            "SSHD_OPTIONS": '{"X11Forwarding": "no"}',
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_profile_config()

        self.assertEqual(config.port, 2222)
        self.assertEqual(config.password_authentication, "yes")
        self.assertEqual(config.options, {"X11Forwarding": "no"})

    def test_custom_env_prefix(self):
        with patch.dict(os.environ, {"EDGE_SSHD_PORT": "8022"}, clear=True):
            config = load_profile_config(env_prefix="edge_sshd")

        self.assertEqual(config.port, 8022)

    def test_config_and_overrides_win_over_env(self):
        with patch.dict(os.environ, {"SSHD_PORT": "2222", "SSHD_PASSWORD_AUTHENTICATION": "yes"}, clear=True):
            config = load_profile_config(
                {"password_authentication": "no"},
                overrides={"port": 123, "password_authentication": None},
            )

        self.assertEqual(config.port, 123)
        self.assertEqual(config.password_authentication, "no")

    def test_non_integer_port_is_rejected(self):
        with self.assertRaises(ValidationError):
            load_profile_config({"port": "ssh"}, env_prefix=None)

    def test_unknown_keys_are_ignored(self):
        config = load_profile_config({"listen_address": "0.0.0.0"}, env_prefix=None)
        self.assertFalse(hasattr(config, "listen_address"))


def test_json_file_layer(tmp_path):
    path = tmp_path / "sshd.json"
    path.write_text(json.dumps({"port": 123, "options": {"Port": 456}}), encoding="utf-8")

    config = load_profile_config(file_path=path, env_prefix=None)

    assert config.port == 123
    assert config.options == {"Port": 456}


def test_yaml_file_layer(tmp_path):
    path = tmp_path / "sshd.yaml"
    path.write_text(
        "password_authentication: 'yes'\noptions:\n  X11Forwarding: 'no'\n  Port: [2222, 22]\n",
        encoding="utf-8",
    )

    config = load_profile_config(file_path=str(path), env_prefix=None)

    assert config.password_authentication == "yes"
    assert config.options == {"X11Forwarding": "no", "Port": [2222, 22]}


def test_env_layer_wins_over_file(tmp_path, monkeypatch):
    path = tmp_path / "sshd.json"
    path.write_text(json.dumps({"port": 123}), encoding="utf-8")
    monkeypatch.setenv("SSHD_PORT", "2222")

    assert load_profile_config(file_path=path).port == 2222


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_profile_config(file_path=tmp_path / "missing.json", env_prefix=None)


def test_unsupported_suffix_raises(tmp_path):
    path = tmp_path / "sshd.toml"
    path.write_text("port = 22\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported parameter file format"):
        load_profile_config(file_path=path, env_prefix=None)


def test_non_mapping_root_raises(tmp_path):
    path = tmp_path / "sshd.json"
    path.write_text("[22]", encoding="utf-8")

    with pytest.raises(ValueError, match="key-value object"):
        load_profile_config(file_path=path, env_prefix=None)


def test_yaml_unquoted_yes_no_become_keywords(tmp_path):
    path = tmp_path / "sshd.yaml"
    path.write_text(
        "password_authentication: yes\noptions:\n  X11Forwarding: no\n  UseDNS: [no]\n",
        encoding="utf-8",
    )

    config = load_profile_config(file_path=path, env_prefix=None)

    assert config.password_authentication == "yes"
    assert config.options == {"X11Forwarding": "no", "UseDNS": ["no"]}


def test_yaml_unquoted_no_reaches_server_options(tmp_path):
    path = tmp_path / "sshd.yml"
    path.write_text("password_authentication: no\noptions:\n  PermitRootLogin: no\n", encoding="utf-8")

    config = load_profile_config(file_path=path, env_prefix=None)
    server_options = build_server_options(
        port=config.port,
        password_authentication=config.password_authentication,
        options=config.options,
    )

    assert server_options["PasswordAuthentication"] == "no"
    assert server_options["PermitRootLogin"] == "no"
