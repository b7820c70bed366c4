import pytest


@pytest.fixture(autouse=True)
def _clean_sshd_env(monkeypatch):
    for key in ("SSHD_PORT", "SSHD_PASSWORD_AUTHENTICATION", "SSHD_OPTIONS"):
        monkeypatch.delenv(key, raising=False)
