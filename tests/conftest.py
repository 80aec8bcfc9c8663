# tests/conftest.py
import pytest

from errtrace.config import ENV_INCLUDE_CALLER, reset_config


@pytest.fixture(autouse=True)
def clean_default_config(monkeypatch):
    """Every test starts from the code defaults, whatever the shell exports."""
    monkeypatch.delenv(ENV_INCLUDE_CALLER, raising=False)
    reset_config()
    yield
    reset_config()
