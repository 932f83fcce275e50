"""Tests for infrastructure settings."""

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in (
        "LEDGER_CONFLICT_RETRIES",
        "LEDGER_CONFLICT_BACKOFF",
        "LEDGER_OWNER_ID",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    """Unset variables fall back to the dataclass defaults."""
    settings = LedgerSettings.from_env()

    assert settings == LedgerSettings()
    assert settings.owner_id is None


def test_from_env_reads_values(monkeypatch) -> None:
    """Valid values are parsed and the owner id is stripped."""
    monkeypatch.setenv("LEDGER_CONFLICT_RETRIES", "7")
    monkeypatch.setenv("LEDGER_CONFLICT_BACKOFF", "1.5")
    monkeypatch.setenv("LEDGER_OWNER_ID", "  owner-9 ")

    settings = LedgerSettings.from_env()

    assert settings.conflict_retry_attempts == 7
    assert settings.conflict_retry_max_wait == 1.5
    assert settings.owner_id == "owner-9"


@pytest.mark.parametrize(
    ("name", "raw"),
    [
        ("LEDGER_CONFLICT_RETRIES", "many"),
        ("LEDGER_CONFLICT_RETRIES", "0"),
        ("LEDGER_CONFLICT_BACKOFF", "-1"),
        ("LEDGER_CONFLICT_BACKOFF", "soon"),
    ],
)
def test_invalid_values_fall_back_to_defaults(monkeypatch, name, raw) -> None:
    """Invalid numbers are ignored with a warning."""
    monkeypatch.setenv(name, raw)

    assert LedgerSettings.from_env() == LedgerSettings()
