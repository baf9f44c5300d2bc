"""
Pytest configuration and fixtures for seedkeys tests.
"""

import pytest

from seedkeys.derivation import Keypair, derive


@pytest.fixture
def abc_seeds() -> list[str]:
    return ["alice", "bob", "carol"]


@pytest.fixture
def abc_keys(abc_seeds: list[str]) -> list[Keypair]:
    return derive(abc_seeds)


@pytest.fixture
def federation_seeds() -> list[str]:
    return [f"fed{i}" for i in range(1, 21)]


@pytest.fixture(autouse=True)
def clean_seedkeys_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep user environment and .env files out of settings."""
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "SORT_KEYS", "NETWORK", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"SEEDKEYS_{name}", raising=False)
