"""Shared fixtures for dashroll tests."""
import pytest

from dicecore.config import get_config


def _clear_config_cache():
    if hasattr(get_config, "_config"):
        delattr(get_config, "_config")


@pytest.fixture(autouse=True)
def env_setup(monkeypatch):
    """Start every test from a clean roll environment."""
    for key in ("ROLL_OUTPUT_FORMAT", "ROLL_SEED", "POWERTOOLS_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    _clear_config_cache()
    yield monkeypatch
    _clear_config_cache()


@pytest.fixture
def fixed_sampler():
    """Sampler that always returns the lower bound and records its calls."""
    calls = []

    def sample(lower: int, upper: int) -> int:
        calls.append((lower, upper))
        return lower

    sample.calls = calls
    return sample
