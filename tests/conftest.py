"""Shared pytest fixtures for all tests."""

import pytest


@pytest.fixture
def customized_config():
    """Customized configuration with the default Prisoner's Dilemma cells."""
    from dilemma_tactix.models import ConfigurationBuilder

    return ConfigurationBuilder.customized().build()


@pytest.fixture
def customized_table(customized_config):
    """Game table over the default customized configuration."""
    from dilemma_tactix.models import GameTable

    return GameTable(customized_config)


@pytest.fixture
def clean_log_env(monkeypatch):
    """Remove TACTIX_LOG_LEVEL so tests see the default."""
    monkeypatch.delenv("TACTIX_LOG_LEVEL", raising=False)
