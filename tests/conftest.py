"""Shared fixtures for the higher-lower simulation tests."""

import pytest

from src.higher_lower.sampler import Sampler


@pytest.fixture
def sampler():
    """Seeded sampler so statistical tests are deterministic."""
    return Sampler(seed=1234)
