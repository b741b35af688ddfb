"""Core test fixtures for melee odds tests."""

from fractions import Fraction

import pytest

from src.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def coin_table() -> dict[int, Fraction]:
    """A fair 0/1 outcome."""
    return {0: Fraction(1, 2), 1: Fraction(1, 2)}


@pytest.fixture
def three_in_four_table() -> dict[int, Fraction]:
    """Outcome 0 three times in four."""
    return {0: Fraction(3, 4), 1: Fraction(1, 4)}
