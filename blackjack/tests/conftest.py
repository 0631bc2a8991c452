"""
Blackjack test configuration.

Provides shared fixtures and registers the markers used by the suite.
"""

import pytest

from blackjack.controller import BlackjackController, GameConfiguration
from blackjack.tests.helpers import make_stacked_deck, make_controller


@pytest.fixture
def stacked_deck():
    return make_stacked_deck


@pytest.fixture
def stacked_controller():
    return make_controller


@pytest.fixture
def seeded_controller() -> BlackjackController:
    return BlackjackController(config=GameConfiguration(seed=42))


def pytest_configure(config):
    """Register test markers."""
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "fast: tests that run in milliseconds")
    config.addinivalue_line("markers", "integration: end-to-end console sessions")
    config.addinivalue_line("markers", "property_test: hypothesis property tests")
