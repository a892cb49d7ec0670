"""Pytest fixtures for tests."""

import pytest

from credit_api_client.client import SimulationsClient
from credit_api_client.config.settings import settings
from credit_api_client.data import SimulationDataFactory
from credit_api_client.observability import configure_logging
from credit_api_client.seeding import reset_simulations
from test_fixtures.fake_credit_api import FakeCreditApi
from test_fixtures.live_api import acceptance_client


def pytest_configure(config):
    configure_logging(settings)


@pytest.fixture
def fake_api():
    """Fresh in-memory credit API holding the seed simulations."""
    return FakeCreditApi(base_path=settings.base_path)


@pytest.fixture
def fake_client(fake_api):
    """Client wired to the in-memory credit API."""
    with SimulationsClient(settings, transport=fake_api.transport()) as client:
        yield client


@pytest.fixture
def simulations_client(fake_api):
    """Client for the acceptance suite.

    Uses the live API when CREDIT_API_LIVE is set, resetting it to the seed
    simulations before and after each test. Otherwise uses the fake API.
    """
    with acceptance_client(settings, fake_api) as client:
        yield client
        if settings.live:
            reset_simulations(client)


@pytest.fixture
def simulation_data_factory():
    return SimulationDataFactory()
