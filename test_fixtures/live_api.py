"""Client selection for the acceptance suite: live API or in-memory fake."""

import httpx
import pytest

from credit_api_client.client import SimulationsClient
from credit_api_client.config.settings import Settings
from credit_api_client.seeding import reset_simulations
from test_fixtures.fake_credit_api import FakeCreditApi


def acceptance_client(
    settings: Settings,
    fake_api: FakeCreditApi,
    transport: httpx.BaseTransport | None = None,
) -> SimulationsClient:
    """Open the client the acceptance tests run against.

    With `settings.live` the client talks to the real API, which is first reset
    to the seed simulations; an unreachable API skips the test. Otherwise the
    client is wired to `fake_api`.
    """
    if not settings.live:
        return SimulationsClient(settings, transport=fake_api.transport())

    client = SimulationsClient(settings, transport=transport)
    try:
        reset_simulations(client)
    except httpx.ConnectError:
        client.close()
        pytest.skip("Credit API not available")
    return client
