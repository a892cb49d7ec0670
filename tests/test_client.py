"""Tests for the simulations client's request and response handling."""

import json

import httpx
import pytest
from pydantic import ValidationError

from credit_api_client.client import SimulationsClient
from credit_api_client.config.settings import Settings
from credit_api_client.data import SEED_SIMULATIONS, SimulationDataFactory
from credit_api_client.exceptions import (
    ConflictException,
    NotFoundException,
    UnexpectedStatusError,
    UnprocessableEntityException,
)
from test_fixtures.fake_credit_api import FakeCreditApi


def _client_returning(response: httpx.Response) -> SimulationsClient:
    settings = Settings(base_uri="http://credit.test", port=8088, base_path="/api/v1")
    return SimulationsClient(settings, transport=httpx.MockTransport(lambda _: response))


def test_requests_are_sent_under_the_base_path():
    """Paths are joined to base URI, port and base path."""
    settings = Settings(base_uri="http://credit.test", port=9000, base_path="/api/v1")
    fake_api = FakeCreditApi(base_path="/api/v1")
    with SimulationsClient(settings, transport=fake_api.transport()) as client:
        client.get_simulation_by_social_security_number(SEED_SIMULATIONS[0].cpf)

    assert str(fake_api.requests[0].url) == (
        f"http://credit.test:9000/api/v1/simulations/{SEED_SIMULATIONS[0].cpf}"
    )


def test_each_call_is_a_single_round_trip(fake_client, fake_api):
    """No retries: one call, one request."""
    fake_client.delete_simulation_and_return_not_found("00000000000")
    assert len(fake_api.requests) == 1


def test_get_by_name_sends_name_as_query_parameter(fake_client, fake_api):
    """The name filter travels as ?name=."""
    fake_client.get_simulation_by_name("Maria")
    assert fake_api.requests[0].url.params["name"] == "Maria"
    assert fake_api.requests[0].method == "GET"


def test_create_sends_amount_as_json_number(fake_client, fake_api):
    """The request body carries every field, with amount as a number."""
    simulation = SimulationDataFactory().valid_simulation()

    fake_client.create_new_simulation(simulation)

    body = json.loads(fake_api.requests[0].content)
    assert fake_api.requests[0].method == "POST"
    assert body == {
        "name": simulation.name,
        "cpf": simulation.cpf,
        "email": simulation.email,
        "amount": 15000.0,
        "installments": 12,
        "insurance": True,
    }


def test_create_returns_location_header(fake_client):
    """The headers of a 201 are returned to the caller."""
    simulation = SimulationDataFactory().valid_simulation()

    headers = fake_client.create_new_simulation(simulation)

    assert headers["Location"].endswith(f"/simulations/{simulation.cpf}")


def test_get_unknown_cpf_raises_not_found(fake_client):
    """A plain call raises the typed exception of a known error status."""
    with pytest.raises(NotFoundException) as exc_info:
        fake_client.get_simulation_by_social_security_number("00000000000")
    assert exc_info.value.message == "CPF 00000000000 not found"
    assert exc_info.value.status_code == 404


def test_update_invalid_simulation_raises_unprocessable_entity(fake_client):
    """A plain update with an invalid body raises with the field errors."""
    invalid = SEED_SIMULATIONS[0].model_copy(update={"installments": 0})

    with pytest.raises(UnprocessableEntityException) as exc_info:
        fake_client.update_simulation(invalid.cpf, invalid)

    assert exc_info.value.errors == {
        "installments": "Installments must be equal or greater than 2"
    }


def test_create_existing_simulation_raises_conflict(fake_client):
    """A plain create with a CPF in use raises the conflict."""
    with pytest.raises(ConflictException) as exc_info:
        fake_client.create_new_simulation(SEED_SIMULATIONS[0])
    assert exc_info.value.message == "CPF already exists"


def test_expect_call_with_wrong_status_raises_unexpected_status(fake_client):
    """An expect call on a successful response is a setup error, not a value."""
    with pytest.raises(UnexpectedStatusError) as exc_info:
        fake_client.get_simulation_by_name_and_expect_not_found(SEED_SIMULATIONS[0].name)
    assert exc_info.value.status_code == 200
    assert exc_info.value.expected == 404


def test_unknown_error_status_raises_unexpected_status():
    """Statuses without a typed exception keep the body for diagnosis."""
    with _client_returning(httpx.Response(500, text="boom")) as client:
        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.get_all_simulations()
    assert exc_info.value.status_code == 500
    assert exc_info.value.expected == 200
    assert exc_info.value.body == "boom"


def test_delete_accepts_any_success_status():
    """A delete answered with 200 instead of 204 still succeeds."""
    with _client_returning(httpx.Response(200)) as client:
        assert client.delete_simulation(SEED_SIMULATIONS[0].cpf) is None


def test_unprocessable_entity_accepts_nested_errors():
    """A 422 body nesting the mapping under "errors" is unwrapped."""
    response = httpx.Response(422, json={"errors": {"email": "E-mail must be valid"}})
    with _client_returning(response) as client:
        unprocessable = client.update_simulation_and_expect_unprocessable_entity(
            SEED_SIMULATIONS[0]
        )
    assert unprocessable.errors == {"email": "E-mail must be valid"}


def test_get_by_name_returns_empty_list():
    """An empty 200 array is a valid name lookup result."""
    with _client_returning(httpx.Response(200, json=[])) as client:
        assert client.get_simulation_by_name("Nobody") == []


def test_update_returns_server_representation():
    """Unknown response keys are ignored when parsing."""
    expected = SEED_SIMULATIONS[1]
    body = {**expected.model_dump(mode="json"), "id": 2}
    with _client_returning(httpx.Response(200, json=body)) as client:
        assert client.update_simulation(expected.cpf, expected) == expected


def test_update_conflict_puts_duplicate_under_target_cpf(fake_client, fake_api):
    """The conflict call updates `cpf` with a body carrying another record's CPF."""
    target, duplicate = SEED_SIMULATIONS

    conflict = fake_client.update_simulation_and_expect_conflict(target.cpf, duplicate)

    assert conflict.message == "CPF already exists"
    request = fake_api.requests[0]
    assert request.method == "PUT"
    assert request.url.path.endswith(f"/simulations/{target.cpf}")
    assert json.loads(request.content)["cpf"] == duplicate.cpf


def test_update_conflict_requires_target_cpf(fake_client):
    """The record being updated is always named explicitly."""
    with pytest.raises(TypeError):
        fake_client.update_simulation_and_expect_conflict(SEED_SIMULATIONS[0])


def test_delete_with_error_status_reports_expected_204():
    """A failed delete reports the API's delete status as an int."""
    with _client_returning(httpx.Response(500, text="boom")) as client:
        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.delete_simulation(SEED_SIMULATIONS[0].cpf)
    assert exc_info.value.expected == 204
    assert exc_info.value.status_code == 500


def test_malformed_not_found_body_raises_validation_error():
    """A 404 body without a message is reported as a validation error."""
    with _client_returning(httpx.Response(404, json={"detail": "x"})) as client:
        with pytest.raises(ValidationError):
            client.delete_simulation_and_return_not_found(SEED_SIMULATIONS[0].cpf)
