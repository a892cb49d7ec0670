"""HTTP client for the credit API's simulation endpoints.

Every method performs exactly one request. Plain methods return domain
objects and raise the typed exception matching an error status. The
`..._expect_...` methods issue the same request, check that the API answered
with the expected error status, and return the parsed exception as a value so
the test can assert on it.
"""

import httpx
import logfire
from pydantic import TypeAdapter

from credit_api_client.config.settings import Settings, settings as default_settings
from credit_api_client.exceptions import (
    ERRORS_BY_STATUS,
    ConflictException,
    CreditApiError,
    NotFoundException,
    UnexpectedStatusError,
    UnprocessableEntityException,
)
from credit_api_client.models import Simulation

SIMULATIONS = "/simulations"
SIMULATIONS_CPF = "/simulations/{cpf}"

_simulation_list = TypeAdapter(list[Simulation])


class SimulationsClient:
    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._client = httpx.Client(
            base_url=self._settings.api_url,
            timeout=self._settings.http_timeout_seconds,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SimulationsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_simulation_by_social_security_number(self, cpf: str) -> Simulation:
        """Get the simulation registered for a CPF."""
        response = self._request("GET", SIMULATIONS_CPF.format(cpf=cpf))
        self._check(response, 200)
        return Simulation.model_validate(response.json())

    def get_simulation_by_social_security_number_and_expect_not_found(
        self, cpf: str
    ) -> NotFoundException:
        """Look up a CPF expecting 404 and return the parsed error."""
        response = self._request("GET", SIMULATIONS_CPF.format(cpf=cpf))
        return self._expect(response, NotFoundException)

    def get_simulation_by_name(self, name: str) -> list[Simulation]:
        """Get the simulations whose name matches."""
        response = self._request("GET", SIMULATIONS, params={"name": name})
        self._check(response, 200)
        return _simulation_list.validate_python(response.json())

    def get_simulation_by_name_and_expect_not_found(self, name: str) -> NotFoundException:
        """Filter by name expecting 404 and return the parsed error."""
        response = self._request("GET", SIMULATIONS, params={"name": name})
        return self._expect(response, NotFoundException)

    def get_all_simulations(self) -> list[Simulation]:
        """Get every simulation the API holds."""
        response = self._request("GET", SIMULATIONS)
        self._check(response, 200)
        return _simulation_list.validate_python(response.json())

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create_new_simulation(self, simulation: Simulation) -> httpx.Headers:
        """Create a simulation and return the response headers.

        The `Location` header points at the new resource and ends with its CPF.
        """
        response = self._request("POST", SIMULATIONS, json=self._body(simulation))
        self._check(response, 201)
        return response.headers

    def create_new_simulation_and_expect_conflict(
        self, simulation: Simulation
    ) -> ConflictException:
        """Create expecting 409 and return the parsed error."""
        response = self._request("POST", SIMULATIONS, json=self._body(simulation))
        return self._expect(response, ConflictException)

    def update_simulation(self, cpf: str, simulation: Simulation) -> Simulation:
        """Replace the simulation stored under `cpf`.

        Returns the API's representation after the update.
        """
        response = self._request(
            "PUT", SIMULATIONS_CPF.format(cpf=cpf), json=self._body(simulation)
        )
        self._check(response, 200)
        return Simulation.model_validate(response.json())

    def update_simulation_and_expect_conflict(
        self, cpf: str, simulation: Simulation
    ) -> ConflictException:
        """Put `simulation` under `cpf` expecting 409.

        The conflict comes from `simulation.cpf` already belonging to another
        record, so `cpf` is the record being updated, not the duplicate.
        """
        response = self._request(
            "PUT", SIMULATIONS_CPF.format(cpf=cpf), json=self._body(simulation)
        )
        return self._expect(response, ConflictException)

    def update_simulation_and_expect_not_found(
        self, cpf: str, simulation: Simulation
    ) -> NotFoundException:
        """Update an unknown CPF expecting 404 and return the parsed error."""
        response = self._request(
            "PUT", SIMULATIONS_CPF.format(cpf=cpf), json=self._body(simulation)
        )
        return self._expect(response, NotFoundException)

    def update_simulation_and_expect_unprocessable_entity(
        self, simulation: Simulation, cpf: str | None = None
    ) -> UnprocessableEntityException:
        """Update expecting 422. `cpf` defaults to the simulation's own CPF."""
        response = self._request(
            "PUT",
            SIMULATIONS_CPF.format(cpf=cpf or simulation.cpf),
            json=self._body(simulation),
        )
        return self._expect(response, UnprocessableEntityException)

    def delete_simulation(self, cpf: str) -> None:
        """Delete the simulation stored under `cpf`; any 2xx is success."""
        response = self._request("DELETE", SIMULATIONS_CPF.format(cpf=cpf))
        self._check(response, 204, any_success=True)

    def delete_simulation_and_return_not_found(self, cpf: str) -> NotFoundException:
        """Delete an unknown CPF expecting 404 and return the parsed error."""
        response = self._request("DELETE", SIMULATIONS_CPF.format(cpf=cpf))
        return self._expect(response, NotFoundException)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _body(simulation: Simulation) -> dict:
        return simulation.model_dump(mode="json")

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        with logfire.span("{method} {path}", method=method, path=path):
            response = self._client.request(method, path, **kwargs)
            logfire.info(
                "{method} {path} returned {status_code}",
                method=method,
                path=path,
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _check(
        response: httpx.Response, expected: int, *, any_success: bool = False
    ) -> None:
        """Raise unless the response has the expected status.

        With `any_success`, every 2xx status is accepted as well.

        Known error statuses raise their typed exception, anything else
        raises `UnexpectedStatusError`.
        """
        if response.status_code == expected or (any_success and response.is_success):
            return
        logfire.warn(
            "Expected {expected}, got {status_code}",
            expected=expected,
            status_code=response.status_code,
        )
        error_class = ERRORS_BY_STATUS.get(response.status_code)
        if error_class is not None:
            raise error_class.from_response(response)
        raise UnexpectedStatusError(expected, response)

    @staticmethod
    def _expect(
        response: httpx.Response, error_class: type[CreditApiError]
    ) -> CreditApiError:
        if response.status_code != error_class.status_code:
            logfire.warn(
                "Expected {expected}, got {status_code}",
                expected=error_class.status_code,
                status_code=response.status_code,
            )
            raise UnexpectedStatusError(error_class.status_code, response)
        return error_class.from_response(response)
