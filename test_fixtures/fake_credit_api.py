"""In-memory stand-in for the credit API, served through httpx.MockTransport.

It answers the simulation endpoints with the same statuses, messages and
validation rules as the real API, starting from the seed simulations.
"""

import json
import re
from decimal import Decimal, InvalidOperation

import httpx

from credit_api_client.data import SEED_SIMULATIONS

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate(payload: dict) -> dict[str, str]:
    """Apply the API's field rules, returning field path to message."""
    errors: dict[str, str] = {}
    if not str(payload.get("name") or "").strip():
        errors["name"] = "Name cannot be empty"
    if not str(payload.get("cpf") or "").strip():
        errors["cpf"] = "CPF cannot be empty"
    if not EMAIL_PATTERN.match(str(payload.get("email") or "")):
        errors["email"] = "E-mail must be valid"

    try:
        amount = Decimal(str(payload.get("amount")))
    except InvalidOperation:
        errors["amount"] = "Amount cannot be empty"
    else:
        if amount < Decimal("1000"):
            errors["amount"] = "Amount must be equal or greater than $ 1.000"
        elif amount > Decimal("40000"):
            errors["amount"] = "Amount must be equal or less than than $ 40.000"

    installments = payload.get("installments")
    if not isinstance(installments, int) or isinstance(installments, bool):
        errors["installments"] = "Installments cannot be empty"
    elif installments < 2:
        errors["installments"] = "Installments must be equal or greater than 2"
    elif installments > 48:
        errors["installments"] = "Installments must be equal or less than 48"

    if not isinstance(payload.get("insurance"), bool):
        errors["insurance"] = "One of the insurance options must be selected"
    return errors


class FakeCreditApi:
    """Request handler for `httpx.MockTransport`."""

    def __init__(self, base_path: str = "/api/v1", seed=SEED_SIMULATIONS) -> None:
        self.base_path = "/" + base_path.strip("/") if base_path.strip("/") else ""
        self.simulations: dict[str, dict] = {
            simulation.cpf: simulation.model_dump(mode="json") for simulation in seed
        }
        self.requests: list[httpx.Request] = []

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        collection = f"{self.base_path}/simulations"
        path = request.url.path.rstrip("/")

        if path == collection:
            if request.method == "GET":
                return self._list(request)
            if request.method == "POST":
                return self._create(request)
        elif path.startswith(collection + "/"):
            cpf = path[len(collection) + 1 :]
            if request.method == "GET":
                return self._get(cpf)
            if request.method == "PUT":
                return self._update(cpf, request)
            if request.method == "DELETE":
                return self._delete(cpf)
            return httpx.Response(405)
        else:
            return httpx.Response(404, json={"message": f"No route for {path}"})
        return httpx.Response(405)

    def _list(self, request: httpx.Request) -> httpx.Response:
        name = request.url.params.get("name")
        if name is None:
            return httpx.Response(200, json=list(self.simulations.values()))
        matches = [s for s in self.simulations.values() if s["name"] == name]
        if not matches:
            return httpx.Response(404, json={"message": "Name not found"})
        return httpx.Response(200, json=matches)

    def _get(self, cpf: str) -> httpx.Response:
        if cpf not in self.simulations:
            return self._cpf_not_found(cpf)
        return httpx.Response(200, json=self.simulations[cpf])

    def _create(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        errors = validate(payload)
        if errors:
            return httpx.Response(422, json=errors)
        if payload["cpf"] in self.simulations:
            return httpx.Response(409, json={"message": "CPF already exists"})
        self.simulations[payload["cpf"]] = payload
        location = str(request.url).rstrip("/") + f"/{payload['cpf']}"
        return httpx.Response(201, headers={"Location": location})

    def _update(self, cpf: str, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        errors = validate(payload)
        if errors:
            return httpx.Response(422, json=errors)
        if cpf not in self.simulations:
            return self._cpf_not_found(cpf)
        if payload["cpf"] != cpf and payload["cpf"] in self.simulations:
            return httpx.Response(409, json={"message": "CPF already exists"})
        del self.simulations[cpf]
        self.simulations[payload["cpf"]] = payload
        return httpx.Response(200, json=payload)

    def _delete(self, cpf: str) -> httpx.Response:
        if self.simulations.pop(cpf, None) is None:
            return self._cpf_not_found(cpf)
        return httpx.Response(204)

    @staticmethod
    def _cpf_not_found(cpf: str) -> httpx.Response:
        return httpx.Response(404, json={"message": f"CPF {cpf} not found"})
