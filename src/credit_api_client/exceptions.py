"""Typed errors for the credit API's error responses.

The client returns these as values from its "expect" calls and raises them
from its plain calls when the API answers with the matching status.
"""

import httpx

from credit_api_client.models import MessageBody, ValidationErrors


class CreditApiError(Exception):
    """Base class for every error response of the credit API."""

    status_code: int = 0

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "CreditApiError":
        body = MessageBody.model_validate(response.json())
        return cls(body.message)


class NotFoundException(CreditApiError):
    """404: the CPF or name does not match any simulation."""

    status_code = 404


class ConflictException(CreditApiError):
    """409: the CPF already belongs to another simulation."""

    status_code = 409


class UnprocessableEntityException(CreditApiError):
    """422: one or more fields failed validation."""

    status_code = 422

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(
            "; ".join(f"{path}: {message}" for path, message in self.errors.items())
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> "UnprocessableEntityException":
        body = ValidationErrors.model_validate(response.json())
        return cls(body.root)


class UnexpectedStatusError(CreditApiError):
    """The API answered with a status the call did not expect."""

    def __init__(self, expected: int, response: httpx.Response) -> None:
        self.expected = expected
        self.status_code = response.status_code
        self.body = response.text
        super().__init__(
            f"{response.request.method} {response.request.url} returned "
            f"{response.status_code}, expected {expected}: {response.text}"
        )


ERRORS_BY_STATUS: dict[int, type[CreditApiError]] = {
    NotFoundException.status_code: NotFoundException,
    ConflictException.status_code: ConflictException,
    UnprocessableEntityException.status_code: UnprocessableEntityException,
}
