"""Schemas for the bodies the API returns on 4xx responses."""

from pydantic import BaseModel, ConfigDict, RootModel, model_validator


class MessageBody(BaseModel):
    """Body of a 404 or 409 response."""

    model_config = ConfigDict(extra="ignore")

    message: str


class ValidationErrors(RootModel[dict[str, str]]):
    """Body of a 422 response: field path mapped to its validation message."""

    @model_validator(mode="before")
    @classmethod
    def unwrap_errors(cls, data):
        # Some API versions nest the mapping under an "errors" key
        if isinstance(data, dict) and isinstance(data.get("errors"), dict):
            return data["errors"]
        return data
