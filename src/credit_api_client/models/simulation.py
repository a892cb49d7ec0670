from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_serializer


class Simulation(BaseModel):
    """A credit simulation, keyed by the customer's CPF.

    Business rules (amount range, installment range, e-mail format) belong to
    the API, so invalid values are accepted here and rejected server-side.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    cpf: str
    email: str
    amount: Decimal
    installments: int
    insurance: bool

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, amount: Decimal) -> float | str:
        """Send the amount as a JSON number when a float holds it exactly.

        Floats keep about 15 significant digits. Larger or more precise
        amounts go out as a decimal string so the value is not rounded.
        """
        as_float = float(amount)
        if Decimal(repr(as_float)) == amount:
            return as_float
        return str(amount)
