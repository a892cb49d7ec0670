from decimal import Decimal

from credit_api_client.models import Simulation


class SimulationBuilder:
    """Fluent construction of a `Simulation`, one field at a time.

    Example:
        SimulationBuilder().name("Elias").cpf("98765432109").amount("30000.00").build()
    """

    def __init__(self) -> None:
        self._name = ""
        self._cpf = ""
        self._email = ""
        self._amount = Decimal("0")
        self._installments = 0
        self._insurance = False

    def name(self, name: str) -> "SimulationBuilder":
        self._name = name
        return self

    def cpf(self, cpf: str) -> "SimulationBuilder":
        self._cpf = cpf
        return self

    def email(self, email: str) -> "SimulationBuilder":
        self._email = email
        return self

    def amount(self, amount: Decimal | str | int | float) -> "SimulationBuilder":
        self._amount = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        return self

    def installments(self, installments: int) -> "SimulationBuilder":
        self._installments = installments
        return self

    def insurance(self, insurance: bool) -> "SimulationBuilder":
        self._insurance = insurance
        return self

    def build(self) -> Simulation:
        return Simulation(
            name=self._name,
            cpf=self._cpf,
            email=self._email,
            amount=self._amount,
            installments=self._installments,
            insurance=self._insurance,
        )
