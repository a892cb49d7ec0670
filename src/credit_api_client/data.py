"""Fixture data for the credit API suite.

The seed records are the ones the credit API starts with. Against a live API
they are loaded by `scripts/seed.py`; the fake transport in `test_fixtures`
starts from the same list.
"""

from collections.abc import Iterator, Sequence
from decimal import Decimal
from itertools import count

from credit_api_client.builder import SimulationBuilder
from credit_api_client.models import Simulation

SEED_SIMULATIONS: tuple[Simulation, ...] = (
    SimulationBuilder()
    .name("Tiago")
    .cpf("66414919004")
    .email("tiago@email.com")
    .amount("11000.00")
    .installments(3)
    .insurance(True)
    .build(),
    SimulationBuilder()
    .name("Maria")
    .cpf("17822386034")
    .email("maria@email.com")
    .amount("20000.00")
    .installments(5)
    .insurance(False)
    .build(),
)


def cpf_with_check_digits(base: str) -> str:
    """Append the two CPF check digits to a 9-digit base."""
    digits = [int(d) for d in base]
    for _ in range(2):
        weight = len(digits) + 1
        total = sum(d * (weight - i) for i, d in enumerate(digits))
        remainder = total % 11
        digits.append(0 if remainder < 2 else 11 - remainder)
    return "".join(str(d) for d in digits)


class SimulationDataFactory:
    """Deterministic simulations for the acceptance tests."""

    def __init__(self, seed: Sequence[Simulation] = SEED_SIMULATIONS) -> None:
        if not seed:
            raise ValueError("At least one seed simulation is required")
        self._seed = tuple(seed)

    def one_existing_simulation(self) -> Simulation:
        return self._seed[0]

    def all_existing_simulations(self) -> list[Simulation]:
        return list(self._seed)

    def not_existent_cpf(self) -> str:
        """A well-formed CPF that no seed simulation uses."""
        return next(self._unused_cpfs())

    def valid_simulation(self) -> Simulation:
        """A simulation that passes every API rule and is not in the seed."""
        unused = self._unused_cpfs()
        next(unused)  # reserved for not_existent_cpf()
        return (
            SimulationBuilder()
            .name("Valid Customer")
            .cpf(next(unused))
            .email("valid.customer@email.com")
            .amount("15000.00")
            .installments(12)
            .insurance(True)
            .build()
        )

    def _unused_cpfs(self) -> Iterator[str]:
        existing = {simulation.cpf for simulation in self._seed}
        for number in count(123456789):
            cpf = cpf_with_check_digits(f"{number:09d}")
            if cpf not in existing:
                yield cpf


def failed_validations(
    factory: SimulationDataFactory | None = None,
) -> list[tuple[Simulation, str, str]]:
    """Invalid payloads as (simulation, field path, expected message).

    Each payload is an existing simulation with a single field broken, so the
    update reaches validation instead of failing on an unknown CPF.
    """
    base = (factory or SimulationDataFactory()).one_existing_simulation()
    return [
        (base.model_copy(update={"name": ""}), "name", "Name cannot be empty"),
        (base.model_copy(update={"email": "not-an-email"}), "email", "E-mail must be valid"),
        (
            base.model_copy(update={"amount": Decimal("999.99")}),
            "amount",
            "Amount must be equal or greater than $ 1.000",
        ),
        (
            base.model_copy(update={"amount": Decimal("40000.01")}),
            "amount",
            "Amount must be equal or less than than $ 40.000",
        ),
        (
            base.model_copy(update={"installments": 1}),
            "installments",
            "Installments must be equal or greater than 2",
        ),
        (
            base.model_copy(update={"installments": 49}),
            "installments",
            "Installments must be equal or less than 48",
        ),
    ]
