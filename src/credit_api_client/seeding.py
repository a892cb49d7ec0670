"""Bring a live credit API back to the seed simulations."""

from collections.abc import Sequence

import logfire

from credit_api_client.client import SimulationsClient
from credit_api_client.data import SEED_SIMULATIONS
from credit_api_client.models import Simulation


def reset_simulations(
    client: SimulationsClient, seed: Sequence[Simulation] = SEED_SIMULATIONS
) -> dict[str, list[str]]:
    """Make the API hold exactly the seed simulations.

    Simulations outside the seed are deleted, changed seed simulations are
    restored, missing ones are created. Returns the affected CPFs per action.
    """
    with logfire.span("reset_simulations", seed_size=len(seed)):
        wanted = {simulation.cpf: simulation for simulation in seed}
        current = {simulation.cpf: simulation for simulation in client.get_all_simulations()}
        summary: dict[str, list[str]] = {"deleted": [], "restored": [], "created": []}

        for cpf in current:
            if cpf not in wanted:
                client.delete_simulation(cpf)
                summary["deleted"].append(cpf)

        for cpf, simulation in wanted.items():
            if cpf not in current:
                client.create_new_simulation(simulation)
                summary["created"].append(cpf)
            elif current[cpf] != simulation:
                client.update_simulation(cpf, simulation)
                summary["restored"].append(cpf)

        logfire.info("Simulations reset {summary}", summary=summary)
    return summary
