"""Load the seed simulations into a running credit API.

Deletes simulations the suite did not create, restores changed seed
simulations and creates missing ones, so live acceptance runs start from a
known state.
"""

import sys
from pathlib import Path

import httpx

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console  # noqa: E402
from rich.table import Table  # noqa: E402

from credit_api_client.client import SimulationsClient  # noqa: E402
from credit_api_client.config.settings import settings  # noqa: E402
from credit_api_client.data import SEED_SIMULATIONS  # noqa: E402
from credit_api_client.observability import configure_logging  # noqa: E402
from credit_api_client.seeding import reset_simulations  # noqa: E402

console = Console()


def main():
    configure_logging(settings)
    console.print(f"[bold blue]Seeding simulations at {settings.api_url}...[/bold blue]")

    with SimulationsClient(settings) as client:
        try:
            summary = reset_simulations(client)
        except httpx.ConnectError as e:
            console.print(f"[red]Credit API not reachable: {e}[/red]")
            sys.exit(1)

    table = Table(title="Seed simulations")
    table.add_column("CPF")
    table.add_column("Name")
    table.add_column("Action")
    actions = {cpf: action for action, cpfs in summary.items() for cpf in cpfs}
    for simulation in SEED_SIMULATIONS:
        table.add_row(simulation.cpf, simulation.name, actions.get(simulation.cpf, "unchanged"))
    console.print(table)

    if summary["deleted"]:
        console.print(f"  Deleted {len(summary['deleted'])} extra simulations")
    console.print("[bold green]Seeding complete[/bold green]")


if __name__ == "__main__":
    main()
