"""Rich console formatter for the deployment summary."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .summary import NEXT_STEPS, DeploymentSummary


def _build_addresses_table(summary: DeploymentSummary) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Contract", style="dim")
    table.add_column("Address", style="cyan")
    table.add_row("AaveV3Strategy", summary.strategy)
    table.add_row("SeedVault Implementation", summary.implementation)
    table.add_row("SeedVault Proxy", summary.vault)
    table.add_row("SelfProtocolVerifier", summary.verifier)
    if summary.rebalancer:
        table.add_row("Rebalancer", summary.rebalancer)
    return table


def _build_run_table(summary: DeploymentSummary) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="green")
    table.add_row("Chain id", str(summary.chain_id))
    table.add_row("Deployer", summary.deployer)
    table.add_row(
        "Vault authorized on verifier",
        "yes" if summary.vault_authorized_on_verifier else "no",
    )
    if summary.skipped_steps:
        table.add_row("Skipped steps", ", ".join(summary.skipped_steps))
    return table


def format_summary_table(summary: DeploymentSummary, console: Console | None = None) -> None:
    """Print the deployment summary as rich panels.

    Args:
        summary: The completed deployment summary
        console: Console to print to; stdout when omitted
    """
    console = console or Console()

    next_steps = Text()
    for index, step in enumerate(NEXT_STEPS, start=1):
        next_steps.append(f"{index}. {step}\n")

    console.print(
        Panel(
            Group(
                _build_addresses_table(summary),
                Text(),
                _build_run_table(summary),
            ),
            title="[bold]Deployment Complete[/]",
            border_style="green",
        )
    )
    console.print(
        Panel(next_steps, title="[bold]Next Steps[/]", border_style="blue")
    )
