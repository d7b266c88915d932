"""CLI entrypoint for seed-deploy."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Annotated, Any

import typer

from .config_loader import ConfigLoader
from .constants import CELO_ALFAJORES_CHAIN_ID, CELO_MAINNET_CHAIN_ID
from .errors import DeploymentError
from .logger import setup_logging
from .report import publish_summary
from .settings import DeploySettings, Network, OutputFormat
from .state import AppState

NETWORK_CHAIN_IDS = {
    Network.CELO: CELO_MAINNET_CHAIN_ID,
    Network.ALFAJORES: CELO_ALFAJORES_CHAIN_ID,
}

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    help="Deploy the Seed vault, its Aave strategy and proxy, and authorize it on the verifier.",
)


def _build_logger() -> logging.Logger:
    """Build a logger instance."""
    return logging.getLogger("seed_deploy")


def _show_config(settings: DeploySettings) -> dict[str, Any]:
    """Effective settings plus the deployment config for the selected network.

    The chain id comes from ``--network`` so no RPC connection is made.
    """
    chain_id = NETWORK_CHAIN_IDS[settings.network]
    config = ConfigLoader().load(chain_id)
    return {
        "settings": settings.as_safe_dict(),
        "chain_id": chain_id,
        "deployment": config.as_dict(),
    }


@app.callback(invoke_without_command=True)
def deploy(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a TOML config file (can include [seed_deploy] table).",
        ),
    ] = None,
    network: Annotated[
        Network | None,
        typer.Option(
            "--network",
            "-n",
            help="Network whose default RPC to use (celo or alfajores).",
        ),
    ] = None,
    rpc_url: Annotated[
        str | None,
        typer.Option(
            "--rpc-url",
            help="RPC endpoint; overrides the network's default RPC.",
        ),
    ] = None,
    artifacts_dir: Annotated[
        Path | None,
        typer.Option(
            "--artifacts-dir",
            help="Hardhat artifacts directory holding the compiled contracts.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--output-format",
            help="Summary output format (table or json).",
        ),
    ] = None,
    summary_file: Annotated[
        Path | None,
        typer.Option(
            "--summary-file",
            help="Also write the deployment summary as JSON to this path.",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Override logging verbosity (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option(
            "--show-config",
            help="Print effective config (with secrets redacted) and exit without deploying.",
        ),
    ] = False,
):
    """Deploy AaveV3Strategy, the SeedVault implementation and its ERC1967 proxy.

    Deployment parameters (ASSET_ADDRESS, VERIFIER_ADDRESS, MAX_USER_DEPOSIT, ...)
    are read from the environment or a .env file. Each step waits for its
    transaction to confirm; the first failure stops the run.
    """
    if config_path:
        os.environ["SEED_DEPLOY_CONFIG"] = str(config_path)

    init_kwargs: dict[str, Any] = {}
    if network is not None:
        init_kwargs["network"] = network
    if rpc_url is not None:
        init_kwargs["rpc_url"] = rpc_url
    if artifacts_dir is not None:
        init_kwargs["artifacts_dir"] = artifacts_dir
    if output_format is not None:
        init_kwargs["output_format"] = output_format
    if summary_file is not None:
        init_kwargs["summary_file"] = summary_file
    if log_level is not None:
        init_kwargs["log_level"] = log_level.upper()

    try:
        settings = DeploySettings(**init_kwargs)
    except (ValueError, FileNotFoundError) as e:
        raise typer.BadParameter(str(e)) from e

    setup_logging(settings.log_level)
    state = AppState(settings=settings, logger=_build_logger())

    from .pipeline.run import run_deployment

    try:
        if show_config:
            typer.echo(json.dumps(_show_config(settings), indent=2))
            raise typer.Exit(code=0)

        summary = asyncio.run(run_deployment(state))
    except DeploymentError as e:
        typer.echo(f"Error deploying vault: {e}", err=True)
        raise typer.Exit(code=1) from e

    publish_summary(state.settings, summary)


def run() -> None:
    """Entrypoint used by the console script."""
    app()


if __name__ == "__main__":
    run()
