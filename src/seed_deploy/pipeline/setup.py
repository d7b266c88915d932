"""Connection and configuration stages; nothing is deployed yet."""

from __future__ import annotations

import asyncio

from ..abi import load_artifact
from ..chain import connect
from ..config_loader import ConfigLoader
from ..constants import PROXY_CONTRACT, STRATEGY_CONTRACT, VAULT_CONTRACT
from ..units import format_units
from .context import DeploymentContext

DEPLOYED_CONTRACTS = (STRATEGY_CONTRACT, VAULT_CONTRACT, PROXY_CONTRACT)


async def connect_network(ctx: DeploymentContext) -> None:
    """Connect to the RPC and resolve the deployer and chain id.

    Raises:
        NetworkConnectionError: If the RPC cannot be reached
        ConfigurationError: If the deployer key is missing or malformed
    """
    log = ctx.state.logger
    client = await asyncio.to_thread(connect, ctx.state.settings)
    ctx.client = client

    log.info("Deploying with account: %s", client.deployer)
    log.info("Chain id: %d", client.chain_id)


async def load_config(ctx: DeploymentContext) -> None:
    """Resolve deployment parameters and load the contract artifacts.

    Artifacts are loaded here so that a missing build fails the run before
    the first transaction.
    """
    log = ctx.state.logger
    client = ctx.client_required

    config = ConfigLoader(ctx.state.config_source).load(client.chain_id)
    ctx.config = config

    log.info("Configuration:")
    log.info("- Asset: %s", config.asset)
    log.info("- aToken: %s", config.a_token)
    log.info("- Aave Provider: %s", config.addresses_provider)
    log.info("- Verifier: %s", config.verifier)
    log.info(
        "- Max User Deposit: %d (%s)",
        config.max_user_deposit,
        format_units(config.max_user_deposit, config.asset_decimals),
    )
    log.info(
        "- Max Total Deposit: %d (%s)",
        config.max_total_deposit,
        format_units(config.max_total_deposit, config.asset_decimals),
    )
    if config.rebalancer:
        log.info("- Rebalancer: %s", config.rebalancer)
    log.info("- Authorize vault on verifier: %s", config.authorize_vault_on_verifier)

    artifacts_dir = ctx.state.settings.artifacts_dir
    for name in DEPLOYED_CONTRACTS:
        ctx.artifacts[name] = load_artifact(name, artifacts_dir)
        log.debug("Loaded artifact %s from %s", name, artifacts_dir)
