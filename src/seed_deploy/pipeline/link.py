"""Post-deployment wiring: strategy link, rebalancer, verifier authorization."""

from __future__ import annotations

import asyncio

from web3 import Web3

from ..abi import load_strategy_abi, load_vault_abi, load_verifier_abi
from ..chain import contract_at, execute
from .context import DeploymentContext


async def link_strategy(ctx: DeploymentContext) -> None:
    """Point the strategy at the vault proxy."""
    client = ctx.client_required
    vault_address = ctx.vault_address_required

    strategy = contract_at(client, ctx.strategy_address_required, load_strategy_abi())
    await asyncio.to_thread(
        execute,
        client,
        strategy.functions.setVault(vault_address),
        "link_strategy",
    )
    ctx.state.logger.info("Strategy linked to vault %s", vault_address)


def should_set_rebalancer(ctx: DeploymentContext) -> bool:
    """Only a rebalancer other than the deployer needs an explicit call."""
    rebalancer = ctx.config_required.rebalancer
    if not rebalancer:
        return False
    return rebalancer.lower() != ctx.client_required.deployer.lower()


async def set_rebalancer(ctx: DeploymentContext) -> None:
    client = ctx.client_required
    rebalancer = ctx.config_required.rebalancer
    if rebalancer is None:
        raise RuntimeError(
            "No rebalancer configured. Ensure should_set_rebalancer() gates this stage."
        )

    ctx.state.logger.info("Setting custom rebalancer: %s", rebalancer)
    vault = contract_at(client, ctx.vault_address_required, load_vault_abi())
    await asyncio.to_thread(
        execute,
        client,
        vault.functions.setRebalancer(Web3.to_checksum_address(rebalancer)),
        "set_rebalancer",
    )
    ctx.state.logger.info("Rebalancer set")


def should_authorize_verifier(ctx: DeploymentContext) -> bool:
    return ctx.config_required.authorize_vault_on_verifier


async def authorize_verifier(ctx: DeploymentContext) -> None:
    """Allow the vault to call the verifier."""
    client = ctx.client_required
    config = ctx.config_required

    verifier = contract_at(client, config.verifier, load_verifier_abi())
    await asyncio.to_thread(
        execute,
        client,
        verifier.functions.authorizeCaller(ctx.vault_address_required),
        "authorize_verifier",
    )
    ctx.state.logger.info("Vault authorized on verifier %s", config.verifier)
