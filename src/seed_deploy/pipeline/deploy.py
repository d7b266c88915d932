"""Contract deployment stages: strategy, vault implementation, proxy."""

from __future__ import annotations

import asyncio

from web3 import Web3

from ..chain import deploy_contract
from ..constants import PROXY_CONTRACT, STRATEGY_CONTRACT, VAULT_CONTRACT
from ..encoder import encode_initialize
from .context import DeploymentContext


async def deploy_strategy(ctx: DeploymentContext) -> None:
    log = ctx.state.logger
    config = ctx.config_required

    address = await asyncio.to_thread(
        deploy_contract,
        ctx.client_required,
        ctx.artifact_required(STRATEGY_CONTRACT),
        Web3.to_checksum_address(config.asset),
        Web3.to_checksum_address(config.a_token),
        Web3.to_checksum_address(config.addresses_provider),
        step="deploy_strategy",
    )
    ctx.strategy_address = address
    log.info("%s deployed at: %s", STRATEGY_CONTRACT, address)


async def deploy_vault_implementation(ctx: DeploymentContext) -> None:
    """Deploy the vault logic contract; its storage lives behind the proxy."""
    log = ctx.state.logger

    address = await asyncio.to_thread(
        deploy_contract,
        ctx.client_required,
        ctx.artifact_required(VAULT_CONTRACT),
        step="deploy_vault_implementation",
    )
    ctx.implementation_address = address
    log.info("%s implementation deployed at: %s", VAULT_CONTRACT, address)


async def encode_initializer(ctx: DeploymentContext) -> None:
    """Encode the vault's initialize() call for the proxy constructor.

    Raises:
        EncodingError: If the arguments do not match the implementation ABI
    """
    log = ctx.state.logger
    ctx.init_data = encode_initialize(
        ctx.config_required,
        ctx.strategy_address_required,
        abi=ctx.artifact_required(VAULT_CONTRACT).abi,
    )
    log.debug("Initializer call data is %d bytes", len(ctx.init_data))


async def deploy_proxy(ctx: DeploymentContext) -> None:
    """Deploy the ERC1967 proxy and initialize the vault in the same transaction."""
    log = ctx.state.logger

    address = await asyncio.to_thread(
        deploy_contract,
        ctx.client_required,
        ctx.artifact_required(PROXY_CONTRACT),
        ctx.implementation_address_required,
        ctx.init_data_required,
        step="deploy_proxy",
    )
    ctx.proxy_address = address
    log.info("ERC1967 proxy deployed at: %s", address)
    log.info("%s proxy initialized at: %s", VAULT_CONTRACT, address)
