from __future__ import annotations

from ..report import DeploymentSummary
from .context import DeploymentContext


async def summarize(ctx: DeploymentContext) -> None:
    """Collect the final addresses into a DeploymentSummary."""
    client = ctx.client_required
    config = ctx.config_required

    ctx.summary = DeploymentSummary(
        chain_id=client.chain_id,
        deployer=client.deployer,
        strategy=ctx.strategy_address_required,
        implementation=ctx.implementation_address_required,
        vault=ctx.vault_address_required,
        verifier=config.verifier,
        rebalancer=config.rebalancer,
        vault_authorized_on_verifier="authorize_verifier" in ctx.executed_steps,
        executed_steps=[*ctx.executed_steps, "summarize"],
        skipped_steps=list(ctx.skipped_steps),
    )
