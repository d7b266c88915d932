"""High-level pipeline orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from ..errors import DeploymentError
from ..report import DeploymentSummary
from ..state import AppState
from .context import DeploymentContext
from .deploy import (
    deploy_proxy,
    deploy_strategy,
    deploy_vault_implementation,
    encode_initializer,
)
from .link import (
    authorize_verifier,
    link_strategy,
    set_rebalancer,
    should_authorize_verifier,
    should_set_rebalancer,
)
from .setup import connect_network, load_config
from .summary import summarize


@dataclass(frozen=True)
class Stage:
    """One step of the deployment.

    ``enabled`` gates optional steps; a disabled stage is recorded as
    skipped and never runs.
    """

    name: str
    description: str
    run: Callable[[DeploymentContext], Awaitable[None]]
    enabled: Optional[Callable[[DeploymentContext], bool]] = None


def build_stages() -> tuple[Stage, ...]:
    """The full deployment sequence, in execution order."""
    return (
        Stage("connect", "Connecting to network", connect_network),
        Stage("load_config", "Loading deployment configuration", load_config),
        Stage("deploy_strategy", "Deploying AaveV3Strategy", deploy_strategy),
        Stage(
            "deploy_vault_implementation",
            "Deploying SeedVault implementation",
            deploy_vault_implementation,
        ),
        Stage("encode_initializer", "Encoding vault initializer", encode_initializer),
        Stage("deploy_proxy", "Deploying ERC1967 proxy", deploy_proxy),
        Stage("link_strategy", "Linking strategy to vault", link_strategy),
        Stage(
            "set_rebalancer",
            "Setting custom rebalancer",
            set_rebalancer,
            enabled=should_set_rebalancer,
        ),
        Stage(
            "authorize_verifier",
            "Authorizing vault on verifier",
            authorize_verifier,
            enabled=should_authorize_verifier,
        ),
        Stage("summarize", "Summarizing deployment", summarize),
    )


async def run_deployment(state: AppState) -> DeploymentSummary:
    """Execute the complete deployment pipeline.

    Stages run strictly one after another and each awaits its transaction
    receipt before the next starts. The first failure aborts the run;
    contracts confirmed before it stay deployed and are logged so the
    remaining steps can be completed by hand.

    Args:
        state: Application state containing settings and logger

    Returns:
        The summary of deployed addresses

    Raises:
        DeploymentError: From the first stage that fails
    """
    log = state.logger
    ctx = DeploymentContext(state=state)
    stages = build_stages()
    total = len(stages)

    log.info("Starting deployment on %s", state.settings.rpc_url_resolved)

    for index, stage in enumerate(stages, start=1):
        if stage.enabled is not None and not stage.enabled(ctx):
            log.debug("[%d/%d] Skipping %s", index, total, stage.name)
            ctx.skipped_steps.append(stage.name)
            continue

        log.info("[%d/%d] %s...", index, total, stage.description)
        try:
            await stage.run(ctx)
        except DeploymentError:
            log.error("Deployment aborted at step '%s'", stage.name)
            deployed = ctx.deployed_addresses()
            if deployed:
                log.error(
                    "Contracts already deployed (not rolled back): %s",
                    ", ".join(f"{name}={addr}" for name, addr in deployed.items()),
                )
            raise
        ctx.executed_steps.append(stage.name)
        log.info("✅ %s done", stage.name)

    log.info("Deployment complete")
    return ctx.summary_required
