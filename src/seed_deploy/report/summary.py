from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Optional

NEXT_STEPS = (
    "Verify contracts on CeloScan",
    "Update frontend environment variables",
    "Test deposit/withdraw flow",
    "Configure rebalancer/treasury roles as needed",
)


@dataclass
class DeploymentSummary:
    """Final addresses of a completed deployment run."""

    chain_id: int
    deployer: str
    strategy: str
    implementation: str
    vault: str
    verifier: str
    rebalancer: Optional[str] = None
    vault_authorized_on_verifier: bool = False
    executed_steps: list[str] = field(default_factory=list)
    skipped_steps: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Convert summary to dictionary format."""
        return asdict(self)
