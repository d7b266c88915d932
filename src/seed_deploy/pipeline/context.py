from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..state import AppState

if TYPE_CHECKING:
    from ..abi import ContractArtifact
    from ..chain import ChainClient
    from ..config import DeploymentConfig
    from ..report import DeploymentSummary


@dataclass
class DeploymentContext:
    """Everything the stages produce, in the order they produce it."""

    state: AppState
    client: ChainClient | None = None
    config: DeploymentConfig | None = None
    artifacts: dict[str, ContractArtifact] = field(default_factory=dict)
    strategy_address: str | None = None
    implementation_address: str | None = None
    init_data: bytes | None = None
    proxy_address: str | None = None
    summary: DeploymentSummary | None = None
    executed_steps: list[str] = field(default_factory=list)
    skipped_steps: list[str] = field(default_factory=list)

    @property
    def client_required(self) -> ChainClient:
        if self.client is None:
            raise RuntimeError(
                "Chain client has not been set. Ensure connect_network() is called before accessing this property."
            )
        return self.client

    @property
    def config_required(self) -> DeploymentConfig:
        if self.config is None:
            raise RuntimeError(
                "Deployment config has not been set. Ensure load_config() is called before accessing this property."
            )
        return self.config

    def artifact_required(self, name: str) -> ContractArtifact:
        if name not in self.artifacts:
            raise RuntimeError(
                f"Artifact {name} has not been loaded. Ensure load_config() is called before accessing it."
            )
        return self.artifacts[name]

    @property
    def strategy_address_required(self) -> str:
        if self.strategy_address is None:
            raise RuntimeError(
                "Strategy address has not been set. Ensure deploy_strategy() is called before accessing this property."
            )
        return self.strategy_address

    @property
    def implementation_address_required(self) -> str:
        if self.implementation_address is None:
            raise RuntimeError(
                "Implementation address has not been set. Ensure deploy_vault_implementation() is called before accessing this property."
            )
        return self.implementation_address

    @property
    def init_data_required(self) -> bytes:
        if self.init_data is None:
            raise RuntimeError(
                "Initializer data has not been set. Ensure encode_initializer() is called before accessing this property."
            )
        return self.init_data

    @property
    def vault_address_required(self) -> str:
        """The proxy address, which is the vault's address from here on."""
        if self.proxy_address is None:
            raise RuntimeError(
                "Proxy address has not been set. Ensure deploy_proxy() is called before accessing this property."
            )
        return self.proxy_address

    @property
    def summary_required(self) -> DeploymentSummary:
        if self.summary is None:
            raise RuntimeError(
                "Summary has not been set. Ensure summarize() is called before accessing this property."
            )
        return self.summary

    def deployed_addresses(self) -> dict[str, str]:
        """Addresses confirmed so far, for reporting partial deployments."""
        deployed = {
            "strategy": self.strategy_address,
            "implementation": self.implementation_address,
            "proxy": self.proxy_address,
        }
        return {name: addr for name, addr in deployed.items() if addr is not None}
