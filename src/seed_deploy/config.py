from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class DeploymentConfig:
    """Validated parameters for one deployment run.

    Addresses are 0x-prefixed 40-hex-digit strings. Deposit caps are
    integers scaled by ``10**asset_decimals``.
    """

    asset: str
    a_token: str
    addresses_provider: str
    verifier: str
    max_user_deposit: int
    max_total_deposit: int
    asset_decimals: int
    rebalancer: Optional[str] = None
    authorize_vault_on_verifier: bool = True

    def as_dict(self) -> dict[str, object]:
        return asdict(self)
