"""Chain ids, RPC endpoints and known contract addresses per network."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

CELO_MAINNET_CHAIN_ID = 42220
CELO_ALFAJORES_CHAIN_ID = 44787

DEFAULT_CELO_RPC_URL = "https://forno.celo.org"
DEFAULT_ALFAJORES_RPC_URL = "https://alfajores-forno.celo-testnet.org"


@dataclass(frozen=True)
class NetworkDefaultBundle:
    """Known contract addresses for one network.

    ``None`` means no address is known; callers must then require the value
    explicitly.
    """

    asset: Optional[str]
    a_token: Optional[str]
    addresses_provider: Optional[str]
    self_hub_v2: Optional[str]


# Aave market addresses queried from the Aave address book
CELO_MAINNET_DEFAULTS = NetworkDefaultBundle(
    asset="0x765DE816845861e75A25fCA122bb6898B8B1282a",  # cUSD
    a_token="0xBba98352628B0B0c4b40583F593fFCb630935a45",  # acUSD
    addresses_provider="0x9F7Cf9417D5251C59fE94fB9147feEe1aAd9Cea5",
    self_hub_v2="0xe57F4773bd9c9d8b6Cd70431117d353298B9f5BF",
)

# No Aave deployment is known on Alfajores yet
CELO_ALFAJORES_DEFAULTS = NetworkDefaultBundle(
    asset="0x874069Fa1Eb16D44d622F2e0Ca25eeA172369bC1",  # cUSD
    a_token=None,
    addresses_provider=None,
    self_hub_v2="0x18E05eAC6F31d03fb188FDc8e72FF354aB24EaB6",
)

NETWORK_DEFAULTS: Mapping[int, NetworkDefaultBundle] = MappingProxyType(
    {
        CELO_MAINNET_CHAIN_ID: CELO_MAINNET_DEFAULTS,
        CELO_ALFAJORES_CHAIN_ID: CELO_ALFAJORES_DEFAULTS,
    }
)

# Contract names as they appear in the Hardhat artifacts
STRATEGY_CONTRACT = "AaveV3Strategy"
VAULT_CONTRACT = "SeedVault"
PROXY_CONTRACT = "TestProxy"
VERIFIER_CONTRACT = "SelfProtocolVerifier"

DEFAULT_ASSET_DECIMALS = "18"
DEFAULT_MAX_USER_DEPOSIT = "10000"
DEFAULT_MAX_TOTAL_DEPOSIT = "1000000"
