"""Build the DeploymentConfig for the active network.

Values are read from a flat key/value source (the process environment,
with ``.env`` already loaded). Network defaults fill in the Aave market
addresses on known chains; the verifier address is never defaulted.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .config import DeploymentConfig
from .constants import (
    DEFAULT_ASSET_DECIMALS,
    DEFAULT_MAX_TOTAL_DEPOSIT,
    DEFAULT_MAX_USER_DEPOSIT,
)
from .logger import get_logger
from .networks import lookup_network_defaults
from .resolvers import AddressResolver, AmountResolver

logger = get_logger(__name__)

ASSET_DECIMALS = "ASSET_DECIMALS"
ASSET_ADDRESS = "ASSET_ADDRESS"
ATOKEN_ADDRESS = "ATOKEN_ADDRESS"
AAVE_PROVIDER_ADDRESS = "AAVE_PROVIDER_ADDRESS"
VERIFIER_ADDRESS = "VERIFIER_ADDRESS"
MAX_USER_DEPOSIT = "MAX_USER_DEPOSIT"
MAX_TOTAL_DEPOSIT = "MAX_TOTAL_DEPOSIT"
REBALANCER_ADDRESS = "REBALANCER_ADDRESS"
AUTHORIZE_VAULT = "AUTHORIZE_VAULT"


class ConfigLoader:
    """Compose the resolvers and network defaults into a DeploymentConfig."""

    def __init__(self, source: Optional[Mapping[str, str]] = None):
        self._source = os.environ if source is None else source
        self.addresses = AddressResolver(self._source)
        self.amounts = AmountResolver(self._source)

    def load(self, chain_id: int) -> DeploymentConfig:
        """Resolve every deployment parameter for ``chain_id``.

        Raises:
            ConfigurationError: From the first resolution that fails.
        """
        # Amount parsing depends on the decimals, so they come first
        asset_decimals = self.amounts.resolve_decimals(
            ASSET_DECIMALS, DEFAULT_ASSET_DECIMALS
        )
        defaults = lookup_network_defaults(chain_id)

        asset = self.addresses.resolve(
            ASSET_ADDRESS, defaults.asset if defaults else None
        )
        a_token = self.addresses.resolve(
            ATOKEN_ADDRESS, defaults.a_token if defaults else None
        )
        addresses_provider = self.addresses.resolve(
            AAVE_PROVIDER_ADDRESS, defaults.addresses_provider if defaults else None
        )
        # The verifier must already be deployed; it is never defaulted
        verifier = self.addresses.require_explicit(VERIFIER_ADDRESS)

        max_user_deposit = self.amounts.resolve(
            MAX_USER_DEPOSIT, asset_decimals, DEFAULT_MAX_USER_DEPOSIT
        )
        max_total_deposit = self.amounts.resolve(
            MAX_TOTAL_DEPOSIT, asset_decimals, DEFAULT_MAX_TOTAL_DEPOSIT
        )

        rebalancer = self.addresses.resolve_optional(REBALANCER_ADDRESS)
        authorize = self._source.get(AUTHORIZE_VAULT) != "false"

        config = DeploymentConfig(
            asset=asset,
            a_token=a_token,
            addresses_provider=addresses_provider,
            verifier=verifier,
            max_user_deposit=max_user_deposit,
            max_total_deposit=max_total_deposit,
            asset_decimals=asset_decimals,
            rebalancer=rebalancer,
            authorize_vault_on_verifier=authorize,
        )
        logger.debug("Loaded deployment config for chain %d: %s", chain_id, config)
        return config


def load_deployment_config(
    chain_id: int, source: Optional[Mapping[str, str]] = None
) -> DeploymentConfig:
    """Load the DeploymentConfig for ``chain_id`` from ``source`` (default: environment)."""
    return ConfigLoader(source).load(chain_id)
