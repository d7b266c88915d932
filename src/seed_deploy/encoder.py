"""Call data encoding for the vault initializer."""

from __future__ import annotations

import logging

from web3 import Web3
from web3.exceptions import Web3Exception

from .abi import load_vault_abi
from .config import DeploymentConfig
from .errors import EncodingError

logger = logging.getLogger(__name__)

# Any syntactically valid address works for offline encoding
_ENCODING_TARGET = "0x0000000000000000000000000000000000000001"


def encode_initialize(
    config: DeploymentConfig,
    strategy_address: str,
    abi: list[dict] | None = None,
) -> bytes:
    """Encode ``initialize(asset, strategy, verifier, maxUserDeposit, maxTotalDeposit)``.

    Args:
        config: Deployment configuration
        strategy_address: Address of the deployed strategy
        abi: Vault ABI; the bundled SeedVault ABI when omitted

    Returns:
        Encoded call data (selector + arguments)

    Raises:
        EncodingError: If the arguments do not match the ABI.
    """
    w3 = Web3()
    contract = w3.eth.contract(
        address=w3.to_checksum_address(_ENCODING_TARGET),
        abi=abi if abi is not None else load_vault_abi(),
    )

    try:
        args = [
            w3.to_checksum_address(config.asset),
            w3.to_checksum_address(strategy_address),
            w3.to_checksum_address(config.verifier),
            config.max_user_deposit,
            config.max_total_deposit,
        ]
        calldata_hex = contract.encode_abi(
            abi_element_identifier="initialize",
            args=args,
        )
    except (Web3Exception, ValueError, TypeError) as e:
        raise EncodingError(f"Failed to encode initialize(): {e}") from e

    calldata = bytes.fromhex(calldata_hex.removeprefix("0x"))
    logger.debug("Encoded initialize() call data: %s", calldata_hex)
    return calldata
