"""Network connection and transaction helpers.

Every transaction is signed locally with the deployer key, broadcast, and
awaited until its receipt is available. Nothing here retries: a failed or
reverted transaction raises :class:`TransactionError` with the step name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_typing import URI, ChecksumAddress
from requests.exceptions import RequestException
from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception

from .abi import ContractArtifact
from .errors import ConfigurationError, NetworkConnectionError, TransactionError
from .logger import get_logger

if TYPE_CHECKING:
    from web3.contract import Contract
    from web3.types import TxReceipt

    from .settings import DeploySettings

logger = get_logger(__name__)


@dataclass
class ChainClient:
    """Connection, signer and chain id used for the whole run."""

    web3: Web3
    account: LocalAccount
    chain_id: int
    receipt_timeout: float = 600.0

    @property
    def deployer(self) -> ChecksumAddress:
        return self.account.address


def connect(settings: DeploySettings) -> ChainClient:
    """Connect to the configured RPC and load the deployer account.

    Raises:
        ConfigurationError: If the private key is missing or malformed.
        NetworkConnectionError: If the RPC cannot be reached.
    """
    if settings.private_key is None:
        raise ConfigurationError(
            "SEED_DEPLOY_PRIVATE_KEY", "missing required value, no default available"
        )
    try:
        account: LocalAccount = Account.from_key(settings.private_key_required)
    except Exception as e:
        raise ConfigurationError(
            "SEED_DEPLOY_PRIVATE_KEY", "malformed private key"
        ) from e

    rpc_url = settings.rpc_url_resolved
    w3 = Web3(Web3.HTTPProvider(URI(rpc_url), request_kwargs={"timeout": 30}))
    if not w3.is_connected():
        raise NetworkConnectionError(f"Failed to connect to RPC: {rpc_url}")

    try:
        chain_id = w3.eth.chain_id
    except Exception as e:
        raise NetworkConnectionError(
            f"Failed to read chain id from RPC {rpc_url}: {e}"
        ) from e

    return ChainClient(
        web3=w3,
        account=account,
        chain_id=chain_id,
        receipt_timeout=settings.receipt_timeout,
    )


def contract_at(client: ChainClient, address: str, abi: list[dict]) -> Contract:
    """Bind an ABI to a deployed address."""
    return client.web3.eth.contract(
        address=Web3.to_checksum_address(address), abi=abi
    )


def _tx_params(client: ChainClient) -> dict[str, Any]:
    return {
        "from": client.deployer,
        "nonce": client.web3.eth.get_transaction_count(client.deployer, "pending"),
        "chainId": client.chain_id,
    }


def execute(client: ChainClient, call: Any, step: str) -> TxReceipt:
    """Sign, broadcast and confirm a contract call or constructor.

    Args:
        client: Connected chain client
        call: A bound contract function or constructor (anything with
            ``build_transaction``)
        step: Pipeline step name, used in error reports

    Returns:
        The successful transaction receipt

    Raises:
        TransactionError: If the transaction cannot be built or sent, is not
            confirmed within ``receipt_timeout``, reverts, or the RPC
            connection drops mid-step.
    """
    try:
        tx = call.build_transaction(_tx_params(client))
        signed = client.account.sign_transaction(tx)
        tx_hash = client.web3.eth.send_raw_transaction(signed.raw_transaction)
    except (Web3Exception, ValueError) as e:
        raise TransactionError(step, f"could not submit transaction: {e}") from e
    except RequestException as e:
        raise TransactionError(
            step, f"RPC request failed while submitting transaction: {e}"
        ) from e

    tx_hash_hex = Web3.to_hex(tx_hash)
    logger.debug("[%s] sent transaction %s, waiting for receipt", step, tx_hash_hex)

    try:
        receipt = client.web3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=client.receipt_timeout
        )
    except TimeExhausted as e:
        raise TransactionError(
            step,
            f"transaction not confirmed within {client.receipt_timeout:.0f}s",
            tx_hash_hex,
        ) from e
    except RequestException as e:
        # The transaction may still be mined
        raise TransactionError(
            step, f"RPC request failed while waiting for receipt: {e}", tx_hash_hex
        ) from e

    if receipt["status"] != 1:
        raise TransactionError(
            step,
            f"transaction reverted in block {receipt.get('blockNumber')}",
            tx_hash_hex,
        )

    logger.debug(
        "[%s] confirmed in block %s (gas used: %s)",
        step,
        receipt.get("blockNumber"),
        receipt.get("gasUsed"),
    )
    return receipt


def deploy_contract(
    client: ChainClient,
    artifact: ContractArtifact,
    *constructor_args: Any,
    step: str,
) -> ChecksumAddress:
    """Deploy ``artifact`` and return the new contract's address.

    Raises:
        TransactionError: If the deployment fails or the receipt carries no
            contract address.
    """
    factory = client.web3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
    receipt = execute(client, factory.constructor(*constructor_args), step)

    address = receipt.get("contractAddress")
    if not address:
        raise TransactionError(
            step,
            f"{artifact.name} deployment receipt has no contract address",
            Web3.to_hex(receipt["transactionHash"]),
        )
    return Web3.to_checksum_address(address)
