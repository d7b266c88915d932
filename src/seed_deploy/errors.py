"""Error taxonomy for the deployment run.

Every error is fatal: nothing in the package retries or recovers locally.
"""

from __future__ import annotations


class DeploymentError(Exception):
    """Base class for all errors that abort a deployment run."""


class ConfigurationError(DeploymentError):
    """A configuration value is missing or invalid."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"{key}: {reason}")
        self.key = key
        self.reason = reason


class NetworkConnectionError(DeploymentError):
    """The target network could not be reached."""


class TransactionError(DeploymentError):
    """A deployment or call transaction reverted or failed to confirm."""

    def __init__(self, step: str, message: str, tx_hash: str | None = None):
        detail = f"[{step}] {message}"
        if tx_hash:
            detail += f" (tx: {tx_hash})"
        super().__init__(detail)
        self.step = step
        self.tx_hash = tx_hash


class EncodingError(DeploymentError):
    """Call data could not be encoded against the contract ABI."""
