from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    STRATEGY_CONTRACT,
    VAULT_CONTRACT,
    VERIFIER_CONTRACT,
)
from .errors import ConfigurationError

ABIS_DIR = Path(__file__).parent / "abis"

STRATEGY_ABI_PATH = ABIS_DIR / f"{STRATEGY_CONTRACT}.json"
VAULT_ABI_PATH = ABIS_DIR / f"{VAULT_CONTRACT}.json"
VERIFIER_ABI_PATH = ABIS_DIR / f"{VERIFIER_CONTRACT}.json"


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract: ABI plus creation bytecode."""

    name: str
    abi: list[dict]
    bytecode: str


def load_abi(path: str | Path) -> list[dict]:
    """Load an ABI from a JSON file and return its "abi" field.

    Args:
        path: Path to the JSON file containing an "abi" field.

    Returns:
        ABI as a list of dictionaries.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        KeyError: If the JSON does not contain an "abi" field.
    """
    p = Path(path)
    with p.open() as f:
        data = json.load(f)
    return data["abi"]


def load_strategy_abi() -> list[dict]:
    """Load the AaveV3Strategy ABI."""
    return load_abi(STRATEGY_ABI_PATH)


def load_vault_abi() -> list[dict]:
    """Load the SeedVault ABI."""
    return load_abi(VAULT_ABI_PATH)


def load_verifier_abi() -> list[dict]:
    """Load the SelfProtocolVerifier ABI."""
    return load_abi(VERIFIER_ABI_PATH)


def find_artifact_path(name: str, artifacts_dir: Path) -> Path:
    """Locate ``<name>.json`` anywhere under a Hardhat artifacts directory.

    Raises:
        ConfigurationError: If the directory or the artifact is missing, or
            the name is ambiguous.
    """
    if not artifacts_dir.is_dir():
        raise ConfigurationError(
            "SEED_DEPLOY_ARTIFACTS_DIR",
            f"artifacts directory {str(artifacts_dir)!r} does not exist; compile the contracts first",
        )

    matches = sorted(
        p for p in artifacts_dir.rglob(f"{name}.json") if "build-info" not in p.parts
    )
    if not matches:
        raise ConfigurationError(
            "SEED_DEPLOY_ARTIFACTS_DIR",
            f"no artifact for contract {name} under {str(artifacts_dir)!r}",
        )
    if len(matches) > 1:
        found = ", ".join(str(p) for p in matches)
        raise ConfigurationError(
            "SEED_DEPLOY_ARTIFACTS_DIR",
            f"ambiguous artifact for contract {name}: {found}",
        )
    return matches[0]


def load_artifact(name: str, artifacts_dir: Path) -> ContractArtifact:
    """Load ABI and creation bytecode of a compiled contract.

    Raises:
        ConfigurationError: If the artifact cannot be found or carries no
            deployable bytecode (e.g. an interface or abstract contract).
    """
    path = find_artifact_path(name, artifacts_dir)
    with path.open() as f:
        data = json.load(f)

    bytecode = data.get("bytecode") or ""
    if not bytecode or bytecode == "0x":
        raise ConfigurationError(
            "SEED_DEPLOY_ARTIFACTS_DIR",
            f"artifact {str(path)!r} has no creation bytecode",
        )
    if not bytecode.startswith("0x"):
        bytecode = f"0x{bytecode}"

    return ContractArtifact(name=name, abi=data["abi"], bytecode=bytecode)
