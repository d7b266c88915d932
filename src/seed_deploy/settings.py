"""Settings module with unified configuration precedence: CLI > ENV > CONFIG FILE."""

from __future__ import annotations

import os
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .constants import DEFAULT_ALFAJORES_RPC_URL, DEFAULT_CELO_RPC_URL

load_dotenv()

SECRET_FIELDS = {"private_key"}


class Network(str, Enum):
    CELO = "celo"
    ALFAJORES = "alfajores"


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


NETWORK_RPC_DEFAULTS = {
    Network.CELO: DEFAULT_CELO_RPC_URL,
    Network.ALFAJORES: DEFAULT_ALFAJORES_RPC_URL,
}


class DeploySettings(BaseSettings):
    """Operational settings for a deployment run. Values may come from:
    - CLI (init kwargs)
    - ENV / .env (prefixed with SEED_DEPLOY_)
    - Config file (TOML), lowest precedence

    The deployment parameters themselves (ASSET_ADDRESS, VERIFIER_ADDRESS,
    ...) are not settings: they are read by the config loader.
    """

    # --- network ---
    network: Network = Network.CELO
    rpc_url: str | None = None
    receipt_timeout: float = Field(
        default=600.0,
        gt=0,
        description="Seconds to wait for a transaction receipt before failing the step.",
    )

    # --- signing ---
    private_key: SecretStr | None = None

    # --- contracts ---
    artifacts_dir: Path = Path("artifacts")

    # --- output ---
    output_format: OutputFormat = OutputFormat.TABLE
    summary_file: Path | None = None

    # --- logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SEED_DEPLOY_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("private_key", mode="before")
    @classmethod
    def wrap_secrets(cls, v: Any) -> SecretStr | None:
        """Wrap string secrets in SecretStr."""
        if v is None or isinstance(v, SecretStr):
            return v
        return SecretStr(v)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Custom config-file source with explicit precedence: CLI > ENV > FILE."""
        env_cfg = os.environ.get("SEED_DEPLOY_CONFIG")
        cfg_path = Path(env_cfg) if env_cfg else None

        class TomlConfigSource(PydanticBaseSettingsSource):
            def __init__(self, settings_cls: type[BaseSettings], path: Path | None):
                super().__init__(settings_cls)
                self._path = path

            def get_field_value(
                self, field: Any, field_name: str
            ) -> tuple[Any, str, bool]:
                return None, "", False

            def __call__(self) -> dict[str, Any]:
                if not self._path:
                    local_config = Path("seed-deploy.toml")
                    user_config = Path.home() / ".config" / "seed-deploy" / "config.toml"
                    if local_config.exists():
                        self._path = local_config
                    elif user_config.exists():
                        self._path = user_config
                    else:
                        return {}

                if not self._path.exists():
                    raise FileNotFoundError(f"Config file not found: {self._path}")

                with self._path.open("rb") as f:
                    data = tomllib.load(f)  # supports top-level or [seed_deploy]
                body = data.get("seed_deploy", data)
                if not isinstance(body, dict):
                    return {}

                for key in SECRET_FIELDS:
                    if key in body:
                        raise ValueError(
                            f"Security violation: '{key}' found in TOML config file. "
                            f"Secrets must only be provided via environment variables or CLI flags."
                        )

                return body

        return (
            init_settings,  # CLI (highest)
            env_settings,  # ENV
            dotenv_settings,  # .env
            TomlConfigSource(settings_cls, cfg_path),  # CONFIG (lowest)
            file_secret_settings,
        )

    def as_safe_dict(self) -> dict[str, Any]:
        """Return the settings as a JSON-friendly dict with secrets redacted."""
        data = self.model_dump(mode="json")
        if self.private_key:
            data["private_key"] = "***redacted***"
        return data

    @property
    def rpc_url_resolved(self) -> str:
        """The explicit RPC URL, or the default endpoint for ``network``."""
        return self.rpc_url or NETWORK_RPC_DEFAULTS[self.network]

    @property
    def private_key_required(self) -> str:
        """Get the deployer private key, raising ValueError if not set."""
        if self.private_key is None:
            raise ValueError("private_key must be configured")
        return self.private_key.get_secret_value()
