"""Tests for settings configuration loading."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from seed_deploy.constants import DEFAULT_ALFAJORES_RPC_URL, DEFAULT_CELO_RPC_URL
from seed_deploy.settings import DeploySettings, Network, OutputFormat


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the developer's environment and config files out of the tests."""
    for key in (
        "SEED_DEPLOY_CONFIG",
        "SEED_DEPLOY_NETWORK",
        "SEED_DEPLOY_RPC_URL",
        "SEED_DEPLOY_PRIVATE_KEY",
        "SEED_DEPLOY_ARTIFACTS_DIR",
        "SEED_DEPLOY_LOG_LEVEL",
        "SEED_DEPLOY_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def test_defaults():
    settings = DeploySettings()

    assert settings.network is Network.CELO
    assert settings.rpc_url_resolved == DEFAULT_CELO_RPC_URL
    assert settings.artifacts_dir == Path("artifacts")
    assert settings.output_format is OutputFormat.TABLE
    assert settings.private_key is None


def test_network_selects_default_rpc():
    settings = DeploySettings(network=Network.ALFAJORES)
    assert settings.rpc_url_resolved == DEFAULT_ALFAJORES_RPC_URL


def test_explicit_rpc_wins_over_network_default():
    settings = DeploySettings(network=Network.ALFAJORES, rpc_url="http://localhost:8545")
    assert settings.rpc_url_resolved == "http://localhost:8545"


def test_toml_config_loaded(tmp_path, monkeypatch):
    config_path = tmp_path / "deploy.toml"
    config_path.write_text(
        dedent(
            """
            [seed_deploy]
            network = "alfajores"
            artifacts_dir = "build/artifacts"
            receipt_timeout = 90
            log_level = "debug"
            """
        ).strip()
    )
    monkeypatch.setenv("SEED_DEPLOY_CONFIG", str(config_path))

    settings = DeploySettings()

    assert settings.network is Network.ALFAJORES
    assert settings.artifacts_dir == Path("build/artifacts")
    assert settings.receipt_timeout == 90
    assert settings.log_level == "DEBUG"


def test_local_toml_config_discovered(tmp_path):
    (tmp_path / "seed-deploy.toml").write_text('output_format = "json"\n')

    assert DeploySettings().output_format is OutputFormat.JSON


def test_precedence_cli_over_env_over_file(tmp_path, monkeypatch):
    config_path = tmp_path / "deploy.toml"
    config_path.write_text('rpc_url = "http://file"\nlog_level = "WARNING"\n')
    monkeypatch.setenv("SEED_DEPLOY_CONFIG", str(config_path))
    monkeypatch.setenv("SEED_DEPLOY_RPC_URL", "http://env")

    assert DeploySettings().rpc_url == "http://env"
    assert DeploySettings(rpc_url="http://cli").rpc_url == "http://cli"
    assert DeploySettings().log_level == "WARNING"


def test_private_key_in_toml_is_rejected(tmp_path, monkeypatch):
    config_path = tmp_path / "deploy.toml"
    config_path.write_text('private_key = "0x' + "11" * 32 + '"\n')
    monkeypatch.setenv("SEED_DEPLOY_CONFIG", str(config_path))

    with pytest.raises(ValueError, match="Security violation"):
        DeploySettings()


def test_missing_explicit_config_file(tmp_path, monkeypatch):
    monkeypatch.setenv("SEED_DEPLOY_CONFIG", str(tmp_path / "missing.toml"))
    with pytest.raises(FileNotFoundError):
        DeploySettings()


def test_private_key_from_env_is_redacted(monkeypatch):
    key = "0x" + "11" * 32
    monkeypatch.setenv("SEED_DEPLOY_PRIVATE_KEY", key)

    settings = DeploySettings()

    assert settings.private_key_required == key
    assert settings.as_safe_dict()["private_key"] == "***redacted***"
    assert key not in repr(settings)


def test_private_key_required_raises_when_unset():
    with pytest.raises(ValueError, match="private_key must be configured"):
        DeploySettings().private_key_required


def test_receipt_timeout_must_be_positive():
    with pytest.raises(ValidationError, match="greater than 0"):
        DeploySettings(receipt_timeout=0)
