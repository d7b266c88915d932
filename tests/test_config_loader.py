"""Tests for config_loader module."""

from __future__ import annotations

import pytest

from seed_deploy.config_loader import ConfigLoader, load_deployment_config
from seed_deploy.constants import CELO_ALFAJORES_DEFAULTS, CELO_MAINNET_DEFAULTS
from seed_deploy.errors import ConfigurationError

VERIFIER = "0xABCDabcdABCDabcdABCDabcdABCDabcdABCDabcd"
ASSET = "0x1111111111111111111111111111111111111111"
ATOKEN = "0x2222222222222222222222222222222222222222"
PROVIDER = "0x3333333333333333333333333333333333333333"
REBALANCER = "0x4444444444444444444444444444444444444444"


@pytest.fixture
def explicit_source() -> dict[str, str]:
    return {
        "ASSET_ADDRESS": ASSET,
        "ATOKEN_ADDRESS": ATOKEN,
        "AAVE_PROVIDER_ADDRESS": PROVIDER,
        "VERIFIER_ADDRESS": VERIFIER,
    }


def test_mainnet_defaults_with_only_verifier():
    config = ConfigLoader({"VERIFIER_ADDRESS": VERIFIER}).load(42220)

    assert config.asset == CELO_MAINNET_DEFAULTS.asset
    assert config.a_token == CELO_MAINNET_DEFAULTS.a_token
    assert config.addresses_provider == CELO_MAINNET_DEFAULTS.addresses_provider
    assert config.verifier == VERIFIER
    assert config.asset_decimals == 18
    assert config.max_user_deposit == 10000 * 10**18
    assert config.max_total_deposit == 1000000 * 10**18
    assert config.authorize_vault_on_verifier is True
    assert config.rebalancer is None


def test_unknown_network_without_addresses_fails_on_first_address():
    with pytest.raises(ConfigurationError, match="missing required value") as exc_info:
        ConfigLoader({"VERIFIER_ADDRESS": VERIFIER}).load(1)
    assert exc_info.value.key == "ASSET_ADDRESS"


def test_unknown_network_with_explicit_addresses(explicit_source):
    config = ConfigLoader(explicit_source).load(1)
    assert (config.asset, config.a_token, config.addresses_provider) == (
        ASSET,
        ATOKEN,
        PROVIDER,
    )


@pytest.mark.parametrize("chain_id", [42220, 44787, 1])
def test_verifier_is_never_defaulted(chain_id, explicit_source):
    del explicit_source["VERIFIER_ADDRESS"]
    with pytest.raises(ConfigurationError) as exc_info:
        ConfigLoader(explicit_source).load(chain_id)
    assert exc_info.value.key == "VERIFIER_ADDRESS"


def test_explicit_values_override_network_defaults():
    config = ConfigLoader(
        {"ASSET_ADDRESS": ASSET, "VERIFIER_ADDRESS": VERIFIER}
    ).load(42220)
    assert config.asset == ASSET
    assert config.a_token == CELO_MAINNET_DEFAULTS.a_token


def test_alfajores_requires_atoken_explicitly():
    with pytest.raises(ConfigurationError) as exc_info:
        ConfigLoader({"VERIFIER_ADDRESS": VERIFIER}).load(44787)
    assert exc_info.value.key == "ATOKEN_ADDRESS"


def test_alfajores_falls_back_to_known_asset():
    config = ConfigLoader(
        {
            "ATOKEN_ADDRESS": ATOKEN,
            "AAVE_PROVIDER_ADDRESS": PROVIDER,
            "VERIFIER_ADDRESS": VERIFIER,
        }
    ).load(44787)
    assert config.asset == CELO_ALFAJORES_DEFAULTS.asset


@pytest.mark.parametrize(
    "value, expected",
    [
        ("false", False),
        ("False", True),
        ("0", True),
        ("true", True),
        ("", True),
    ],
)
def test_authorize_vault_only_disabled_by_literal_false(value, expected, explicit_source):
    explicit_source["AUTHORIZE_VAULT"] = value
    config = ConfigLoader(explicit_source).load(1)
    assert config.authorize_vault_on_verifier is expected


def test_amounts_use_asset_decimals(explicit_source):
    explicit_source.update(
        {"ASSET_DECIMALS": "6", "MAX_USER_DEPOSIT": "250.5", "MAX_TOTAL_DEPOSIT": "5000"}
    )
    config = ConfigLoader(explicit_source).load(1)
    assert config.asset_decimals == 6
    assert config.max_user_deposit == 250_500_000
    assert config.max_total_deposit == 5_000_000_000


def test_amount_precision_beyond_decimals_fails(explicit_source):
    explicit_source.update({"ASSET_DECIMALS": "2", "MAX_USER_DEPOSIT": "1.001"})
    with pytest.raises(ConfigurationError) as exc_info:
        ConfigLoader(explicit_source).load(1)
    assert exc_info.value.key == "MAX_USER_DEPOSIT"


def test_invalid_decimals_fail_before_addresses():
    with pytest.raises(ConfigurationError) as exc_info:
        ConfigLoader({"ASSET_DECIMALS": "eighteen"}).load(1)
    assert exc_info.value.key == "ASSET_DECIMALS"


def test_rebalancer_is_optional_but_validated(explicit_source):
    explicit_source["REBALANCER_ADDRESS"] = REBALANCER
    assert ConfigLoader(explicit_source).load(1).rebalancer == REBALANCER

    explicit_source["REBALANCER_ADDRESS"] = "0xdead"
    with pytest.raises(ConfigurationError) as exc_info:
        ConfigLoader(explicit_source).load(1)
    assert exc_info.value.key == "REBALANCER_ADDRESS"


def test_malformed_address_error_propagates_unchanged(explicit_source):
    explicit_source["AAVE_PROVIDER_ADDRESS"] = "0x33"
    with pytest.raises(ConfigurationError, match="malformed address") as exc_info:
        ConfigLoader(explicit_source).load(1)
    assert exc_info.value.key == "AAVE_PROVIDER_ADDRESS"
    assert exc_info.value.__cause__ is None


def test_loader_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("VERIFIER_ADDRESS", VERIFIER)
    for key in (
        "ASSET_ADDRESS",
        "ATOKEN_ADDRESS",
        "AAVE_PROVIDER_ADDRESS",
        "REBALANCER_ADDRESS",
        "AUTHORIZE_VAULT",
        "ASSET_DECIMALS",
        "MAX_USER_DEPOSIT",
        "MAX_TOTAL_DEPOSIT",
    ):
        monkeypatch.delenv(key, raising=False)

    config = load_deployment_config(42220)
    assert config.verifier == VERIFIER
    assert config.asset == CELO_MAINNET_DEFAULTS.asset


def test_config_is_immutable(explicit_source):
    config = ConfigLoader(explicit_source).load(1)
    with pytest.raises(AttributeError):
        config.asset = ATOKEN  # type: ignore[misc]
