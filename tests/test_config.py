"""Tests for configuration gathered from environment variables."""

import pytest

from rating_refresh.config import (
    DEFAULT_DATALINK_API_URL,
    DEFAULT_MIMIC_API_URL,
    DataLinkConfig,
    DeploymentConfig,
    MimicConfig,
    TaskConfig,
)
from rating_refresh.exceptions import ConfigurationError
from rating_refresh.task.consts import RISK_CHECK_TOPIC, TOKEN_SYMBOLS
from tests.utils import TEST_HOOK, TEST_ORACLE, feed_id, token_address


@pytest.fixture
def full_env(monkeypatch):
    monkeypatch.setenv("CHAIN_ID", "8453")
    monkeypatch.setenv("SSA_ORACLE_ADDRESS", TEST_ORACLE)
    monkeypatch.setenv("SARM_HOOK_ADDRESS", TEST_HOOK)
    for i, (_, key) in enumerate(TOKEN_SYMBOLS):
        monkeypatch.setenv(f"{key.upper()}_ADDRESS", token_address(i))
        monkeypatch.setenv(f"FEED_ID_{key.upper()}", feed_id(i))


def test_task_config_from_env(full_env):
    config = TaskConfig.from_env()

    assert config.chain_id == 8453
    assert config.ssa_oracle_address == TEST_ORACLE
    assert [token.name for token in config.tokens] == [name for name, _ in TOKEN_SYMBOLS]
    assert config.tokens[5].name == "USDe"
    assert config.tokens[5].address == token_address(5)
    assert config.feed_ids == [feed_id(i) for i in range(10)]
    assert config.missing_settings() == []


def test_task_config_defaults_to_base_sepolia():
    config = TaskConfig.from_env()

    assert config.chain_id == 84532
    assert config.execution_fee_limit == "1000000000000000000"
    assert config.min_validations == 1


def test_missing_settings_are_named(full_env, monkeypatch):
    monkeypatch.delenv("SARM_HOOK_ADDRESS")
    monkeypatch.delenv("FEED_ID_DAI")

    config = TaskConfig.from_env()

    assert config.missing_settings() == ["SARM_HOOK_ADDRESS", "FEED_ID_DAI"]
    with pytest.raises(ConfigurationError, match="SARM_HOOK_ADDRESS, FEED_ID_DAI"):
        config.validate(check_files=False)
    assert feed_id(7) not in config.feed_ids


def test_validate_requires_task_artifacts(full_env, monkeypatch, tmp_path):
    monkeypatch.setenv("TASK_MANIFEST_FILE", str(tmp_path / "missing.yaml"))

    with pytest.raises(ConfigurationError, match="Manifest file not found"):
        TaskConfig.from_env().validate()


def test_invalid_chain_id(monkeypatch):
    monkeypatch.setenv("CHAIN_ID", "base")

    with pytest.raises(ConfigurationError):
        TaskConfig.from_env()


def test_trigger_watches_risk_check(full_env):
    trigger = TaskConfig.from_env().trigger.to_dict()

    assert trigger == {
        "type": "event",
        "chainId": 8453,
        "contract": TEST_HOOK,
        "topics": [[RISK_CHECK_TOPIC]],
        "delta": "1h",
        "endDate": 0,
    }


def test_mimic_config_from_env(monkeypatch):
    assert MimicConfig.from_env() == MimicConfig(api_url=DEFAULT_MIMIC_API_URL)
    assert not MimicConfig.from_env().has_credentials

    monkeypatch.setenv("MIMIC_API_KEY", "key")
    monkeypatch.setenv("MIMIC_CONFIG_SIG", "0xsig")

    config = MimicConfig.from_env()
    assert config.has_credentials
    assert config.api_key == "key"
    assert config.config_sig == "0xsig"


def test_datalink_config_from_env(monkeypatch):
    assert DataLinkConfig.from_env().api_url == DEFAULT_DATALINK_API_URL

    monkeypatch.setenv("DATALINK_USER", "user")
    monkeypatch.setenv("DATALINK_SECRET", "secret")
    monkeypatch.setenv("DATALINK_API_URL", "https://example.com/bulk")

    config = DataLinkConfig.from_env()
    assert (config.user, config.secret, config.api_url) == ("user", "secret", "https://example.com/bulk")


def test_invalid_datalink_timeout(monkeypatch):
    monkeypatch.setenv("DATALINK_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError, match="Invalid numeric setting"):
        DataLinkConfig.from_env()


def test_deployment_config_from_env(full_env):
    config = DeploymentConfig.from_env()

    assert config.task.sarm_hook_address == TEST_HOOK
    assert config.mimic.api_url == DEFAULT_MIMIC_API_URL
