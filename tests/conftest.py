"""
Pytest fixtures for the rating refresh tests.

HTTP boundaries are stubbed with httpx.MockTransport; no test touches the network.
"""

import os

import pytest
from eth_account import Account

from rating_refresh.config import DataLinkConfig, DeploymentConfig, MimicConfig, TaskConfig
from rating_refresh.task.consts import TOKEN_SYMBOLS
from rating_refresh.task.types import Report, TokenDescriptor
from tests.utils import (
    MANAGED_ENV_VARS,
    TEST_CHAIN_ID,
    TEST_DATALINK_URL,
    TEST_HOOK,
    TEST_MIMIC_URL,
    TEST_ORACLE,
    TEST_PRIVATE_KEY,
    feed_id,
    make_report,
    token_address,
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep developer .env files and shell variables out of the tests."""
    monkeypatch.setattr("rating_refresh.config.load_dotenv", lambda *a, **kw: False)
    for name in MANAGED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tokens() -> list[TokenDescriptor]:
    """The ten configured tokens with distinct addresses and feed ids."""
    return [
        TokenDescriptor(name=name, address=token_address(i), feed_id=feed_id(i))
        for i, (name, _) in enumerate(TOKEN_SYMBOLS)
    ]


@pytest.fixture
def reports(tokens) -> list[Report]:
    """One report per token, with upper-cased feed ids."""
    return [make_report("0x" + token.feed_id[2:].upper(), f"0x{i + 1:02x}beef") for i, token in enumerate(tokens)]


@pytest.fixture
def signer_address() -> str:
    return Account.from_key(TEST_PRIVATE_KEY).address


@pytest.fixture
def mimic_config() -> MimicConfig:
    return MimicConfig(api_url=TEST_MIMIC_URL, api_key="test-api-key", private_key=TEST_PRIVATE_KEY)


@pytest.fixture
def datalink_config() -> DataLinkConfig:
    return DataLinkConfig(api_url=TEST_DATALINK_URL, user="user", secret="secret")


@pytest.fixture
def task_config(tokens, tmp_path) -> TaskConfig:
    manifest = tmp_path / "manifest.yaml"
    manifest.write_text("version: 1.0.0\n")
    wasm = tmp_path / "task.wasm"
    wasm.write_bytes(b"\x00asm\x01\x00\x00\x00")
    return TaskConfig(
        chain_id=TEST_CHAIN_ID,
        ssa_oracle_address=TEST_ORACLE,
        sarm_hook_address=TEST_HOOK,
        tokens=tokens,
        manifest_file=os.fspath(manifest),
        wasm_file=os.fspath(wasm),
    )


@pytest.fixture
def deployment_config(mimic_config, datalink_config, task_config) -> DeploymentConfig:
    return DeploymentConfig(mimic=mimic_config, datalink=datalink_config, task=task_config)
