"""
Configuration gathered from environment variables (a .env file is loaded if present).

Configuration is read once at process start and passed explicitly into the clients and the task.
"""

from typing import Any, Optional

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from rating_refresh.exceptions import ConfigurationError
from rating_refresh.task.consts import BASE_SEPOLIA_CHAIN_ID, RISK_CHECK_TOPIC, TOKEN_SYMBOLS
from rating_refresh.task.types import TokenDescriptor

DEFAULT_MIMIC_API_URL = "https://api.mimic.fi"
DEFAULT_DATALINK_API_URL = "https://api.testnet-dataengine.chain.link/api/v1/reports/bulk"
DEFAULT_EXECUTION_FEE_LIMIT = "1000000000000000000"  # 1 ETH in wei


@dataclass
class MimicConfig:
    """Credentials and endpoint for the Mimic platform API"""

    api_url: str = DEFAULT_MIMIC_API_URL
    api_key: Optional[str] = None
    private_key: Optional[str] = None
    config_sig: Optional[str] = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key or self.private_key)

    @classmethod
    def from_env(cls) -> "MimicConfig":
        """Create a config instance from environment variables."""
        load_dotenv()

        return cls(
            api_url=os.environ.get("MIMIC_API_URL", DEFAULT_MIMIC_API_URL),
            api_key=os.environ.get("MIMIC_API_KEY") or None,
            private_key=os.environ.get("PRIVATE_KEY") or None,
            config_sig=os.environ.get("MIMIC_CONFIG_SIG") or None,
        )


@dataclass
class DataLinkConfig:
    """Endpoint and Basic auth credentials for the DataLink reports API"""

    api_url: str = DEFAULT_DATALINK_API_URL
    user: str = ""
    secret: str = ""
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "DataLinkConfig":
        """Create a config instance from environment variables."""
        load_dotenv()

        try:
            timeout = float(os.environ.get("DATALINK_TIMEOUT", "30"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        return cls(
            api_url=os.environ.get("DATALINK_API_URL", DEFAULT_DATALINK_API_URL),
            user=os.environ.get("DATALINK_USER", ""),
            secret=os.environ.get("DATALINK_SECRET", ""),
            timeout=timeout,
        )


@dataclass
class TriggerConfig:
    """Event trigger: run the task when the SARM hook emits RiskCheck"""

    chain_id: int
    contract: str
    topics: list[list[str]] = field(default_factory=lambda: [[RISK_CHECK_TOPIC]])
    delta: str = "1h"
    end_date: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "event",
            "chainId": self.chain_id,
            "contract": self.contract,
            "topics": self.topics,
            "delta": self.delta,
            "endDate": self.end_date,
        }


@dataclass
class TaskConfig:
    """What gets deployed: contract addresses, tokens, task artifacts and execution limits"""

    chain_id: int
    ssa_oracle_address: str
    sarm_hook_address: str
    tokens: list[TokenDescriptor]
    manifest_file: str = "manifest.yaml"
    wasm_file: str = os.path.join("build", "task.wasm")
    execution_fee_limit: str = DEFAULT_EXECUTION_FEE_LIMIT
    min_validations: int = 1
    description: str = "SARM Protocol SSA Rating Refresh - On-demand rating updates triggered by swaps"
    version: str = "1.0.0"

    @property
    def trigger(self) -> TriggerConfig:
        return TriggerConfig(chain_id=self.chain_id, contract=self.sarm_hook_address)

    @property
    def feed_ids(self) -> list[str]:
        """Configured feed ids, empty entries removed"""
        return [token.feed_id for token in self.tokens if token.feed_id]

    def missing_settings(self) -> list[str]:
        """Names of the required environment variables that are not set."""
        missing = []
        if not self.ssa_oracle_address:
            missing.append("SSA_ORACLE_ADDRESS")
        if not self.sarm_hook_address:
            missing.append("SARM_HOOK_ADDRESS")
        for token in self.tokens:
            if not token.address:
                missing.append(f"{token.name.upper()}_ADDRESS")
        for token in self.tokens:
            if not token.feed_id:
                missing.append(f"FEED_ID_{token.name.upper()}")
        return missing

    def validate(self, check_files: bool = True) -> None:
        """
        Check that every required setting is present.

        Raises:
            ConfigurationError: Naming every missing setting, or a missing task artifact
        """
        missing = self.missing_settings()
        if missing:
            raise ConfigurationError(f"Required in .env file: {', '.join(missing)}")

        if check_files:
            if not os.path.exists(self.manifest_file):
                raise ConfigurationError(f"Manifest file not found: {self.manifest_file}")
            if not os.path.exists(self.wasm_file):
                raise ConfigurationError(f"Task file not found: {self.wasm_file}")

    @classmethod
    def from_env(cls) -> "TaskConfig":
        """Create a config instance from environment variables."""
        load_dotenv()

        try:
            chain_id = int(os.environ.get("CHAIN_ID", str(BASE_SEPOLIA_CHAIN_ID)))
            min_validations = int(os.environ.get("MIN_VALIDATIONS", "1"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        tokens = [
            TokenDescriptor(
                name=name,
                address=os.environ.get(f"{key.upper()}_ADDRESS", ""),
                feed_id=os.environ.get(f"FEED_ID_{key.upper()}", ""),
            )
            for name, key in TOKEN_SYMBOLS
        ]

        return cls(
            chain_id=chain_id,
            ssa_oracle_address=os.environ.get("SSA_ORACLE_ADDRESS", ""),
            sarm_hook_address=os.environ.get("SARM_HOOK_ADDRESS", ""),
            tokens=tokens,
            manifest_file=os.environ.get("TASK_MANIFEST_FILE", "manifest.yaml"),
            wasm_file=os.environ.get("TASK_WASM_FILE", os.path.join("build", "task.wasm")),
            execution_fee_limit=os.environ.get("EXECUTION_FEE_LIMIT", DEFAULT_EXECUTION_FEE_LIMIT),
            min_validations=min_validations,
        )


@dataclass
class DeploymentConfig:
    """Everything the deployment scripts need"""

    mimic: MimicConfig
    datalink: DataLinkConfig
    task: TaskConfig

    @classmethod
    def from_env(cls) -> "DeploymentConfig":
        return cls(
            mimic=MimicConfig.from_env(),
            datalink=DataLinkConfig.from_env(),
            task=TaskConfig.from_env(),
        )


def get_config() -> DeploymentConfig:
    """Get configuration from environment."""
    return DeploymentConfig.from_env()
