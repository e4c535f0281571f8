"""
Task inputs: the document stored in a Mimic task configuration and injected into every run.
"""

from typing import Any, Optional

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rating_refresh.exceptions import ConfigurationError
from rating_refresh.task.consts import TOKEN_SYMBOLS
from rating_refresh.task.types import Report, TokenDescriptor


class TaskInputs(BaseModel):
    """Inputs declared by the task manifest."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    chain_id: int = Field(alias="chainId")
    ssa_oracle_address: str = Field(alias="ssaOracleAddress")
    sarm_hook_address: Optional[str] = Field(default=None, alias="sarmHookAddress")

    eurc_address: str = Field(alias="eurcAddress")
    eurcv_address: str = Field(alias="eurcvAddress")
    fdusd_address: str = Field(alias="fdusdAddress")
    gusd_address: str = Field(alias="gusdAddress")
    tusd_address: str = Field(alias="tusdAddress")
    usde_address: str = Field(alias="usdeAddress")
    usdp_address: str = Field(alias="usdpAddress")
    dai_address: str = Field(alias="daiAddress")
    usdt_address: str = Field(alias="usdtAddress")
    usdc_address: str = Field(alias="usdcAddress")

    feed_id_eurc: str = Field(alias="feedIdEurc")
    feed_id_eurcv: str = Field(alias="feedIdEurcv")
    feed_id_fdusd: str = Field(alias="feedIdFdusd")
    feed_id_gusd: str = Field(alias="feedIdGusd")
    feed_id_tusd: str = Field(alias="feedIdTusd")
    feed_id_usde: str = Field(alias="feedIdUsde")
    feed_id_usdp: str = Field(alias="feedIdUsdp")
    feed_id_dai: str = Field(alias="feedIdDai")
    feed_id_usdt: str = Field(alias="feedIdUsdt")
    feed_id_usdc: str = Field(alias="feedIdUsdc")

    datalink_api_url: str = Field(default="", alias="datalinkApiUrl")
    reports: list[Report] = Field(default_factory=list)

    @classmethod
    def from_tokens(
        cls,
        chain_id: int,
        ssa_oracle_address: str,
        tokens: Sequence[TokenDescriptor],
        reports: Sequence[Report] = (),
        sarm_hook_address: Optional[str] = None,
        datalink_api_url: str = "",
    ) -> "TaskInputs":
        """Build inputs from the ten configured token descriptors."""
        by_name = {token.name: token for token in tokens}
        fields: dict[str, Any] = {}
        for name, key in TOKEN_SYMBOLS:
            token = by_name.get(name)
            if token is None:
                raise ConfigurationError(f"Missing token descriptor for {name}")
            fields[f"{key}_address"] = token.address
            fields[f"feed_id_{key}"] = token.feed_id

        return cls(
            chain_id=chain_id,
            ssa_oracle_address=ssa_oracle_address,
            sarm_hook_address=sarm_hook_address,
            datalink_api_url=datalink_api_url,
            reports=list(reports),
            **fields,
        )

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> "TaskInputs":
        """Validate a raw inputs document."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid task inputs: {e}") from e

    def tokens(self) -> list[TokenDescriptor]:
        """The ten token descriptors in declaration order."""
        return [
            TokenDescriptor(
                name=name,
                address=getattr(self, f"{key}_address"),
                feed_id=getattr(self, f"feed_id_{key}"),
            )
            for name, key in TOKEN_SYMBOLS
        ]

    def to_document(self) -> dict[str, Any]:
        """Serialize with the camelCase keys the task manifest declares."""
        return self.model_dump(by_alias=True, exclude_none=True)
