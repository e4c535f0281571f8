"""
Types shared by the rating refresh task: reports, token descriptors and call intents.
"""

from typing import Any

from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum

from hexbytes import HexBytes
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from rating_refresh.utils.converters import to_0x_hex


class ChainId(IntEnum):
    """Networks the task platform can execute intents on."""

    ETHEREUM = 1
    OPTIMISM = 10
    BASE = 8453
    ARBITRUM = 42161


class Report(BaseModel):
    """A signed report as delivered by the DataLink bulk endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    feed_id: StrictStr = Field(alias="feedId")
    valid_from_timestamp: StrictInt = Field(alias="validFromTimestamp")
    observations_timestamp: StrictInt = Field(alias="observationsTimestamp")
    full_report: StrictStr = Field(alias="fullReport")  # hex-encoded signed report


@dataclass(frozen=True)
class TokenDescriptor:
    """A token whose rating is refreshed from a single DataLink feed."""

    name: str
    address: str
    feed_id: str


@dataclass(frozen=True)
class TokenAmount:
    """An amount expressed in a denomination token (e.g. USD)."""

    denomination: str
    amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.denomination,
            "amount": str(self.amount),
        }


@dataclass(frozen=True)
class CallIntent:
    """A contract call the task asks the platform to execute."""

    chain: ChainId
    target: str
    data: HexBytes
    max_fee: TokenAmount

    def to_dict(self) -> dict[str, Any]:
        return {
            "chainId": int(self.chain),
            "target": self.target,
            "data": to_0x_hex(self.data),
            "maxFee": self.max_fee.to_dict(),
        }
