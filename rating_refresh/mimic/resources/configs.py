from typing import Any

from dataclasses import dataclass

from rating_refresh.config import TriggerConfig
from rating_refresh.exceptions import MimicApiError
from rating_refresh.mimic.auth.signatures import SignatureGenerator
from rating_refresh.mimic.resources.base import BaseResource


@dataclass(frozen=True)
class ConfigParameters:
    """Parameters of a task configuration."""

    description: str
    task_cid: str
    version: str
    trigger: TriggerConfig
    input: dict[str, Any]
    execution_fee_limit: str
    min_validations: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "taskCid": self.task_cid,
            "version": self.version,
            "trigger": self.trigger.to_dict(),
            "input": self.input,
            "executionFeeLimit": self.execution_fee_limit,
            "minValidations": self.min_validations,
        }


class ConfigsResource(BaseResource):
    """Task configurations: what a deployed task runs with and when."""

    async def sign_and_create(self, params: ConfigParameters, signer: SignatureGenerator) -> dict[str, Any]:
        """
        Sign a configuration and register it.

        Returns:
            dict: The created configuration; its "sig" identifies it for executions
        """
        body = params.to_dict()
        body["signer"] = signer.public_address
        body["sig"] = signer.sign_payload(params.to_dict())

        created = await self._post("configs", body)
        if not isinstance(created, dict) or not created.get("sig"):
            raise MimicApiError(f"Missing 'sig' in config creation response: {created}")
        return created

    async def get(self, sig: str) -> dict[str, Any]:
        return await self._get(f"configs/{sig}")
