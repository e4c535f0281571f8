from typing import Any, Optional

from datetime import datetime, timezone

from rating_refresh.exceptions import MimicApiError
from rating_refresh.mimic.auth.signatures import SignatureGenerator
from rating_refresh.mimic.resources.base import BaseResource


class ExecutionsResource(BaseResource):
    """Task executions."""

    async def create(
        self,
        config_sig: str,
        signer: Optional[SignatureGenerator] = None,
        trigger_type: str = "manual",
        trigger_data: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Request an on-demand execution of a deployed configuration.

        Inputs stay empty because the reports already live in the configuration inputs.

        Args:
            config_sig: Signature identifying the configuration
            signer: Signs the execution request when available
            trigger_type: Trigger reported to the platform
            trigger_data: Trigger payload

        Returns:
            dict: The execution, including "hash" and "status"
        """
        body: dict[str, Any] = {
            "configSig": config_sig,
            "triggerType": trigger_type,
            "triggerData": trigger_data or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "inputs": [],
            "outputs": [],
        }
        if signer is not None:
            body["signature"] = signer.sign_payload(body)
        else:
            self.logger.warning("No signer configured, sending execution request unsigned")
            body["signature"] = ""

        execution = await self._post("executions", body)
        if not isinstance(execution, dict) or not execution.get("hash"):
            raise MimicApiError(f"Missing 'hash' in execution response: {execution}")
        return execution

    async def get(self, execution_hash: str) -> dict[str, Any]:
        return await self._get(f"executions/{execution_hash}")

    async def find_by_config(self, config_sig: str) -> list[dict[str, Any]]:
        """Executions of one configuration."""
        executions = await self._get("executions", params={"configSig": config_sig})
        if not isinstance(executions, list):
            raise MimicApiError(f"Expected a list of executions, got: {executions}")
        return executions
