from typing import Any

from rating_refresh.exceptions import MimicApiError
from rating_refresh.mimic.resources.base import BaseResource


class TasksResource(BaseResource):
    """Task artifact uploads."""

    async def create(self, manifest: bytes, wasm: bytes) -> dict[str, Any]:
        """
        Upload a task (manifest plus compiled module).

        Args:
            manifest: Raw manifest.yaml content
            wasm: Compiled task module

        Returns:
            dict: Created task, including its content id under "CID"
        """
        files = {
            "manifest": ("manifest.yaml", manifest, "application/yaml"),
            "wasm": ("task.wasm", wasm, "application/wasm"),
        }
        task = await self._post("tasks", files=files)
        if not isinstance(task, dict) or not task.get("CID"):
            raise MimicApiError(f"Missing 'CID' in task creation response: {task}")
        return task
