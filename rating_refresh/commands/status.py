#!/usr/bin/env python3
"""List the executions of the deployed configuration (MIMIC_CONFIG_SIG)."""

from typing import Any, Optional

import asyncio
import logging
import sys

from rating_refresh.commands import configure_logging
from rating_refresh.config import MimicConfig
from rating_refresh.exceptions import ConfigurationError
from rating_refresh.mimic import MimicClient

logger = logging.getLogger("rating_refresh.status")


async def list_executions(config: MimicConfig, mimic: Optional[MimicClient] = None) -> list[dict[str, Any]]:
    """
    Fetch the executions created for the configured task configuration.

    Raises:
        ConfigurationError: If MIMIC_CONFIG_SIG is not set
    """
    if not config.config_sig:
        raise ConfigurationError("MIMIC_CONFIG_SIG must be set. Get it from the first deployment.")

    mimic = mimic or MimicClient(config)
    executions = await mimic.executions.find_by_config(config.config_sig)
    logger.info(f"[STATUS] {len(executions)} executions for config {config.config_sig}")
    return executions


async def main() -> None:
    executions = await list_executions(MimicConfig.from_env())
    for execution in executions:
        print(f"{execution.get('hash')}  {execution.get('status')}  {execution.get('timestamp', '')}")


def run() -> None:
    configure_logging()
    try:
        asyncio.run(main())
    except Exception as e:
        logger.error(f"[FATAL] Status check failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
