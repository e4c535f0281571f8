#!/usr/bin/env python3
"""Trigger a deployed task execution on demand (for testing, or from a swap watcher).

Requires MIMIC_CONFIG_SIG (printed by the deploy command) and MIMIC_API_KEY or PRIVATE_KEY.
"""

from typing import Any, Optional

import asyncio
import logging
import sys

from rating_refresh.commands import configure_logging
from rating_refresh.config import MimicConfig
from rating_refresh.exceptions import ConfigurationError
from rating_refresh.mimic import MimicClient

logger = logging.getLogger("rating_refresh.trigger")


async def trigger_execution(config: MimicConfig, mimic: Optional[MimicClient] = None) -> dict[str, Any]:
    """
    Create a manual execution of the deployed configuration.

    Raises:
        ConfigurationError: If MIMIC_CONFIG_SIG is not set
    """
    if not config.config_sig:
        raise ConfigurationError("MIMIC_CONFIG_SIG must be set. Get it from the first deployment.")

    logger.info("[TRIGGER] Triggering Mimic task execution on-demand...")
    mimic = mimic or MimicClient(config)

    execution = await mimic.executions.create(config.config_sig, signer=mimic.signer)
    logger.info(f"[TRIGGER] Execution triggered: {execution['hash']}")
    logger.info(f"[TRIGGER] Status: {execution.get('status')}")
    logger.info("[TRIGGER] Follow its progress with rating-refresh-status")
    return execution


async def main() -> None:
    execution = await trigger_execution(MimicConfig.from_env())
    print(f"\nExecution hash: {execution['hash']}")
    print(f"Status: {execution.get('status')}")


def run() -> None:
    configure_logging()
    try:
        asyncio.run(main())
    except Exception as e:
        logger.error(f"[FATAL] Trigger failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
