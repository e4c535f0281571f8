#!/usr/bin/env python3
"""Run the task locally against freshly fetched reports and print the intents it would submit.

Nothing is sent to Mimic; use this to check feed ids and addresses before deploying.
"""

from typing import Optional

import asyncio
import json
import logging
import sys

from rating_refresh.commands import configure_logging
from rating_refresh.config import DeploymentConfig, get_config
from rating_refresh.datalink import DataLinkClient
from rating_refresh.task import CallIntent, TaskInputs, run_task

logger = logging.getLogger("rating_refresh.simulate")


async def simulate(config: DeploymentConfig, datalink: Optional[DataLinkClient] = None) -> list[CallIntent]:
    """Fetch reports, run the task and collect its intents instead of submitting them."""
    config.task.validate(check_files=False)
    datalink = datalink or DataLinkClient(config.datalink)

    reports = await datalink.fetch_reports(config.task.feed_ids)
    task_inputs = TaskInputs.from_tokens(
        chain_id=config.task.chain_id,
        ssa_oracle_address=config.task.ssa_oracle_address,
        sarm_hook_address=config.task.sarm_hook_address,
        tokens=config.task.tokens,
        reports=reports,
        datalink_api_url=config.datalink.api_url,
    )

    collected: list[CallIntent] = []
    run_task(task_inputs, submit=collected.append)
    return collected


async def main() -> None:
    intents = await simulate(get_config())
    print(json.dumps([intent.to_dict() for intent in intents], indent=2))


def run() -> None:
    configure_logging()
    try:
        asyncio.run(main())
    except Exception as e:
        logger.error(f"[FATAL] Simulation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
