#!/usr/bin/env python3
"""Deploy the SSA rating refresh task to Mimic Protocol.

Fetches fresh DataLink reports, embeds them in the task inputs, uploads the task artifacts
and creates a signed configuration that runs the task whenever the SARM hook emits RiskCheck.

Before running, ensure you have a .env file with:
- MIMIC_API_KEY and/or PRIVATE_KEY (the private key signs the configuration)
- SSA_ORACLE_ADDRESS, SARM_HOOK_ADDRESS, CHAIN_ID
- <TOKEN>_ADDRESS and FEED_ID_<TOKEN> for EURC, EURCV, FDUSD, GUSD, TUSD, USDE, USDP, DAI, USDT, USDC
- DATALINK_USER, DATALINK_SECRET and optionally DATALINK_API_URL
"""

from typing import Any, Optional

import asyncio
import logging
import sys

from rating_refresh.commands import configure_logging
from rating_refresh.config import DeploymentConfig, get_config
from rating_refresh.datalink import DataLinkClient
from rating_refresh.mimic import ConfigParameters, MimicClient
from rating_refresh.task import TaskInputs

logger = logging.getLogger("rating_refresh.deploy")


async def deploy_task(
    config: DeploymentConfig,
    mimic: Optional[MimicClient] = None,
    datalink: Optional[DataLinkClient] = None,
    check_files: bool = True,
) -> dict[str, Any]:
    """
    Deploy the task and create its configuration.

    Args:
        config: Deployment configuration
        mimic: Mimic client (created from config when omitted)
        datalink: DataLink client (created from config when omitted)
        check_files: Whether to require the manifest and module files to exist

    Returns:
        dict: "task" (upload response) and "config" (created configuration)
    """
    logger.info("[DEPLOY] Starting Mimic Protocol task deployment...")

    config.task.validate(check_files=check_files)

    mimic = mimic or MimicClient(config.mimic)
    signer = mimic.require_signer()
    datalink = datalink or DataLinkClient(config.datalink)

    # Reports are fetched now and travel in the inputs; the task itself makes no HTTP requests
    logger.info("[DATALINK] Fetching DataLink reports...")
    reports = await datalink.fetch_reports(config.task.feed_ids)

    task_inputs = TaskInputs.from_tokens(
        chain_id=config.task.chain_id,
        ssa_oracle_address=config.task.ssa_oracle_address,
        sarm_hook_address=config.task.sarm_hook_address,
        tokens=config.task.tokens,
        reports=reports,
        datalink_api_url=config.datalink.api_url,
    )

    logger.info("[FILES] Reading task files...")
    with open(config.task.manifest_file, "rb") as f:
        manifest = f.read()
    with open(config.task.wasm_file, "rb") as f:
        wasm = f.read()

    logger.info("[TASK] Creating task...")
    task = await mimic.tasks.create(manifest=manifest, wasm=wasm)
    logger.info(f"[OK] Task created: {task['CID']}")

    logger.info("[CONFIG] Creating task configuration...")
    params = ConfigParameters(
        description=config.task.description,
        task_cid=task["CID"],
        version=config.task.version,
        trigger=config.task.trigger,
        input=task_inputs.to_document(),
        execution_fee_limit=config.task.execution_fee_limit,
        min_validations=config.task.min_validations,
    )
    created = await mimic.configs.sign_and_create(params, signer)
    logger.info(f"[OK] Configuration created: {created['sig']}")

    return {"task": task, "config": created}


async def main() -> None:
    config = get_config()
    result = await deploy_task(config)

    task_cid = result["task"]["CID"]
    config_sig = result["config"]["sig"]

    print("\n[DONE] Deployment complete!")
    print("Task will execute on-demand when swaps happen")
    print("\nNext steps:")
    print(f"1. Monitor executions: MIMIC_CONFIG_SIG={config_sig} rating-refresh-status")
    print("2. Check dashboard: https://mimic.fi")
    print(f"3. View task: {task_cid}")
    print(f"4. Save config signature: export MIMIC_CONFIG_SIG='{config_sig}'")


def run() -> None:
    configure_logging()
    try:
        asyncio.run(main())
    except Exception as e:
        logger.error(f"[FATAL] Deployment failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
