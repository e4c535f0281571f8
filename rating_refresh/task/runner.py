from typing import Any, Callable, Union

import logging
from collections.abc import Mapping

from rating_refresh.task.inputs import TaskInputs
from rating_refresh.task.types import CallIntent
from rating_refresh.task.updates import run_updates

logger = logging.getLogger("rating_refresh.task")

IntentSubmitter = Callable[[CallIntent], Any]


def run_task(inputs: Union[TaskInputs, Mapping[str, Any]], submit: IntentSubmitter) -> list[CallIntent]:
    """
    Task entry point, run when the SARM hook emits a RiskCheck event.

    Reports are fetched at deploy time and travel inside the inputs, so the run itself
    makes no network requests. Every intent produced is handed to ``submit``.

    Args:
        inputs: Task inputs, either parsed or as the raw configuration document
        submit: Intent submission boundary

    Returns:
        list: The intents that were submitted
    """
    logger.info("[SARM] Task triggered")

    task_inputs = inputs if isinstance(inputs, TaskInputs) else TaskInputs.parse(inputs)
    if not task_inputs.reports:
        logger.warning("[SARM] No reports in inputs, skipping execution")
        return []

    logger.info(f"[SARM] Using {len(task_inputs.reports)} pre-fetched reports from inputs")

    intents = run_updates(
        tokens=task_inputs.tokens(),
        reports=task_inputs.reports,
        chain_id=task_inputs.chain_id,
        oracle_address=task_inputs.ssa_oracle_address,
    )
    for intent in intents:
        submit(intent)

    logger.info(f"[SARM] Task completed: {len(intents)} intents submitted")
    return intents
