"""
Rating refresh tasks - deployment and orchestration for the SSA rating refresh task.

This package provides:
- task: the task logic (report matching, call encoding, chain selection, rating updates)
- datalink: client for the DataLink bulk reports API
- mimic: client for the Mimic task platform
- commands: deploy, redeploy, trigger, get-api-key and simulate scripts
"""

from rating_refresh._version import SDK_VERSION
from rating_refresh.config import DataLinkConfig, DeploymentConfig, MimicConfig, TaskConfig, get_config
from rating_refresh.datalink import DataLinkClient
from rating_refresh.mimic import MimicClient
from rating_refresh.task import (
    CallIntent,
    ChainId,
    Report,
    TaskInputs,
    TokenDescriptor,
    encode_call,
    find_report,
    resolve_chain,
    run_task,
    run_updates,
)

__all__ = [
    "SDK_VERSION",
    "DataLinkConfig",
    "DeploymentConfig",
    "MimicConfig",
    "TaskConfig",
    "get_config",
    "DataLinkClient",
    "MimicClient",
    "CallIntent",
    "ChainId",
    "Report",
    "TaskInputs",
    "TokenDescriptor",
    "encode_call",
    "find_report",
    "resolve_chain",
    "run_task",
    "run_updates",
]
