from rating_refresh.task.chains import lookup_chain, resolve_chain
from rating_refresh.task.consts import DEFAULT_MAX_FEE, REFRESH_RATING_SIGNATURE, TOKEN_SYMBOLS
from rating_refresh.task.encoding import decode_hex, encode_call, function_selector
from rating_refresh.task.inputs import TaskInputs
from rating_refresh.task.matcher import find_report
from rating_refresh.task.runner import IntentSubmitter, run_task
from rating_refresh.task.types import CallIntent, ChainId, Report, TokenAmount, TokenDescriptor
from rating_refresh.task.updates import build_update_intent, run_updates

__all__ = [
    # Types
    "CallIntent",
    "ChainId",
    "Report",
    "TokenAmount",
    "TokenDescriptor",
    "TaskInputs",
    "IntentSubmitter",
    # Constants
    "DEFAULT_MAX_FEE",
    "REFRESH_RATING_SIGNATURE",
    "TOKEN_SYMBOLS",
    # Operations
    "find_report",
    "encode_call",
    "decode_hex",
    "function_selector",
    "lookup_chain",
    "resolve_chain",
    "build_update_intent",
    "run_updates",
    "run_task",
]
