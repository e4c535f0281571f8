"""Shared constants and builders for the rating refresh tests."""

from rating_refresh.task.consts import TOKEN_SYMBOLS
from rating_refresh.task.types import Report

TEST_PRIVATE_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
TEST_ORACLE = "0x1234567890123456789012345678901234567890"
TEST_HOOK = "0x0987654321098765432109876543210987654321"
TEST_CHAIN_ID = 84532
TEST_MIMIC_URL = "https://mimic.example.com"
TEST_DATALINK_URL = "https://datalink.example.com/api/v1/reports/bulk"

MANAGED_ENV_VARS = (
    [
        "CHAIN_ID",
        "SSA_ORACLE_ADDRESS",
        "SARM_HOOK_ADDRESS",
        "MIMIC_API_URL",
        "MIMIC_API_KEY",
        "PRIVATE_KEY",
        "MIMIC_CONFIG_SIG",
        "WALLET_ADDRESS",
        "DATALINK_API_URL",
        "DATALINK_USER",
        "DATALINK_SECRET",
        "DATALINK_TIMEOUT",
        "TASK_MANIFEST_FILE",
        "TASK_WASM_FILE",
        "EXECUTION_FEE_LIMIT",
        "MIN_VALIDATIONS",
    ]
    + [f"{key.upper()}_ADDRESS" for _, key in TOKEN_SYMBOLS]
    + [f"FEED_ID_{key.upper()}" for _, key in TOKEN_SYMBOLS]
)


def token_address(index: int) -> str:
    return "0x" + f"{index + 1:02x}" * 20


def feed_id(index: int) -> str:
    return "0x0003" + f"{index + 1:02x}" * 30


def make_report(feed: str, full_report: str = "0xdeadbeef", ts: int = 1732233600) -> Report:
    return Report(
        feedId=feed,
        validFromTimestamp=ts,
        observationsTimestamp=ts,
        fullReport=full_report,
    )


def report_document(feed: str, full_report: str = "0xdeadbeef", ts: int = 1732233600) -> dict:
    """A report as it appears in a DataLink response body."""
    return {
        "feedId": feed,
        "validFromTimestamp": ts,
        "observationsTimestamp": ts,
        "fullReport": full_report,
    }
