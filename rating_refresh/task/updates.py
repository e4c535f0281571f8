"""
Token rating updates: one oracle call intent per token that has a report.
"""

from typing import Optional

import logging
from collections.abc import Sequence

from hexbytes import HexBytes

from rating_refresh.task.chains import resolve_chain
from rating_refresh.task.consts import DEFAULT_MAX_FEE, REFRESH_RATING_SIGNATURE
from rating_refresh.task.encoding import encode_call, to_address
from rating_refresh.task.matcher import find_report
from rating_refresh.task.types import CallIntent, Report, TokenAmount, TokenDescriptor
from rating_refresh.utils.converters import timestamp_to_iso

logger = logging.getLogger("rating_refresh.updates")


def build_update_intent(
    token: TokenDescriptor,
    report: Report,
    chain_id: int,
    oracle_address: str,
    max_fee: TokenAmount = DEFAULT_MAX_FEE,
) -> CallIntent:
    """
    Build the refreshRatingWithReport intent for a single token.

    Raises:
        InvalidEncodingError: If the token address, report or oracle address cannot be encoded
    """
    call_data = encode_call(
        REFRESH_RATING_SIGNATURE,
        [("address", token.address), ("bytes", report.full_report)],
    )
    chain = resolve_chain(chain_id, context=token.name)

    return CallIntent(
        chain=chain,
        target=to_address(oracle_address),
        data=HexBytes(call_data),
        max_fee=max_fee,
    )


def run_updates(
    tokens: Sequence[TokenDescriptor],
    reports: Sequence[Report],
    chain_id: int,
    oracle_address: str,
    max_fee: Optional[TokenAmount] = None,
) -> list[CallIntent]:
    """
    Create one oracle update intent per token that has a matching report.

    Tokens without a report are logged and skipped. Encoding failures are not caught:
    they indicate a configuration defect and stop the whole run.

    Args:
        tokens: Token descriptors, processed in declaration order
        reports: Reports fetched for this run
        chain_id: Numeric id of the chain the oracle lives on
        oracle_address: Address of the SSA oracle adapter
        max_fee: Fee budget per intent (defaults to 0.25 USD)

    Returns:
        list: Call intents, one per token with a report
    """
    fee = max_fee or DEFAULT_MAX_FEE
    intents: list[CallIntent] = []

    for token in tokens:
        logger.info(f"[{token.name}] Finding report for feedId: {token.feed_id}")

        report = find_report(reports, token.feed_id)
        if report is None or not report.full_report:
            logger.warning(f"[{token.name}] No report found for feedId {token.feed_id}, skipping")
            continue

        logger.info(f"[{token.name}] Report found, creating intent to submit to oracle...")
        logger.info(f"[{token.name}]   validFrom: {timestamp_to_iso(report.valid_from_timestamp)}")
        logger.info(f"[{token.name}]   observations: {timestamp_to_iso(report.observations_timestamp)}")

        intents.append(build_update_intent(token, report, chain_id, oracle_address, fee))
        logger.info(f"[{token.name}] Intent created for rating update")

    return intents
