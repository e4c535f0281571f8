import logging

from rating_refresh.task.consts import BASE_SEPOLIA_CHAIN_ID
from rating_refresh.task.types import ChainId

logger = logging.getLogger("rating_refresh.chains")

FALLBACK_CHAIN = ChainId.BASE

CHAIN_IDS: dict[int, ChainId] = {
    1: ChainId.ETHEREUM,
    10: ChainId.OPTIMISM,
    8453: ChainId.BASE,
    42161: ChainId.ARBITRUM,
    # Base Sepolia has no entry of its own on the platform; BASE is the closest match
    BASE_SEPOLIA_CHAIN_ID: ChainId.BASE,
}


def lookup_chain(chain_id: int) -> tuple[ChainId, bool]:
    """
    Map a numeric chain id to a platform chain.

    Returns:
        tuple: (chain, fallback) where fallback is True when the id is unknown
            and the default chain was used instead
    """
    chain = CHAIN_IDS.get(chain_id)
    if chain is None:
        return FALLBACK_CHAIN, True
    return chain, False


def resolve_chain(chain_id: int, context: str = "") -> ChainId:
    """Map a numeric chain id to a platform chain, warning when falling back to BASE."""
    chain, fallback = lookup_chain(chain_id)
    if fallback:
        prefix = f"[{context}] " if context else ""
        logger.warning(f"{prefix}Unknown chainId {chain_id}, using {chain.name}")
    return chain
