"""Tests for numeric chain id resolution."""

import logging

import pytest

from rating_refresh.task.chains import lookup_chain, resolve_chain
from rating_refresh.task.types import ChainId


@pytest.mark.parametrize(
    "chain_id, expected",
    [
        (1, ChainId.ETHEREUM),
        (10, ChainId.OPTIMISM),
        (8453, ChainId.BASE),
        (42161, ChainId.ARBITRUM),
    ],
)
def test_known_chains(chain_id, expected):
    assert resolve_chain(chain_id) == expected
    assert lookup_chain(chain_id) == (expected, False)


def test_base_sepolia_maps_to_base_without_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="rating_refresh.chains"):
        assert resolve_chain(84532) == resolve_chain(8453)

    assert caplog.records == []
    assert lookup_chain(84532) == (ChainId.BASE, False)


def test_unknown_chain_falls_back_to_base_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="rating_refresh.chains"):
        chain = resolve_chain(999999, context="USDC")

    assert chain == ChainId.BASE
    assert lookup_chain(999999) == (ChainId.BASE, True)
    assert len(caplog.records) == 1
    assert "Unknown chainId 999999" in caplog.records[0].getMessage()
    assert "[USDC]" in caplog.records[0].getMessage()
