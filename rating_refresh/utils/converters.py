"""
Conversion helpers shared by the clients and the task.
"""

from typing import Union

from datetime import datetime, timezone

from hexbytes import HexBytes


def timestamp_to_iso(timestamp: int) -> str:
    """
    Format a unix timestamp (seconds) as an ISO-8601 UTC string.

    Args:
        timestamp: Seconds since the epoch

    Returns:
        ISO-8601 string, e.g. ``2025-11-22T00:00:00+00:00``
    """
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()


def to_0x_hex(data: Union[bytes, bytearray]) -> str:
    """Hex-encode bytes with a 0x prefix."""
    return HexBytes(data).to_0x_hex()
