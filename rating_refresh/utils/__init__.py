from rating_refresh.utils.converters import timestamp_to_iso, to_0x_hex

__all__ = ["timestamp_to_iso", "to_0x_hex"]
