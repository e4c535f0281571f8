from rating_refresh.datalink.client import DataLinkClient, parse_reports

__all__ = ["DataLinkClient", "parse_reports"]
