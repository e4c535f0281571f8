from typing import Optional

from collections.abc import Sequence

from rating_refresh.task.types import Report


def find_report(reports: Sequence[Report], feed_id: str) -> Optional[Report]:
    """
    Find the report published for a feed.

    Feed ids are compared case-insensitively. When the same feed id appears more
    than once, the first report in list order wins.

    Args:
        reports: Reports fetched for this run
        feed_id: Feed id configured for a token

    Returns:
        The matching report, or None when no report carries that feed id
    """
    wanted = feed_id.lower()
    for report in reports:
        if report.feed_id.lower() == wanted:
            return report
    return None
