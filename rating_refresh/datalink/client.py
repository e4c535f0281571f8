"""
DataLink client - fetches signed rating reports from the DataLink bulk reports endpoint.
"""

from typing import Any, Optional

import base64
import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from rating_refresh._version import SDK_VERSION
from rating_refresh.config import DataLinkConfig
from rating_refresh.exceptions import ConfigurationError, DataLinkApiError, ReportFormatError
from rating_refresh.task.types import Report
from rating_refresh.utils.converters import timestamp_to_iso


class DataLinkClient:
    """Client for the DataLink pull-delivery REST API."""

    def __init__(self, config: DataLinkConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the client.

        Args:
            config: DataLink endpoint and credentials
            transport: Optional httpx transport (used by tests to stub the API)

        Raises:
            ConfigurationError: If the Basic auth credentials are missing
        """
        if not config.user or not config.secret:
            raise ConfigurationError("DATALINK_USER and DATALINK_SECRET must be set in .env file")

        self.config = config
        self._transport = transport
        self.logger = logging.getLogger("rating_refresh.datalink")

    @property
    def headers(self) -> dict[str, str]:
        token = base64.b64encode(f"{self.config.user}:{self.config.secret}".encode()).decode()
        return {
            "Authorization": f"Basic {token}",
            "Content-Type": "application/json",
            "User-Agent": f"rating-refresh-tasks/{SDK_VERSION}",
        }

    async def fetch_reports(self, feed_ids: Sequence[str]) -> list[Report]:
        """
        Fetch the latest report for each feed in one bulk request.

        Args:
            feed_ids: Feed ids to request; empty entries are ignored

        Returns:
            list: Validated reports, in the order the API returned them

        Raises:
            ConfigurationError: If no feed id is configured
            DataLinkApiError: If the API answers with a non-success status
            ReportFormatError: If the response body is not a valid reports document
        """
        requested = [feed_id for feed_id in feed_ids if feed_id]
        if not requested:
            raise ConfigurationError("At least one feed ID must be configured")

        self.logger.info("Fetching reports from DataLink API...")
        self.logger.info(f"API URL: {self.config.api_url}")
        self.logger.info(f"Feed IDs: {', '.join(requested)}")

        async with httpx.AsyncClient(
            headers=self.headers, timeout=self.config.timeout, transport=self._transport
        ) as client:
            response = await client.post(self.config.api_url, json={"feedIds": requested})

        if response.is_error:
            raise DataLinkApiError(
                f"DataLink API error: {response.status_code} {response.reason_phrase}\n{response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        reports = parse_reports(response)
        self.logger.info(f"Fetched {len(reports)} reports")
        for report in reports:
            self.logger.info(f"  - Feed {report.feed_id}:")
            self.logger.info(f"    Valid from: {timestamp_to_iso(report.valid_from_timestamp)}")
            self.logger.info(f"    Observations: {timestamp_to_iso(report.observations_timestamp)}")
        return reports


def parse_reports(response: httpx.Response) -> list[Report]:
    """Validate a bulk response body into Report records."""
    try:
        data: Any = response.json()
    except ValueError as e:
        raise ReportFormatError(f"Invalid response from DataLink API: body is not JSON ({e})") from e

    if not isinstance(data, dict) or not isinstance(data.get("reports"), list):
        raise ReportFormatError("Invalid response from DataLink API: missing reports array")

    try:
        return [Report.model_validate(item) for item in data["reports"]]
    except ValidationError as e:
        raise ReportFormatError(f"Invalid report in DataLink response: {e}") from e