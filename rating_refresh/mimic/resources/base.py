"""
Base resource class for Mimic API resources.
"""

from typing import Any, Optional

import logging

import httpx

from rating_refresh._version import SDK_VERSION
from rating_refresh.config import MimicConfig
from rating_refresh.exceptions import MimicApiError


class BaseResource:
    """Base class for all Mimic API resources."""

    def __init__(self, config: MimicConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the resource with configuration.

        Args:
            config: Mimic API configuration
            transport: Optional httpx transport (used by tests to stub the API)
        """
        self.config = config
        self.api_url = config.api_url
        self.headers = {
            "X-SDK-Version": f"rating-refresh-tasks/{SDK_VERSION}",
            "User-Agent": f"rating-refresh-tasks/{SDK_VERSION}",
        }
        if config.api_key:
            self.headers["x-api-key"] = config.api_key

        self._transport = transport
        self.logger = logging.getLogger(f"rating_refresh.mimic.{self.__class__.__name__}")

    def _get_endpoint_url(self, path: str) -> str:
        """
        Get the full URL for an API endpoint.

        Args:
            path: API endpoint path (without leading slash)

        Returns:
            Full URL for the API endpoint
        """
        if path.startswith("/"):
            path = path[1:]

        base_url = self.api_url
        if base_url.endswith("/"):
            base_url = base_url[:-1]

        return f"{base_url}/{path}"

    def _handle_response(self, response: httpx.Response, error_msg: str = "API request failed") -> Any:
        """
        Handle API response, raising exceptions for errors.

        Args:
            response: HTTP response from API
            error_msg: Error message prefix for exceptions

        Returns:
            Parsed JSON response

        Raises:
            MimicApiError: On a non-success status or a body that is not JSON
        """
        if response.is_error:
            raise MimicApiError(
                f"{error_msg}: {response.status_code} {response.reason_phrase}\n{response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data: Any = response.json()
        except ValueError:
            self.logger.error(f"Failed to parse JSON response: {response.text}")
            raise MimicApiError(f"{error_msg}: Invalid JSON response", status_code=response.status_code)

        return data

    def _client(self, headers: Optional[dict[str, str]] = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(headers={**self.headers, **(headers or {})}, transport=self._transport)

    async def _get(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        Make an async GET request to the API.

        Args:
            endpoint: API endpoint path
            params: Optional query parameters
            headers: Optional request headers

        Returns:
            Parsed JSON response
        """
        url = self._get_endpoint_url(endpoint)
        self.logger.debug(f"GET {url} with params: {params}")

        async with self._client(headers) as client:
            response = await client.get(url, params=params)
            return self._handle_response(response, f"GET {endpoint} failed")

    async def _post(
        self,
        endpoint: str,
        data: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        files: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Make an async POST request to the API.

        Args:
            endpoint: API endpoint path
            data: JSON request payload
            headers: Optional request headers
            files: Multipart files; when given the request is sent as multipart/form-data

        Returns:
            Parsed JSON response
        """
        url = self._get_endpoint_url(endpoint)

        async with self._client(headers) as client:
            if files is not None:
                self.logger.debug(f"POST {url} with files: {list(files)}")
                response = await client.post(url, files=files)
            else:
                self.logger.debug(f"POST {url} with data: {data}")
                response = await client.post(url, json=data)
            return self._handle_response(response, f"POST {endpoint} failed")
