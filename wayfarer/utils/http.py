"""
HTTP client for external services.

Wraps aiohttp with status handling and retries so that service-specific
clients only deal with endpoints and payloads.
"""

import json
from typing import Any

import aiohttp

from wayfarer.utils.error_handling import UpstreamError, with_retry
from wayfarer.utils.logging import get_logger

logger = get_logger(__name__)

# HTTP Status Codes
HTTP_STATUS_OK = 200
HTTP_STATUS_REDIRECT = 300

DEFAULT_TIMEOUT_SECONDS = 15


class APIClient:
    """
    Base client for JSON API requests with retries.

    Transport failures and non-2xx responses are raised as UpstreamError.
    """

    def __init__(
        self,
        service_name: str,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Initialize the API client.

        Args:
            service_name: Name of the service
            base_url: Base URL for API requests
            timeout: Total request timeout in seconds
        """
        self.service_name = service_name
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    @with_retry(max_attempts=2, min_wait_seconds=0.5, max_wait_seconds=2.0)
    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            params: Query parameters (optional)
            json_data: JSON data for request body (optional)
            headers: Additional HTTP headers (optional)

        Returns:
            Parsed JSON response

        Raises:
            UpstreamError: If the request fails after retries
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug(f"API Request: {self.service_name} - {method} {url}")

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.request(
                    method, url, params=params, json=json_data, headers=headers
                ) as response:
                    status_code = response.status
                    response_text = await response.text()
                    logger.debug(
                        f"API Response: {self.service_name} - {url} - "
                        f"Status: {status_code}"
                    )

                    if not (HTTP_STATUS_OK <= status_code < HTTP_STATUS_REDIRECT):
                        raise UpstreamError(
                            f"API request failed: {response_text[:200]}",
                            self.service_name,
                            status_code=status_code,
                        )

                    try:
                        return await response.json()
                    except (aiohttp.ContentTypeError, json.JSONDecodeError) as e:
                        raise UpstreamError(
                            "Response is not JSON",
                            self.service_name,
                            status_code=status_code,
                            original_error=e,
                        ) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise UpstreamError(
                "Transport failure", self.service_name, original_error=e
            ) from e
