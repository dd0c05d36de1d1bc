"""
PingDirectory Configuration API client.

This module provides a thin asynchronous client for the generic endpoints of
the PingDirectory Configuration API (``/config/v2``). Every configuration
object is addressed by a collection path plus an object name, so one set of
add/get/update/delete/list calls serves all resources.

The client handles:
- HTTP basic authentication with the configured admin user
- TLS verification (system roots, custom CA bundle, or disabled)
- Translating HTTP failures into PingDirectoryAPIError
- Request counting and timing for metrics
"""

import logging
import ssl
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from pingdirectory_provider.constants import CONFIG_API_BASE_PATH
from pingdirectory_provider.errors import PingDirectoryAPIError
from pingdirectory_provider.models.api import ListResponse, UpdateRequest
from pingdirectory_provider.observability.metrics import track_api_request

logger = logging.getLogger(__name__)


class ConfigurationAPIClient:
    """
    Client for PingDirectory Configuration API operations.

    Paths passed to the public methods are relative to ``/config/v2/`` and
    already URL-encoded, e.g. ``connection-criteria/My%20Criteria``.
    """

    def __init__(
        self,
        https_host: str,
        username: str,
        password: str,
        verify: bool | ssl.SSLContext = True,
        timeout: float = 60,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize Configuration API client.

        Args:
            https_host: Base URL of the PingDirectory HTTPS connection handler
            username: Admin username
            password: Admin password
            verify: False to trust any certificate, or an SSL context with
                the trusted CA certificates
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.https_host = https_host.rstrip("/")
        self.base_url = f"{self.https_host}{CONFIG_API_BASE_PATH}"
        self.username = username
        self.password = password
        self.verify = verify
        self.timeout = timeout
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

        logger.debug(f"Initialized Configuration API client for {self.base_url}")

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create httpx client (lazy initialization)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                auth=httpx.BasicAuth(self.username, self.password),
                verify=self.verify,
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                follow_redirects=False,
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "ConfigurationAPIClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - ensures connections are released."""
        await self.close()

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Make an authenticated request to the Configuration API.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            endpoint: API endpoint (relative to /config/v2/)
            json: JSON request body data
            params: Query parameters

        Returns:
            Response object with body already buffered

        Raises:
            PingDirectoryAPIError: On API errors or transport failures
        """
        client = self._get_client()
        collection = endpoint.lstrip("/").split("/", 1)[0]

        with track_api_request(method, collection) as outcome:
            try:
                response = await client.request(
                    method=method,
                    url=endpoint.lstrip("/"),
                    json=json,
                    params=params,
                )
            except httpx.HTTPError as e:
                logger.error(f"Request failed: {method} {endpoint} - {e}")
                raise PingDirectoryAPIError(
                    f"API request failed: {e}", status_code=None, cause=e
                ) from e

            outcome["status"] = response.status_code

        if response.is_success:
            return response

        response_body = response.text or "<no content>"
        body_preview = (
            response_body[:1024] + "...<truncated>"
            if len(response_body) > 1024
            else response_body
        )
        logger.error(
            f"Request failed: {method} {endpoint} - {response.status_code}",
            extra={
                "http_method": method,
                "http_status": response.status_code,
                "endpoint": collection,
                "response_body": body_preview,
            },
        )
        raise PingDirectoryAPIError(
            f"{response.status_code} {response.reason_phrase}".strip(),
            status_code=response.status_code,
            response_body=response_body,
        )

    @staticmethod
    def _json_body(response: httpx.Response) -> Any:
        """
        Decode the JSON body of a successful response.

        Raises:
            PingDirectoryAPIError: If the body is not valid JSON
        """
        try:
            return response.json()
        except ValueError as e:
            request = response.request
            logger.error(
                f"Invalid JSON in response: {request.method} {request.url} - "
                f"{response.status_code}",
                extra={
                    "http_method": request.method,
                    "http_status": response.status_code,
                    "response_body": response.text[:1024],
                },
            )
            raise PingDirectoryAPIError(
                f"Invalid JSON in {response.status_code} response: {e}",
                status_code=response.status_code,
                response_body=response.text,
                cause=e,
            ) from e

    async def add_config_object(
        self, collection_path: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Create a configuration object.

        Args:
            collection_path: Path of the collection to add to
            body: Add request including ``schemas`` and the object name

        Returns:
            The created object as returned by the server
        """
        response = await self._make_request("POST", collection_path, json=body)
        return self._json_body(response)

    async def get_config_object(self, object_path: str) -> dict[str, Any]:
        """
        Read a configuration object.

        Raises:
            PingDirectoryAPIError: If the request fails, including 404
        """
        response = await self._make_request("GET", object_path)
        return self._json_body(response)

    async def update_config_object(
        self, object_path: str, update_request: UpdateRequest
    ) -> dict[str, Any]:
        """
        Apply update operations to a configuration object.

        Args:
            object_path: Path of the object to modify
            update_request: Operations to apply

        Returns:
            The updated object as returned by the server
        """
        response = await self._make_request(
            "PATCH",
            object_path,
            json=update_request.model_dump(exclude_none=True, by_alias=True),
        )
        return self._json_body(response)

    async def delete_config_object(self, object_path: str) -> None:
        """Delete a configuration object."""
        await self._make_request("DELETE", object_path)

    async def list_config_objects(
        self, collection_path: str, filter: str | None = None
    ) -> ListResponse:
        """
        List the objects of a configuration collection.

        Args:
            collection_path: Path of the collection
            filter: Optional SCIM filter restricting the objects returned

        Returns:
            List response with the matching objects
        """
        params = {"filter": filter} if filter else None
        response = await self._make_request("GET", collection_path, params=params)
        body = self._json_body(response)
        try:
            return ListResponse.model_validate(body)
        except PydanticValidationError as e:
            raise PingDirectoryAPIError(
                f"Unexpected list response: {e}",
                status_code=response.status_code,
                response_body=response.text,
                cause=e,
            ) from e
