"""
HTTP transport for HubSpot CRM requests.
Issues a single request and hands back the status code and raw body.
"""
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol
from urllib.parse import urlencode

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig

logger = logging.getLogger('hubspot_crm_client.transport')

# Seconds to wait for the remote server to accept the connection
CONNECT_TIMEOUT = 5
# Seconds before giving up on a server that accepted but never answers
REQUEST_TIMEOUT = 30
MAX_IDLE_CONNECTIONS = 2
READ_CHUNK_SIZE = 8192


class TransportError(Exception):
    """Raised when a request could not be executed or its body not read."""


class HTTPClient(Protocol):
    """Anything shaped like ``requests.Session.request``."""

    def request(self, method: str, url: str, **kwargs: Any) -> Any:
        ...


@dataclass
class Response:
    """Status code and raw body of a completed request."""

    status_code: int
    body: bytes


def build_url(config: ClientConfig, path: str, params: Optional[Dict[str, str]] = None) -> str:
    """Build a versioned CRM endpoint URL carrying the API key.

    Args:
        config: Client configuration
        path: Path below ``/crm/{version}/``
        params: Extra query parameters, placed before the API key

    Returns:
        Absolute endpoint URL
    """
    query = dict(params or {})
    query["hapikey"] = config.api_key
    return f"{config.base_url}/crm/{config.api_version}/{path}?{urlencode(query)}"


def _check_deadline(deadline: float) -> None:
    if time.monotonic() > deadline:
        logger.error(f"HubSpot response not received within {REQUEST_TIMEOUT}s")
        raise TransportError("request execution failed")


def new_http_client() -> requests.Session:
    """Create the default session with a small bounded connection pool.

    Returns:
        Configured requests session
    """
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=1, pool_maxsize=MAX_IDLE_CONNECTIONS)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class Transport:
    """Sends requests to the HubSpot API on behalf of the operation clients."""

    def __init__(self, config: ClientConfig, http_client: Optional[HTTPClient] = None):
        """Initialize the transport.

        Args:
            config: Client configuration (base URL, API version, API key)
            http_client: Underlying HTTP client. Defaults to a pooled requests session
        """
        self.config = config
        self.http_client = http_client if http_client is not None else new_http_client()

    def build_url(self, path: str, params: Optional[Dict[str, str]] = None) -> str:
        return build_url(self.config, path, params)

    def request(self, url: str, method: str, body: Optional[bytes] = None) -> Response:
        """Execute an HTTP request and return the response.

        Args:
            url: Endpoint URL
            method: HTTP method
            body: Serialized JSON request body

        Returns:
            Response with status code and raw body bytes

        Raises:
            TransportError: If the connection failed, timed out or the body could not be read
        """
        deadline = time.monotonic() + REQUEST_TIMEOUT
        try:
            r = self.http_client.request(
                method,
                url,
                data=body,
                headers={"Content-Type": "application/json"},
                timeout=(CONNECT_TIMEOUT, REQUEST_TIMEOUT),
                stream=True,
            )
        except requests.RequestException as e:
            logger.error(f"Unable to complete request, got error = {e}")
            raise TransportError("request execution failed") from e

        logger.info(f"Request successful, got response status: {r.status_code}")

        # The read timeout bounds each socket read; the deadline bounds the whole call
        chunks = []
        try:
            for chunk in r.iter_content(chunk_size=READ_CHUNK_SIZE):
                _check_deadline(deadline)
                chunks.append(chunk)
            _check_deadline(deadline)
        except requests.RequestException as e:
            logger.error(f"Could not read HubSpot response, err: {e}")
            raise TransportError("could not read response") from e
        finally:
            r.close()

        return Response(status_code=r.status_code, body=b"".join(chunks))
