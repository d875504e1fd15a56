"""
Configuration for the HubSpot CRM client.
"""
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_BASE_URL = "https://api.hubapi.com"
DEFAULT_API_VERSION = "v3"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings shared by every request of a client."""

    api_key: str
    base_url: str = DEFAULT_API_BASE_URL
    api_version: str = DEFAULT_API_VERSION

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "ClientConfig":
        """Build a config from explicit values and environment variables.

        Args:
            api_key: HubSpot API key. If None, uses HUBSPOT_API_KEY env var

        Returns:
            Client configuration

        Raises:
            ValueError: If no API key is available
        """
        key = api_key or os.getenv("HUBSPOT_API_KEY")
        if not key:
            raise ValueError("HUBSPOT_API_KEY environment variable is required")
        return cls(
            api_key=key,
            base_url=os.getenv("HUBSPOT_API_BASE_URL", DEFAULT_API_BASE_URL),
            api_version=os.getenv("HUBSPOT_API_VERSION", DEFAULT_API_VERSION),
        )

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='[MASKED]', base_url={self.base_url!r}, "
            f"api_version={self.api_version!r})"
        )
