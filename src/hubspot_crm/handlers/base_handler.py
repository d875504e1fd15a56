"""
Base handler for HubSpot API operations.
Provides common functionality for all specialized handlers.
"""
from typing import Any, Dict, List, Optional
import logging
import json

import mcp.types as types

from ..hubspot_client import HubSpotClient
from ..core.formatters import convert_datetime_fields


class BaseHandler:
    """Base class for all HubSpot tool handlers."""

    def __init__(self, hubspot_client: HubSpotClient, logger_name: str = "base_handler"):
        """Initialize the base handler with common dependencies.

        Args:
            hubspot_client: HubSpot client
            logger_name: Name for this handler's logger
        """
        self.hubspot = hubspot_client
        self.logger = logging.getLogger(f'hubspot_crm_server.{logger_name}')

    def create_text_response(self, content: Any) -> List[types.TextContent]:
        """Create a text response from content.

        Args:
            content: Content to return (will be converted to JSON if not string)

        Returns:
            List containing a TextContent object
        """
        if not isinstance(content, str):
            content = json.dumps(convert_datetime_fields(content))

        return [types.TextContent(type="text", text=content)]

    def create_result_response(self, payload: Any, error: Any) -> List[types.TextContent]:
        """Create a text response from an operation's ``(payload, error)`` pair.

        Args:
            payload: Operation payload, None on failure
            error: Operation error value, empty on success

        Returns:
            List containing a TextContent object
        """
        if error:
            self.logger.error(f"HubSpot operation failed: {error}")
            return self.create_text_response({"error": error})
        return self.create_text_response(payload)

    def validate_required_arguments(self, arguments: Optional[Dict[str, Any]], required_keys: List[str]) -> None:
        """Validate that required arguments are present.

        Args:
            arguments: Dictionary of arguments
            required_keys: List of required keys

        Raises:
            ValueError: If any required key is missing
        """
        if not arguments:
            raise ValueError(f"Missing arguments. Required: {', '.join(required_keys)}")

        for key in required_keys:
            if key not in arguments:
                raise ValueError(f"Missing required argument: {key}")

    def get_argument_with_default(
        self,
        arguments: Optional[Dict[str, Any]],
        key: str,
        default: Any
    ) -> Any:
        """Get an argument with a default value if not provided.

        Args:
            arguments: Dictionary of arguments
            key: Argument key
            default: Default value

        Returns:
            Argument value or default
        """
        if not arguments:
            return default

        return arguments.get(key, default)
