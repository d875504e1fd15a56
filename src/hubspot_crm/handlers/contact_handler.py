"""
Handler for contact-related HubSpot operations.
"""
from typing import Any, Dict, List, Optional

import mcp.types as types

from .base_handler import BaseHandler

DEFAULT_READ_PROPERTIES = "firstname,lastname,email,company"


class ContactHandler(BaseHandler):
    """Handler for contact-related HubSpot tools."""

    def __init__(self, hubspot_client):
        super().__init__(hubspot_client, "contact_handler")

    def get_create_contact_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "firstname": {"type": "string", "description": "Contact's first name"},
                "lastname": {"type": "string", "description": "Contact's last name"},
                "email": {"type": "string", "description": "Contact's email address"},
                "properties": {"type": "object", "description": "Additional contact properties"}
            },
            "required": ["email"]
        }

    def get_update_contact_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "contact_id": {"type": "string", "description": "HubSpot contact ID"},
                "properties": {"type": "object", "description": "Contact properties to set"}
            },
            "required": ["contact_id", "properties"]
        }

    def get_read_contact_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "email": {"type": "string", "description": "Contact's email address"},
                "properties": {
                    "type": "string",
                    "description": f"Comma separated properties to return (default: {DEFAULT_READ_PROPERTIES})"
                }
            },
            "required": ["email"]
        }

    def get_delete_contact_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "contact_id": {"type": "string", "description": "HubSpot contact ID"}
            },
            "required": ["contact_id"]
        }

    def create_contact(self, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """Create a new contact in HubSpot.

        Args:
            arguments: Tool arguments containing contact information

        Returns:
            Text response with the created contact or the error
        """
        self.validate_required_arguments(arguments, ["email"])

        properties = {"email": arguments["email"]}
        for key in ("firstname", "lastname"):
            if key in arguments:
                properties[key] = arguments[key]

        # Add any additional properties
        properties.update(arguments.get("properties") or {})

        contact, error = self.hubspot.create_contact(properties)
        return self.create_result_response(contact, error)

    def update_contact(self, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        self.validate_required_arguments(arguments, ["contact_id", "properties"])

        contact, error = self.hubspot.update_contact(
            str(arguments["contact_id"]),
            arguments["properties"]
        )
        return self.create_result_response(contact, error)

    def read_contact(self, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """Read a contact by email address.

        Args:
            arguments: Tool arguments containing the email and optional property list

        Returns:
            Text response with the contact or the error
        """
        self.validate_required_arguments(arguments, ["email"])

        properties = self.get_argument_with_default(arguments, "properties", DEFAULT_READ_PROPERTIES)
        contact, error = self.hubspot.read_contact(arguments["email"], properties)
        return self.create_result_response(contact, error)

    def delete_contact(self, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        self.validate_required_arguments(arguments, ["contact_id"])

        contact_id = str(arguments["contact_id"])
        error = self.hubspot.delete_contact(contact_id)
        return self.create_result_response({"deleted": True, "id": contact_id}, error)
