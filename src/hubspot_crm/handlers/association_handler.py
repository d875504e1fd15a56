"""
Handler for association-related HubSpot operations.
"""
from typing import Any, Dict, List, Optional

import mcp.types as types

from ..models import (
    ASSOCIATION_CONTACT_TO_COMPANY,
    Association,
    AssociationID,
    AssociationInput,
)
from .base_handler import BaseHandler


class AssociationHandler(BaseHandler):
    """Handler for association-related HubSpot tools."""

    def __init__(self, hubspot_client):
        super().__init__(hubspot_client, "association_handler")

    def get_create_association_schema(self) -> Dict[str, Any]:
        """Get the input schema for creating an association.

        Returns:
            Schema definition dictionary
        """
        return {
            "type": "object",
            "properties": {
                "from_id": {"type": "string", "description": "ID of the object the association starts from"},
                "to_id": {"type": "string", "description": "ID of the object the association points to"},
                "from_object": {"type": "string", "description": "Object type to associate from (default: contact)"},
                "to_object": {"type": "string", "description": "Object type to associate to (default: company)"},
                "association_type": {
                    "type": "string",
                    "description": f"Association type (default: {ASSOCIATION_CONTACT_TO_COMPANY})"
                }
            },
            "required": ["from_id", "to_id"]
        }

    def create_association(self, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """Relate two HubSpot objects.

        Args:
            arguments: Tool arguments containing the object IDs and types

        Returns:
            Text response with the association results or the error
        """
        self.validate_required_arguments(arguments, ["from_id", "to_id"])

        association = AssociationInput(
            inputs=[
                Association(
                    association_type=self.get_argument_with_default(
                        arguments, "association_type", ASSOCIATION_CONTACT_TO_COMPANY
                    ),
                    from_=AssociationID(id=str(arguments["from_id"])),
                    to=AssociationID(id=str(arguments["to_id"])),
                )
            ]
        )

        results, error = self.hubspot.create_association(
            association,
            self.get_argument_with_default(arguments, "from_object", "contact"),
            self.get_argument_with_default(arguments, "to_object", "company"),
        )
        return self.create_result_response(results, error)
