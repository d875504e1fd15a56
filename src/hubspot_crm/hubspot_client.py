"""
HubSpot CRM client module.
Provides contact and association operations through specialized client modules.
"""
import logging
from typing import Dict, Optional, Union

from .core.config import ClientConfig
from .core.errors import AssociationErrorResponse, ErrorResponse
from .core.transport import HTTPClient, Transport, TransportError
from .clients.association_client import AssociationClient, AssociationResult, build_association_url
from .clients.contact_client import ContactClient, ContactResult
from .models import AssociationInput, ContactInput

__all__ = [
    "HubSpotClient",
    "ErrorResponse",
    "AssociationErrorResponse",
    "TransportError",
    "build_association_url",
]

logger = logging.getLogger('hubspot_crm_client')


class HubSpotClient:
    """Main HubSpot client that composes specialized clients for each domain."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        http_client: Optional[HTTPClient] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None
    ):
        """Initialize the HubSpot client with API credentials.

        Args:
            api_key: HubSpot API key. If None, uses HUBSPOT_API_KEY env var
            http_client: Underlying HTTP client. Defaults to a pooled requests session
            base_url: API base URL override
            api_version: API version override
        """
        config = ClientConfig.from_env(api_key)
        self.config = ClientConfig(
            api_key=config.api_key,
            base_url=base_url or config.base_url,
            api_version=api_version or config.api_version,
        )
        logger.debug(f"Using HubSpot API at {self.config.base_url} ({self.config.api_version})")

        self.transport = Transport(self.config, http_client)

        # Initialize domain-specific clients
        self.contacts = ContactClient(self.transport)
        self.associations = AssociationClient(self.transport)

    @property
    def http_client(self) -> HTTPClient:
        return self.transport.http_client

    @http_client.setter
    def http_client(self, http_client: HTTPClient) -> None:
        self.transport.http_client = http_client

    # Method delegation to specialized clients
    def create_contact(self, contact_input: Union[ContactInput, Dict[str, str]]) -> ContactResult:
        """Create a new contact in HubSpot.

        Args:
            contact_input: Contact properties

        Returns:
            Tuple of (contact, error); exactly one of them is populated
        """
        return self.contacts.create_contact(contact_input)

    def update_contact(
        self,
        contact_id: str,
        contact_input: Union[ContactInput, Dict[str, str]]
    ) -> ContactResult:
        """Update a contact in HubSpot.

        Args:
            contact_id: HubSpot contact ID
            contact_input: Properties to set

        Returns:
            Tuple of (contact, error); exactly one of them is populated
        """
        return self.contacts.update_contact(contact_id, contact_input)

    def read_contact(self, email: str, properties: str) -> ContactResult:
        """Read a contact by email address.

        Args:
            email: Contact's email address
            properties: Comma separated list of properties to return

        Returns:
            Tuple of (contact, error); exactly one of them is populated
        """
        return self.contacts.read_contact(email, properties)

    def delete_contact(self, contact_id: str) -> ErrorResponse:
        """Delete a contact in HubSpot.

        Args:
            contact_id: HubSpot contact ID

        Returns:
            Error response, empty on success
        """
        return self.contacts.delete_contact(contact_id)

    def create_association(
        self,
        association: AssociationInput,
        from_object: str,
        to_object: str
    ) -> AssociationResult:
        """Relate two objects to each other in HubSpot.

        Args:
            association: Associations to create
            from_object: Object type the association starts from, e.g. "contact"
            to_object: Object type the association points to, e.g. "company"

        Returns:
            Tuple of (results, error); exactly one of them is populated
        """
        return self.associations.create_association(association, from_object, to_object)
