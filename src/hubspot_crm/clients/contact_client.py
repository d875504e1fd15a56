"""
Client for HubSpot contact-related operations.
"""
import logging
from typing import Dict, Optional, Tuple, Union
from urllib.parse import quote

from pydantic import ValidationError

from ..core.error_handler import handle_transport_errors
from ..core.errors import ErrorResponse
from ..core.transport import Response, Transport
from ..models import ContactInput, ContactOutput

logger = logging.getLogger('hubspot_crm_client.contact')

ContactResult = Tuple[Optional[ContactOutput], ErrorResponse]


class ContactClient:
    """Client for HubSpot contact-related operations."""

    def __init__(self, transport: Transport):
        """Initialize with the transport used for every request.

        Args:
            transport: Configured HubSpot transport
        """
        self.transport = transport

    @handle_transport_errors(ErrorResponse)
    def create_contact(self, contact_input: Union[ContactInput, Dict[str, str]]) -> ContactResult:
        """Create a new contact in HubSpot.

        Args:
            contact_input: Contact properties, as a ContactInput or a plain mapping

        Returns:
            Tuple of the created contact and an empty error, or None and the error
        """
        logger.info("Attempting to create HubSpot contact")

        request_body = self._serialize(contact_input)
        if request_body is None:
            return None, ErrorResponse(status="error", message="invalid contact input")

        r = self.transport.request(self.transport.build_url("objects/contacts/"), "POST", request_body)
        if r.status_code != 201:
            return None, self._error_from_response(r, "unable to create HubSpot contact.")

        contact, error = self._parse_contact(r)
        if contact is not None:
            logger.info(f"HubSpot contact created successfully. Contact ID: {contact.id}")
        return contact, error

    @handle_transport_errors(ErrorResponse)
    def update_contact(
        self,
        contact_id: str,
        contact_input: Union[ContactInput, Dict[str, str]]
    ) -> ContactResult:
        """Update the properties of an existing contact.

        Args:
            contact_id: HubSpot contact ID
            contact_input: Properties to set

        Returns:
            Tuple of the updated contact and an empty error, or None and the error
        """
        logger.info("Attempting to update HubSpot contact")

        request_body = self._serialize(contact_input)
        if request_body is None:
            return None, ErrorResponse(status="error", message="invalid contact input")

        url = self.transport.build_url(f"objects/contacts/{quote(contact_id, safe='')}")
        r = self.transport.request(url, "PATCH", request_body)
        if r.status_code != 200:
            return None, self._error_from_response(r, "unable to update HubSpot contact:")

        contact, error = self._parse_contact(r)
        if contact is not None:
            logger.info(f"HubSpot contact updated successfully. Contact ID: {contact.id}")
        return contact, error

    @handle_transport_errors(ErrorResponse)
    def read_contact(self, email: str, properties: str) -> ContactResult:
        """Look up a contact by email address.

        Args:
            email: Contact's email address
            properties: Comma separated list of properties to return

        Returns:
            Tuple of the contact and an empty error, or None and the error.
            A missing contact yields a 404 OBJECT_NOT_FOUND error.
        """
        logger.info("Attempting to read HubSpot contact")

        url = self.transport.build_url(
            f"objects/contacts/{quote(email, safe='@')}",
            {"idProperty": "email", "properties": properties},
        )
        r = self.transport.request(url, "GET")

        if r.status_code == 404:
            error = self._error_from_response(r, "HubSpot contact not found:")
            # HubSpot answers a missing contact with an empty body
            if not error.category:
                error = ErrorResponse(
                    status="error",
                    category="OBJECT_NOT_FOUND",
                    message="contact not found",
                    status_code=404,
                )
            return None, error
        if r.status_code != 200:
            return None, self._error_from_response(r, "unable to read HubSpot contact:")

        contact, error = self._parse_contact(r)
        if contact is not None:
            logger.info(f"HubSpot contact read successfully. Contact ID: {contact.id}")
        return contact, error

    @handle_transport_errors(ErrorResponse, returns_payload=False)
    def delete_contact(self, contact_id: str) -> ErrorResponse:
        """Archive a contact in HubSpot.

        Args:
            contact_id: HubSpot contact ID

        Returns:
            Empty error on success, populated error otherwise
        """
        logger.info("Attempting to delete HubSpot contact")

        url = self.transport.build_url(f"objects/contacts/{quote(contact_id, safe='')}")
        r = self.transport.request(url, "DELETE")
        if r.status_code != 204:
            return self._error_from_response(r, "unable to delete HubSpot contact:")

        logger.info(f"HubSpot contact deleted successfully. Contact ID: {contact_id}")
        return ErrorResponse()

    def _serialize(self, contact_input: Union[ContactInput, Dict[str, str]]) -> Optional[bytes]:
        try:
            if not isinstance(contact_input, ContactInput):
                contact_input = ContactInput.model_validate({"properties": contact_input})
            return contact_input.model_dump_json(by_alias=True).encode("utf-8")
        except (ValidationError, TypeError, ValueError) as e:
            logger.error(f"Could not marshal the provided contact body, err: {e}")
            return None

    def _parse_contact(self, r: Response) -> ContactResult:
        try:
            return ContactOutput.model_validate_json(r.body), ErrorResponse()
        except ValidationError as e:
            msg = f"could not unmarshal HubSpot response, err: {e}"
            logger.error(msg)
            return None, ErrorResponse(status="error", message=msg)

    def _error_from_response(self, r: Response, msg: str) -> ErrorResponse:
        """Parse a non-success response body into an ErrorResponse.

        The HTTP status code is always attached. An unparseable body yields a
        synthetic error describing the decode failure.
        """
        try:
            error = ErrorResponse.model_validate_json(r.body)
        except ValidationError as e:
            logger.error(f"{msg} Unable to unmarshal error response.")
            error = ErrorResponse(
                status="error",
                message=f"could not unmarshal HubSpot error response, err: {e}",
            )
        else:
            logger.error(f"{msg} Got error: {error.message}.")
        error.status_code = r.status_code
        return error
