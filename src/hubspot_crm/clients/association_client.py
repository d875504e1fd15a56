"""
Client for HubSpot association operations.
"""
import logging
from typing import Optional, Tuple

from pydantic import ValidationError

from ..core.config import ClientConfig
from ..core.error_handler import handle_transport_errors
from ..core.errors import AssociationErrorResponse
from ..core.transport import Response, Transport, build_url
from ..models import AssociationInput, AssociationResults

logger = logging.getLogger('hubspot_crm_client.association')

AssociationResult = Tuple[Optional[AssociationResults], AssociationErrorResponse]


def build_association_url(config: ClientConfig, from_object: str, to_object: str) -> str:
    """Build the batch association endpoint for two object types.

    Args:
        config: Client configuration
        from_object: Object type the association starts from, e.g. "contact"
        to_object: Object type the association points to, e.g. "company"

    Returns:
        Endpoint URL with both object types trimmed

    Raises:
        ValueError: If either object type is empty or blank
    """
    from_object = from_object.strip()
    to_object = to_object.strip()
    if not from_object or not to_object:
        raise ValueError("from and to arguments require a value")

    return build_url(config, f"associations/{from_object}/{to_object}/batch/create")


class AssociationClient:
    """Client for relating HubSpot objects to each other."""

    def __init__(self, transport: Transport):
        """Initialize with the transport used for every request.

        Args:
            transport: Configured HubSpot transport
        """
        self.transport = transport

    @handle_transport_errors(AssociationErrorResponse)
    def create_association(
        self,
        association: AssociationInput,
        from_object: str,
        to_object: str
    ) -> AssociationResult:
        """Relate two objects to each other in HubSpot.

        Args:
            association: Associations to create
            from_object: Object type the association starts from
            to_object: Object type the association points to

        Returns:
            Tuple of the association results and an empty error, or None and
            the error. The error holds one item per invalid association side.
        """
        logger.info("Attempting to create HubSpot object association")

        try:
            url = build_association_url(self.transport.config, from_object, to_object)
        except ValueError as e:
            logger.error(f"Invalid association endpoints: {e}")
            return None, AssociationErrorResponse(status="error", message=str(e))

        try:
            request_body = association.model_dump_json(by_alias=True).encode("utf-8")
        except (AttributeError, TypeError, ValueError) as e:
            logger.error(f"Could not marshal the provided object association body, err: {e}")
            return None, AssociationErrorResponse(status="error", message="invalid association input")

        r = self.transport.request(url, "POST", request_body)
        if r.status_code != 201:
            return None, self._error_from_response(r)

        try:
            results = AssociationResults.model_validate_json(r.body)
        except ValidationError as e:
            msg = f"could not unmarshal HubSpot response, err: {e}"
            logger.error(msg)
            return None, AssociationErrorResponse(status="error", message=msg)

        if association.inputs:
            logger.info(
                f"HubSpot association created successfully. From ID: {association.inputs[0].from_.id}; "
                f"To ID: {association.inputs[0].to.id}"
            )
        return results, AssociationErrorResponse()

    def _error_from_response(self, r: Response) -> AssociationErrorResponse:
        msg = "Unable to associate HubSpot objects."
        try:
            error = AssociationErrorResponse.model_validate_json(r.body)
        except ValidationError as e:
            logger.error(f"{msg} Unable to unmarshal error response.")
            error = AssociationErrorResponse(
                status="error",
                message=f"could not unmarshal HubSpot error response, err: {e}",
            )
        else:
            logger.error(f"{msg} Got {error.num_errors} error(s):")
            for i, item_error in enumerate(error.errors):
                logger.error(f"error {i + 1}: {item_error.message}")
        error.status_code = r.status_code
        return error
