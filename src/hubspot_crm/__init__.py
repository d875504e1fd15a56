"""HubSpot CRM client with an MCP tool server."""

import asyncio
import logging
from typing import Optional

from .hubspot_client import HubSpotClient, build_association_url
from .core.config import ClientConfig
from .core.errors import AssociationErrorResponse, ErrorResponse
from .core.transport import TransportError
from .models import (
    ASSOCIATION_CONTACT_TO_COMPANY,
    Association,
    AssociationID,
    AssociationInput,
    AssociationResults,
    Contact,
    ContactInput,
    ContactOutput,
    new_contact,
    new_contact_input,
    new_single_contact_to_company_association_input,
)

logger = logging.getLogger('hubspot_crm')


async def main(api_key: Optional[str] = None):
    """Run the HubSpot CRM MCP server."""
    from . import server

    await server.main(api_key)


def run_main():
    """Synchronous entry point for the package."""
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Run the HubSpot CRM MCP server")
    parser.add_argument(
        "--api-key",
        help="HubSpot API key (overrides HUBSPOT_API_KEY environment variable)",
    )

    args = parser.parse_args()

    asyncio.run(main(api_key=args.api_key))


if __name__ == "__main__":
    run_main()

# Expose important items at package level
__all__ = [
    "main",
    "run_main",
    "HubSpotClient",
    "ClientConfig",
    "ErrorResponse",
    "AssociationErrorResponse",
    "TransportError",
    "build_association_url",
    "ASSOCIATION_CONTACT_TO_COMPANY",
    "Association",
    "AssociationID",
    "AssociationInput",
    "AssociationResults",
    "Contact",
    "ContactInput",
    "ContactOutput",
    "new_contact",
    "new_contact_input",
    "new_single_contact_to_company_association_input",
]
