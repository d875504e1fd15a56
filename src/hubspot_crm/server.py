"""
MCP server module for HubSpot CRM integration.
Provides tools for managing contacts and associations through an MCP server interface.
"""
import logging
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from mcp.server.models import InitializationOptions
from mcp.server.lowlevel import NotificationOptions
import mcp.types as types
from mcp.server import Server
import mcp.server.stdio

from .hubspot_client import HubSpotClient
from .handlers.association_handler import AssociationHandler
from .handlers.contact_handler import ContactHandler

logger = logging.getLogger('hubspot_crm_server')

load_dotenv()

SERVER_NAME = "hubspot-crm"
SERVER_VERSION = "0.1.0"


async def main(api_key: Optional[str] = None):
    """Run the HubSpot CRM MCP server."""
    logger.info("Server starting")

    hubspot_client = initialize_hubspot_client(api_key)

    contact_handler = ContactHandler(hubspot_client)
    association_handler = AssociationHandler(hubspot_client)

    server = create_server_with_handlers(contact_handler, association_handler)

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("Server running with stdio transport")

        initialization_options = InitializationOptions(
            server_name=SERVER_NAME,
            server_version=SERVER_VERSION,
            capabilities=server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={}
            )
        )

        await server.run(read_stream, write_stream, initialization_options)


def initialize_hubspot_client(api_key: Optional[str]) -> HubSpotClient:
    """Initialize and return the HubSpot client."""
    return HubSpotClient(api_key)


def create_server_with_handlers(
    contact_handler: ContactHandler,
    association_handler: AssociationHandler
) -> Server:
    """Create and configure the MCP server with all handlers."""
    server = Server(SERVER_NAME)

    register_tool_definitions(server, contact_handler, association_handler)
    register_tool_call_handler(server, contact_handler, association_handler)

    return server


def list_tools(
    contact_handler: ContactHandler,
    association_handler: AssociationHandler
) -> List[types.Tool]:
    """Build the tool definitions exposed by the server.

    Args:
        contact_handler: Handler for contact operations
        association_handler: Handler for association operations

    Returns:
        List of tool definitions
    """
    return [
        # Contact tools
        types.Tool(
            name="hubspot_create_contact",
            description="Create a new contact in HubSpot",
            inputSchema=contact_handler.get_create_contact_schema(),
        ),
        types.Tool(
            name="hubspot_update_contact",
            description="Update the properties of an existing HubSpot contact",
            inputSchema=contact_handler.get_update_contact_schema(),
        ),
        types.Tool(
            name="hubspot_read_contact",
            description="Read a HubSpot contact by email address",
            inputSchema=contact_handler.get_read_contact_schema(),
        ),
        types.Tool(
            name="hubspot_delete_contact",
            description="Delete a HubSpot contact",
            inputSchema=contact_handler.get_delete_contact_schema(),
        ),

        # Association tools
        types.Tool(
            name="hubspot_create_association",
            description="Associate two HubSpot objects, e.g. a contact with a company",
            inputSchema=association_handler.get_create_association_schema(),
        ),
    ]


def call_tool(
    name: str,
    arguments: Optional[Dict[str, Any]],
    contact_handler: ContactHandler,
    association_handler: AssociationHandler
) -> List[types.TextContent]:
    """Route a tool call to its handler.

    Args:
        name: Tool name
        arguments: Tool arguments
        contact_handler: Handler for contact operations
        association_handler: Handler for association operations

    Returns:
        Text response from the handler, or the argument error
    """
    routes = {
        "hubspot_create_contact": contact_handler.create_contact,
        "hubspot_update_contact": contact_handler.update_contact,
        "hubspot_read_contact": contact_handler.read_contact,
        "hubspot_delete_contact": contact_handler.delete_contact,
        "hubspot_create_association": association_handler.create_association,
    }
    try:
        if name not in routes:
            raise ValueError(f"Unknown tool: {name}")
        return routes[name](arguments)
    except ValueError as e:
        logger.error(f"Tool call {name} failed: {str(e)}")
        return [types.TextContent(type="text", text=f"Error: {str(e)}")]
    except Exception as e:
        logger.error(f"Unexpected error in tool call {name}: {str(e)}", exc_info=True)
        return [types.TextContent(type="text", text=f"Error: {str(e)}")]


def register_tool_definitions(
    server: Server,
    contact_handler: ContactHandler,
    association_handler: AssociationHandler
) -> None:
    """Register tool definitions with the server."""
    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available tools"""
        return list_tools(contact_handler, association_handler)


def register_tool_call_handler(
    server: Server,
    contact_handler: ContactHandler,
    association_handler: AssociationHandler
) -> None:
    """Register tool call handler with the server."""
    @server.call_tool()
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        """Handle tool execution requests"""
        return call_tool(name, arguments, contact_handler, association_handler)
