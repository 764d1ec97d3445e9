"""Object tools for the Xero connector MCP server."""

from typing import Any

from mcp.types import Tool

from ..exceptions import XeroAuthorizationError
from ..xero import ListOptions, ReadableObjectType, WritableObjectType, XeroClient

OBJECT_TOOLS = [
    Tool(
        name="xero_list_objects",
        description="List Xero objects of a type, optionally filtered with a 'where' clause and sorted with an 'order' clause. Returns the raw Xero XML response.",
        inputSchema={
            "type": "object",
            "properties": {
                "object_type": {
                    "type": "string",
                    "description": "Xero object type (e.g., Contacts, Invoices)",
                    "enum": [t.value for t in ReadableObjectType],
                },
                "where": {
                    "type": "string",
                    "description": 'Filter clause, e.g. Name.Contains("Acme")',
                },
                "order": {
                    "type": "string",
                    "description": "Ordering clause, e.g. Name DESC",
                },
            },
            "required": ["object_type"],
        },
    ),
    Tool(
        name="xero_get_object",
        description="Get a single Xero object by type and ID. Without an ID the object type resource itself is fetched.",
        inputSchema={
            "type": "object",
            "properties": {
                "object_type": {
                    "type": "string",
                    "description": "Xero object type (e.g., Contacts, Invoices)",
                    "enum": [t.value for t in ReadableObjectType],
                },
                "object_id": {
                    "type": "string",
                    "description": "Xero object ID (UUID) or number",
                },
            },
            "required": ["object_type"],
        },
    ),
    Tool(
        name="xero_create_object",
        description="Create Xero objects from an XML document.",
        inputSchema={
            "type": "object",
            "properties": {
                "object_type": {
                    "type": "string",
                    "description": "Writable Xero object type",
                    "enum": [t.value for t in WritableObjectType],
                },
                "xml": {
                    "type": "string",
                    "description": "XML request document, e.g. <Contacts><Contact><Name>Acme</Name></Contact></Contacts>",
                },
            },
            "required": ["object_type", "xml"],
        },
    ),
    Tool(
        name="xero_update_object",
        description="Update Xero objects from an XML document. Objects are matched by the IDs in the document.",
        inputSchema={
            "type": "object",
            "properties": {
                "object_type": {
                    "type": "string",
                    "description": "Writable Xero object type",
                    "enum": [t.value for t in WritableObjectType],
                },
                "xml": {
                    "type": "string",
                    "description": "XML request document",
                },
            },
            "required": ["object_type", "xml"],
        },
    ),
]


async def handle_object_tool(
    name: str,
    arguments: dict[str, Any],
    client: XeroClient,
) -> dict[str, Any]:
    """Handle object tool calls.

    Args:
        name: Tool name
        arguments: Tool arguments
        client: Xero client

    Returns:
        Tool result
    """
    object_type = arguments.get("object_type")

    try:
        if name == "xero_list_objects":
            options = ListOptions(where=arguments.get("where"), order=arguments.get("order"))
            xml = await client.list_objects(object_type, options)

        elif name == "xero_get_object":
            xml = await client.get_object(object_type, arguments.get("object_id"))

        elif name == "xero_create_object":
            xml = await client.create_object(object_type, arguments["xml"])

        elif name == "xero_update_object":
            xml = await client.update_object(object_type, arguments["xml"])

        else:
            return {"error": f"Unknown object tool: {name}"}

    except XeroAuthorizationError as e:
        return {"error": str(e), "error_type": "authorization"}
    except Exception as e:
        return {"error": str(e), "error_type": "unexpected"}

    return {"object_type": object_type, "xml": xml}
