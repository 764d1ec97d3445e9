"""Connection status tool for the Xero connector MCP server."""

from typing import Any

from mcp.types import Tool

from ..config import ConnectorConfig

STATUS_TOOLS = [
    Tool(
        name="xero_connection_status",
        description="Check whether Xero OAuth 1.0a credentials are configured. Returns the API URL, signature method and consumer key in use.",
        inputSchema={
            "type": "object",
            "properties": {},
            "required": [],
        },
    ),
]


async def handle_status_tool(name: str, arguments: dict[str, Any], config: ConnectorConfig) -> dict[str, Any]:
    """Handle status tool calls."""
    if name == "xero_connection_status":
        status: dict[str, Any] = {
            "configured": config.is_configured,
            "api_url": config.api_url,
            "signature_method": config.signature_method,
            "consumer_key": config.consumer_key or None,
        }
        if not config.is_configured:
            status["message"] = (
                "Set XERO_CONSUMER_KEY, XERO_CONSUMER_SECRET, XERO_ACCESS_KEY and "
                "XERO_ACCESS_SECRET, or store them in secure storage under the "
                "'xero-connector' service"
            )
        return status

    return {"error": f"Unknown status tool: {name}"}
