"""MCP Server exposing the Xero connector."""

import asyncio
import json
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent

from .config import ConnectorConfig
from .tools import ALL_TOOLS, OBJECT_TOOLS, handle_object_tool, handle_status_tool
from .xero import XeroClient

logger = logging.getLogger(__name__)

OBJECT_TOOL_NAMES = {tool.name for tool in OBJECT_TOOLS}


class XeroConnectorServer:
    """MCP Server for the Xero connector."""

    def __init__(self, config: ConnectorConfig | None = None):
        """Initialize the Xero connector server.

        Args:
            config: Connector configuration. Loaded from the environment on first use if omitted.
        """
        self.server = Server("xero-connector")
        self._config = config
        self._client: XeroClient | None = None

        self._register_handlers()

    @property
    def config(self) -> ConnectorConfig:
        """Connector configuration, loaded on first access."""
        if self._config is None:
            self._config = ConnectorConfig.from_environment()
            logger.info(f"Loaded Xero connector configuration for {self._config.api_url}")
        return self._config

    def get_client(self) -> XeroClient:
        """Get the Xero client, creating it if needed."""
        if self._client is None:
            self._client = XeroClient(self.config)
        return self._client

    def _register_handlers(self) -> None:
        """Register MCP server handlers."""

        @self.server.list_tools()
        async def list_tools():
            """List all available Xero tools."""
            return ALL_TOOLS

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            """Handle tool calls."""
            logger.info(f"Tool call: {name} with arguments: {list(arguments)}")

            try:
                result = await self.handle_tool(name, arguments)
            except Exception as e:
                logger.exception(f"Error handling tool {name}")
                result = {"error": str(e)}

            return [TextContent(type="text", text=json.dumps(result, indent=2))]

    async def handle_tool(self, name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """Route tool calls to appropriate handlers.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Tool result
        """
        if name == "xero_connection_status":
            return await handle_status_tool(name, arguments, self.config)

        if name in OBJECT_TOOL_NAMES:
            if not self.config.is_configured:
                return {
                    "error": "Xero connector credentials are not configured",
                    "message": "Use xero_connection_status to see which settings are required",
                }
            return await handle_object_tool(name, arguments, self.get_client())

        return {"error": f"Unknown tool: {name}"}

    async def run(self) -> None:
        """Run the MCP server."""
        logger.info("Starting Xero connector MCP server")

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def main() -> None:
    """Main entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    server = XeroConnectorServer()
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
