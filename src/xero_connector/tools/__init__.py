"""MCP tools for the Xero connector."""

from .objects import OBJECT_TOOLS, handle_object_tool
from .status import STATUS_TOOLS, handle_status_tool

ALL_TOOLS = STATUS_TOOLS + OBJECT_TOOLS

__all__ = [
    "ALL_TOOLS",
    "OBJECT_TOOLS",
    "STATUS_TOOLS",
    "handle_object_tool",
    "handle_status_tool",
]
