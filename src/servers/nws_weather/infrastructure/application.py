from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Tuple

from mcp.server.fastmcp import FastMCP


class MCPApplicationService(ABC):
    """Base class for MCP Application Services following DDD patterns.

    Application Services orchestrate domain objects to fulfill use cases
    while remaining independent of infrastructure concerns. This class
    provides the MCP-specific infrastructure setup: subclasses declare
    their tools as an explicit registry of ``(name, description, callable)``
    entries and the base class hands each one to FastMCP.

    Args:
        mcp: FastMCP server instance for protocol handling
    """

    def __init__(self, mcp: FastMCP):
        self.mcp = mcp

        self._register_tools()

    @property
    @abstractmethod
    def tools(self) -> List[Tuple[str, str, Callable]]:
        pass

    @property
    def tool_registry(self) -> Dict[str, Callable]:
        """Map of tool name to the callable that serves it"""
        return {name: tool for name, _, tool in self.tools}

    def _register_tools(self):
        """Register MCP tools"""
        for name, description, tool in self.tools:
            self.mcp.tool(name=name, description=description)(tool)

    def run(self, transport: str = "stdio"):
        """Run the MCP server"""
        self.mcp.run(transport=transport)
