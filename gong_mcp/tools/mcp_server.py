# =============================================================================
# gong_mcp/tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the two Gong operations as MCP tools.  Each tool is a thin
#   wrapper: it hands the arguments the agent sent, untouched, to the
#   Dispatcher, which owns validation, the Gong call and the envelope.
#
# HOW IT WORKS (the flow):
#   1. The agent lists tools → FastMCP answers with the names, descriptions
#      and argument schemas declared in tools/operations.py, verbatim
#   2. The agent calls a tool by name (e.g. "list_calls")
#   3. FastMCP routes the call to OperationTool.run() with the raw arguments
#   4. run() calls Dispatcher.dispatch() and gets a ToolEnvelope back
#   5. Success → the pretty-printed JSON text is returned as the tool result
#      Failure → ToolError(text), which FastMCP turns into a result with
#      isError=true.  No failure ever surfaces as a protocol-level error.
#
# WHY A Tool SUBCLASS AND NOT @mcp.tool()?
#   A decorated function gets its schema generated from the signature and
#   its arguments coerced by pydantic before our code runs.  Registering
#   the operation directly keeps the registry as the discovery schema and
#   leaves argument checking to the Dispatcher alone.
#
# RUNNING THIS SERVER:
#   gong-mcp              (console script installed by pip)
#   python -m gong_mcp
#   Both speak MCP over stdio; see gong_mcp/main.py.
# =============================================================================

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent
from pydantic import Field

from gong_mcp.tools.dispatcher import Dispatcher
from gong_mcp.tools.operations import OPERATIONS, Operation

SERVER_NAME = "gong"
SERVER_VERSION = "0.1.0"


class OperationTool(Tool):
    """One registry operation, served by the Dispatcher."""

    dispatcher: Any = Field(exclude=True)

    @classmethod
    def from_operation(cls, operation: Operation, dispatcher: Dispatcher) -> "OperationTool":
        # output_schema stays None: results are plain text content only.
        return cls(
            name=operation.name,
            description=operation.description,
            parameters=operation.input_schema,
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        envelope = await self.dispatcher.dispatch(self.name, arguments)
        if envelope.is_error:
            raise ToolError(envelope.text)
        return ToolResult(content=[TextContent(type="text", text=envelope.text)])


def create_server(dispatcher: Dispatcher) -> FastMCP:
    """Build the FastMCP server with every registered operation bound to ``dispatcher``."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for operation in OPERATIONS.values():
        mcp.add_tool(OperationTool.from_operation(operation, dispatcher))
    return mcp
