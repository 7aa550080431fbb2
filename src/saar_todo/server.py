"""MCP server wiring for the todo store.

TodoServer owns one low-level ``Server`` and routes every request to the
store it was given. Tool failures come back as ``isError`` results; resource
and prompt failures become protocol error responses.
"""

from __future__ import annotations

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    CallToolResult,
    ErrorData,
    GetPromptResult,
    Prompt,
    ReadResourceRequest,
    ReadResourceResult,
    Resource,
    ServerResult,
    TextContent,
    Tool,
)

import saar_todo.tools  # noqa: F401  (self-registering tool definitions)
from saar_todo.config import Settings
from saar_todo.errors import TodoError, UnknownOperation
from saar_todo.logger import logger
from saar_todo.registry import all_tools, get_handler, tool_error
from saar_todo.store import TodoStore

SUMMARIZE_PROMPT = "summarize_todos"


def _protocol_error(exc: TodoError) -> McpError:
    return McpError(ErrorData(code=exc.code, message=str(exc)))


class TodoServer:
    def __init__(self, store: TodoStore, settings: Settings) -> None:
        self.store = store
        self.server = Server(settings.server.name, version=settings.server.version)

        self.server.list_resources()(self.list_resources)
        # The read_resource decorator only forwards text and MIME type, which
        # would drop the ``done`` field, so the request handler is set directly.
        self.server.request_handlers[ReadResourceRequest] = self._handle_read_resource
        self.server.list_tools()(self.list_tools)
        # Argument checks live in the tools so callers get their error messages
        self.server.call_tool(validate_input=False)(self.call_tool)
        self.server.list_prompts()(self.list_prompts)
        self.server.get_prompt()(self.get_prompt)

    # -- resources -------------------------------------------------------------

    async def list_resources(self) -> list[Resource]:
        return self.store.list_resources()

    async def read_resource(self, uri: str) -> ReadResourceResult:
        try:
            contents = self.store.read_resource(uri)
        except TodoError as exc:
            logger.warning("Resource read failed", uri=uri, err=str(exc))
            raise _protocol_error(exc) from exc
        return ReadResourceResult(contents=[contents])

    async def _handle_read_resource(self, req: ReadResourceRequest) -> ServerResult:
        return ServerResult(await self.read_resource(str(req.params.uri)))

    # -- tools -----------------------------------------------------------------

    async def list_tools(self) -> list[Tool]:
        return all_tools()

    async def call_tool(self, name: str, arguments: dict | None) -> list[TextContent] | CallToolResult:
        handler = get_handler(name)
        if handler is None:
            logger.warning("Unknown tool requested", tool=name)
            return tool_error(str(UnknownOperation("tool", name)))
        try:
            return await handler(self.store, arguments or {})
        except TodoError as exc:
            logger.warning("Tool call failed", tool=name, err=str(exc))
            return tool_error(str(exc))

    # -- prompts ---------------------------------------------------------------

    async def list_prompts(self) -> list[Prompt]:
        return [Prompt(name=SUMMARIZE_PROMPT, description="Summarize all todos")]

    async def get_prompt(self, name: str, arguments: dict[str, str] | None = None) -> GetPromptResult:
        if name != SUMMARIZE_PROMPT:
            logger.warning("Unknown prompt requested", prompt=name)
            raise _protocol_error(UnknownOperation("prompt", name))
        return GetPromptResult(
            description="Summarize all todos",
            messages=self.store.build_summary_prompt(),
        )

    # -- transport -------------------------------------------------------------

    async def run(self) -> None:
        """Serve over stdio until the client closes the channel."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
