"""
Method Router — Dispatch generic HTTP /mcp requests to the Tool Registry

Routes:
  tools/list   → registered tool names + one-line descriptions
  tools/call   → registry dispatch (validation + default-fill + executor)

Anything else is a BadRequestError("Unknown method").
"""

from typing import Any, Dict

from .errors import BadRequestError, NotFoundError
from .logger import get_logger
from .protocol import json_result
from .registry import ToolRegistry

log = get_logger("router")

TOOLS_LIST = "tools/list"
TOOLS_CALL = "tools/call"


class MethodRouter:
    """Generic method dispatcher over a frozen ToolRegistry."""

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    async def route(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Route a decoded request body to the matching handler.

        Returns the success payload. Raises BadRequestError, NotFoundError,
        ValidationError or ExecutionError for the caller to format.
        """
        method = body.get("method")
        params = body.get("params")
        if not isinstance(params, dict):
            params = {}

        if method == TOOLS_LIST:
            return self._handle_tools_list()

        if method == TOOLS_CALL:
            return await self._handle_tools_call(params)

        raise BadRequestError("Unknown method")

    # ── handlers ─────────────────────────────────────────────────

    def _handle_tools_list(self) -> Dict[str, Any]:
        return {
            "tools": [
                {"name": entry.name, "description": entry.summary()}
                for entry in self._registry
            ]
        }

    async def _handle_tools_call(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get("name")
        args = params.get("arguments")

        if not name:
            raise BadRequestError("Tool name is required")

        if name not in self._registry:
            raise NotFoundError(f"Tool '{name}' not found")

        if not isinstance(args, dict):
            args = {}

        log.info(f"tools/call {name}")
        result = await self._registry.dispatch(name, args)
        return json_result(result)
