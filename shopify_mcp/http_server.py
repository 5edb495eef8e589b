"""
HTTP Server — FastAPI wrapper so the tool set can run on platforms that
require an HTTP service.

Endpoints:
    GET  /health   — liveness
    POST /mcp      — {method, params} generic tool endpoint (tools/list, tools/call)

Every /mcp path is wrapped: failures leave as JSON envelopes, never as
unhandled exceptions.
"""

import json
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import Config
from .errors import ExecutionError, ShopifyMCPError
from .logger import get_logger
from .protocol import error_envelope, error_status
from .registry import ToolRegistry
from .router import MethodRouter

log = get_logger("http")


class HealthResponse(BaseModel):
    status: str
    service: str


def create_app(
    registry: ToolRegistry,
    on_shutdown: Optional[Callable[[], Awaitable[None]]] = None,
) -> FastAPI:
    """Build the FastAPI app around an already-frozen registry."""
    router = MethodRouter(registry)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info(f"HTTP front end ready — tools={len(registry)}")
        yield
        if on_shutdown is not None:
            await on_shutdown()
        log.info("HTTP front end stopped")

    app = FastAPI(
        title="Shopify MCP Server",
        description=Config.SERVER_DESCRIPTION,
        version=Config.SERVER_VERSION,
        lifespan=lifespan,
    )

    # ── Health ───────────────────────────────────────────────

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return {"status": "ok", "service": Config.SERVICE_NAME}

    # ── MCP endpoint ─────────────────────────────────────────

    @app.post("/mcp")
    async def mcp_endpoint(request: Request):
        try:
            body = await request.json()
            if not isinstance(body, dict):
                raise ValueError("Request body must be a JSON object")
            return await router.route(body)

        except ShopifyMCPError as exc:
            if isinstance(exc, ExecutionError):
                log.error(f"Tool execution failed: {exc.message}")
            else:
                log.warning(f"Rejected /mcp request: {exc.message}")
            return JSONResponse(error_envelope(exc), status_code=error_status(exc))

        except json.JSONDecodeError as exc:
            log.warning(f"Malformed /mcp body: {exc}")
            return JSONResponse({"error": str(exc)}, status_code=500)

        except Exception as exc:
            log.error(f"Unhandled /mcp error: {exc}", exc_info=True)
            return JSONResponse({"error": str(exc)}, status_code=500)

    return app
