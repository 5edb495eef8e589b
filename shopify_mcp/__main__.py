#!/usr/bin/env python3
"""
Entry point: python -m shopify_mcp

Usage:
    python -m shopify_mcp --accessToken <token> --domain <store>.myshopify.com
    python -m shopify_mcp --transport stdio

Credentials come from the flags or from SHOPIFY_ACCESS_TOKEN / MYSHOPIFY_DOMAIN
(a .env file is honoured). The HTTP transport listens on $PORT (default 3000).
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from .config import Settings, load_settings
from .errors import ConfigurationError
from .graphql import ShopifyGraphQLClient
from .logger import get_logger
from .registry import build_registry

log = get_logger("main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shopify-mcp",
        description="Shopify Admin API tools over MCP (stdio) or HTTP/JSON",
    )
    parser.add_argument("--accessToken", dest="access_token", help="Shopify Admin API access token")
    parser.add_argument("--domain", help="Store domain, e.g. my-store.myshopify.com")
    parser.add_argument(
        "--transport",
        choices=["http", "stdio"],
        default="http",
        help="Serve the HTTP/JSON endpoint (default) or MCP over stdio",
    )
    parser.add_argument("--port", type=int, default=None, help="HTTP port (overrides $PORT)")
    return parser.parse_args(argv)


def serve_http(settings: Settings) -> None:
    import uvicorn

    from .http_server import create_app

    client = ShopifyGraphQLClient.from_settings(settings)
    registry = build_registry(client)
    app = create_app(registry, on_shutdown=client.aclose)

    print(f"Shopify MCP Server running on port {settings.port}", file=sys.stderr)
    print(f"  Health check: http://localhost:{settings.port}/health", file=sys.stderr)
    print(f"  MCP endpoint: http://localhost:{settings.port}/mcp", file=sys.stderr)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


async def serve_stdio(settings: Settings) -> None:
    from .mcp_server import run_stdio

    client = ShopifyGraphQLClient.from_settings(settings)
    try:
        await run_stdio(build_registry(client))
    finally:
        await client.aclose()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    try:
        settings = load_settings(args.access_token, args.domain, port=args.port)
    except ConfigurationError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        sys.exit(1)

    log.info(f"Using store {settings.domain} (API {settings.api_version})")

    if args.transport == "stdio":
        try:
            asyncio.run(serve_stdio(settings))
        except KeyboardInterrupt:
            pass
    else:
        serve_http(settings)


if __name__ == "__main__":
    main()
