"""Configuration for the Shopify MCP server"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError


class Config:
    # Server identity
    SERVER_NAME = "shopify"
    SERVICE_NAME = "shopify-mcp"
    SERVER_VERSION = "1.0.0"
    SERVER_DESCRIPTION = (
        "MCP Server for Shopify API, enabling interaction with store data "
        "through GraphQL API"
    )

    # Shopify Admin API
    API_VERSION = "2023-07"
    REQUEST_TIMEOUT = 30.0

    # HTTP transport
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 3000

    # Logging (NEVER to stdout; the stdio transport owns it)
    LOG_DIR = Path(os.environ.get("SHOPIFY_MCP_LOG_DIR", Path.home() / ".shopify-mcp" / "logs"))
    LOG_FILE = LOG_DIR / "shopify-mcp.log"
    ERROR_LOG = LOG_DIR / "shopify-mcp-errors.log"

    @classmethod
    def ensure_dirs(cls):
        """Create required directories"""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


# Environment variable names
ACCESS_TOKEN_ENV = "SHOPIFY_ACCESS_TOKEN"
DOMAIN_ENV = "MYSHOPIFY_DOMAIN"
PORT_ENV = "PORT"
HOST_ENV = "HOST"
API_VERSION_ENV = "SHOPIFY_API_VERSION"
TIMEOUT_ENV = "SHOPIFY_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    """Resolved process settings. Built once at startup."""

    access_token: str
    domain: str
    host: str = Config.DEFAULT_HOST
    port: int = Config.DEFAULT_PORT
    api_version: str = Config.API_VERSION
    timeout: float = Config.REQUEST_TIMEOUT

    @property
    def graphql_url(self) -> str:
        return f"https://{self.domain}/admin/api/{self.api_version}/graphql.json"


def _require(value: Optional[str], env_name: str, environ: Mapping[str, str]) -> str:
    resolved = value or environ.get(env_name)
    if not resolved:
        raise ConfigurationError(f"{env_name} is required.")
    return resolved


def _number(environ: Mapping[str, str], name: str, default, cast):
    raw = environ.get(name)
    if raw in (None, ""):
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}.", cause=exc) from exc


def load_settings(
    access_token: Optional[str] = None,
    domain: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    port: Optional[int] = None,
) -> Settings:
    """
    Resolve settings from CLI values first, then the environment.

    A ``.env`` file in the working directory (or a parent) is loaded into
    ``os.environ`` when no explicit ``environ`` mapping is given.

    Raises
    ------
    ConfigurationError
        If the access token or the store domain cannot be resolved.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        access_token=_require(access_token, ACCESS_TOKEN_ENV, environ),
        domain=_require(domain, DOMAIN_ENV, environ),
        host=environ.get(HOST_ENV) or Config.DEFAULT_HOST,
        port=port if port is not None else _number(environ, PORT_ENV, Config.DEFAULT_PORT, int),
        api_version=environ.get(API_VERSION_ENV) or Config.API_VERSION,
        timeout=_number(environ, TIMEOUT_ENV, Config.REQUEST_TIMEOUT, float),
    )
