"""
Shopify MCP Server — Shopify Admin GraphQL tools over MCP and HTTP/JSON.

One frozen tool registry, two front ends.
"""

__version__ = "1.0.0"

from .config import Config, Settings, load_settings
from .errors import (
    BadRequestError,
    ConfigurationError,
    ExecutionError,
    NotFoundError,
    ShopifyMCPError,
    ValidationError,
)
from .graphql import GraphQLError, ShopifyGraphQLClient
from .registry import ToolEntry, ToolRegistry, build_registry
from .router import MethodRouter
from .schema import validate_arguments
