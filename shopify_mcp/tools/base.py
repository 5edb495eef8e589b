"""
ShopifyTool ABC — Template for Tool Units.

Each tool must:
1. Declare a stable ``name`` and an ``input_schema`` (JSON Schema object)
2. Accept the shared GraphQL client via initialize(client)
3. Implement async execute(args) on already validated, default-filled args
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..graphql import ShopifyGraphQLClient


class ShopifyTool(ABC):
    """Abstract base for Shopify Tool Units."""

    name: str = ""
    description: str = ""
    input_schema: Dict[str, Any] = {"type": "object", "properties": {}}

    def __init__(self):
        self._client: Optional[ShopifyGraphQLClient] = None

    def initialize(self, client: ShopifyGraphQLClient) -> None:
        """Inject the shared GraphQL client."""
        self._client = client

    @property
    def client(self) -> ShopifyGraphQLClient:
        if self._client is None:
            raise RuntimeError(f"Tool '{self.name}' used before initialize()")
        return self._client

    @abstractmethod
    async def execute(self, args: Dict[str, Any]) -> Any:
        """Run the tool against Shopify and return a JSON-serializable result."""
        ...


# ── Shared helpers ───────────────────────────────────────────────────────────

def edges_to_nodes(connection: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten a GraphQL ``{edges: [{node}]}`` connection into a list of nodes."""
    if not connection:
        return []
    return [edge["node"] for edge in connection.get("edges", []) if edge.get("node") is not None]


def to_gid(resource: str, value: str) -> str:
    """Accept a bare numeric ID or a full gid:// and return the gid."""
    value = str(value)
    if value.startswith("gid://"):
        return value
    return f"gid://shopify/{resource}/{value}"


def raise_user_errors(operation: str, user_errors: Optional[List[Dict[str, Any]]]) -> None:
    """Mutations report business failures in ``userErrors`` instead of ``errors``."""
    if not user_errors:
        return
    details = ", ".join(
        f"{'.'.join(e.get('field') or []) or 'input'}: {e.get('message')}"
        for e in user_errors
    )
    raise RuntimeError(f"Failed to {operation}: {details}")


def money(price_set: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Unwrap a MoneyBag ``shopMoney`` into ``{amount, currencyCode}``."""
    if not price_set:
        return None
    shop = price_set.get("shopMoney") or {}
    return {"amount": shop.get("amount"), "currencyCode": shop.get("currencyCode")}


# ── Shared schema fragments ──────────────────────────────────────────────────

LIMIT_PROPERTY = {
    "type": "number",
    "description": "Maximum number of results to return (default: 10)",
    "default": 10,
}

METAFIELDS_PROPERTY = {
    "type": "array",
    "description": "Metafields to create or update",
    "items": {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
            "namespace": {"type": "string"},
            "key": {"type": "string"},
            "value": {"type": "string"},
            "type": {"type": "string"},
        },
        "required": ["value"],
    },
}

TAGS_PROPERTY = {
    "type": "array",
    "description": "Tags to set (replaces existing tags)",
    "items": {"type": "string"},
}
