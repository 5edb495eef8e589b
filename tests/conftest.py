"""Shared fixtures for the Shopify MCP tests."""

import os
import tempfile

# Keep test runs out of ~/.shopify-mcp/logs; must be set before shopify_mcp is imported
os.environ.setdefault("SHOPIFY_MCP_LOG_DIR", tempfile.mkdtemp(prefix="shopify-mcp-logs-"))

from unittest.mock import AsyncMock, MagicMock

import pytest

from shopify_mcp.registry import build_registry


# -- Helpers ------------------------------------------------------------------


def make_product_node(n=1, **overrides):
    node = {
        "id": f"gid://shopify/Product/{n}",
        "title": f"Product {n}",
        "description": "A product",
        "handle": f"product-{n}",
        "status": "ACTIVE",
        "vendor": "Acme",
        "productType": "Widget",
        "tags": ["sale"],
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
        "totalInventory": 7,
        "priceRange": {
            "minVariantPrice": {"amount": "9.99", "currencyCode": "USD"},
            "maxVariantPrice": {"amount": "19.99", "currencyCode": "USD"},
        },
        "images": {"edges": [{"node": {"url": f"https://cdn.example/{n}.png", "altText": None}}]},
        "variants": {
            "edges": [
                {"node": {"id": f"gid://shopify/ProductVariant/{n}", "title": "Default",
                          "price": "9.99", "inventoryQuantity": 7, "sku": f"SKU-{n}"}}
            ]
        },
    }
    node.update(overrides)
    return node


def make_order_node(n=1, **overrides):
    node = {
        "id": f"gid://shopify/Order/{n}",
        "name": f"#100{n}",
        "createdAt": "2024-01-01T00:00:00Z",
        "displayFinancialStatus": "PAID",
        "displayFulfillmentStatus": "UNFULFILLED",
        "email": "buyer@example.com",
        "tags": [],
        "note": None,
        "totalPriceSet": {"shopMoney": {"amount": "29.98", "currencyCode": "USD"}},
        "subtotalPriceSet": {"shopMoney": {"amount": "25.00", "currencyCode": "USD"}},
        "totalShippingPriceSet": {"shopMoney": {"amount": "4.98", "currencyCode": "USD"}},
        "totalTaxSet": None,
        "customer": {"id": "gid://shopify/Customer/42", "firstName": "Ada",
                     "lastName": "Lovelace", "email": "ada@example.com"},
        "shippingAddress": None,
        "lineItems": {
            "edges": [
                {"node": {"id": "gid://shopify/LineItem/1", "title": "Widget", "quantity": 2,
                          "originalTotalSet": {"shopMoney": {"amount": "25.00", "currencyCode": "USD"}},
                          "variant": None}}
            ]
        },
    }
    node.update(overrides)
    return node


def connection(*nodes):
    return {"edges": [{"node": node} for node in nodes]}


# -- Fixtures -----------------------------------------------------------------


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def graphql_client():
    """Stand-in for ShopifyGraphQLClient; ``request`` returns empty data by default."""
    client = MagicMock()
    client.request = AsyncMock(return_value={})
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def registry(graphql_client):
    return build_registry(graphql_client)
