"""
Product Tools

  get-products        — list products, optionally filtered by title
  get-product-by-id   — single product with variants
  create-product      — create a product (DRAFT by default)
"""

from typing import Any, Dict

from ..logger import get_logger
from .base import (
    LIMIT_PROPERTY,
    TAGS_PROPERTY,
    ShopifyTool,
    edges_to_nodes,
    raise_user_errors,
    to_gid,
)

log = get_logger("tools.products")

PRODUCT_STATUSES = ["ACTIVE", "DRAFT", "ARCHIVED"]

_PRODUCT_FIELDS = """
    id
    title
    description
    handle
    status
    vendor
    productType
    tags
    createdAt
    updatedAt
    totalInventory
    priceRange {
      minVariantPrice { amount currencyCode }
      maxVariantPrice { amount currencyCode }
    }
    images(first: 1) {
      edges { node { url altText } }
    }
    variants(first: 5) {
      edges {
        node { id title price inventoryQuantity sku }
      }
    }
"""

GET_PRODUCTS_QUERY = f"""
query GetProducts($first: Int!, $query: String) {{
  products(first: $first, query: $query) {{
    edges {{
      node {{{_PRODUCT_FIELDS}}}
    }}
  }}
}}
"""

GET_PRODUCT_QUERY = f"""
query GetProductById($id: ID!) {{
  product(id: $id) {{{_PRODUCT_FIELDS}}}
}}
"""

CREATE_PRODUCT_MUTATION = """
mutation ProductCreate($input: ProductInput!) {
  productCreate(input: $input) {
    product {
      id
      title
      descriptionHtml
      vendor
      productType
      status
      tags
    }
    userErrors { field message }
  }
}
"""


def format_product(node: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a Product node into the shape returned to callers."""
    images = edges_to_nodes(node.get("images"))
    price_range = node.get("priceRange") or {}
    return {
        "id": node.get("id"),
        "title": node.get("title"),
        "description": node.get("description"),
        "handle": node.get("handle"),
        "status": node.get("status"),
        "vendor": node.get("vendor"),
        "productType": node.get("productType"),
        "tags": node.get("tags", []),
        "createdAt": node.get("createdAt"),
        "updatedAt": node.get("updatedAt"),
        "totalInventory": node.get("totalInventory"),
        "priceRange": {
            "minPrice": price_range.get("minVariantPrice"),
            "maxPrice": price_range.get("maxVariantPrice"),
        },
        "imageUrl": images[0].get("url") if images else None,
        "variants": edges_to_nodes(node.get("variants")),
    }


class GetProducts(ShopifyTool):
    name = "get-products"
    description = "Get all products or search by title"
    input_schema = {
        "type": "object",
        "properties": {
            "searchTitle": {
                "type": "string",
                "description": "Optional: filter products by title (substring match)",
            },
            "limit": LIMIT_PROPERTY,
        },
    }

    async def execute(self, args):
        search = args.get("searchTitle")
        variables = {
            "first": int(args["limit"]),
            "query": f"title:*{search}*" if search else None,
        }
        data = await self.client.request(GET_PRODUCTS_QUERY, variables)
        products = [format_product(node) for node in edges_to_nodes(data.get("products"))]
        log.debug(f"get-products returned {len(products)} products")
        return {"products": products}


class GetProductById(ShopifyTool):
    name = "get-product-by-id"
    description = "Get a specific product by ID"
    input_schema = {
        "type": "object",
        "properties": {
            "productId": {
                "type": "string",
                "minLength": 1,
                "description": "Product ID (numeric or gid://shopify/Product/...)",
            },
        },
        "required": ["productId"],
    }

    async def execute(self, args):
        product_id = args["productId"]
        data = await self.client.request(GET_PRODUCT_QUERY, {"id": to_gid("Product", product_id)})
        node = data.get("product")
        if not node:
            raise LookupError(f"Product with ID {product_id} not found")
        return {"product": format_product(node)}


class CreateProduct(ShopifyTool):
    name = "create-product"
    description = "Create a new product. New products are created as DRAFT unless a status is given."
    input_schema = {
        "type": "object",
        "properties": {
            "title": {"type": "string", "minLength": 1, "description": "Product title"},
            "descriptionHtml": {"type": "string", "description": "Product description (HTML)"},
            "vendor": {"type": "string"},
            "productType": {"type": "string"},
            "tags": TAGS_PROPERTY,
            "status": {
                "type": "string",
                "enum": PRODUCT_STATUSES,
                "default": "DRAFT",
            },
        },
        "required": ["title"],
    }

    async def execute(self, args):
        data = await self.client.request(CREATE_PRODUCT_MUTATION, {"input": dict(args)})
        payload = data.get("productCreate") or {}
        raise_user_errors("create product", payload.get("userErrors"))
        product = payload.get("product")
        log.info(f"Created product {product and product.get('id')}")
        return {"product": product}
