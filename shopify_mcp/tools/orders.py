"""
Order Tools

  get-orders            — list orders, optionally filtered by status
  get-order-by-id       — single order with line items and metafields
  update-order          — update tags, email, note, attributes, metafields, shipping address
  get-customer-orders   — orders placed by one customer
"""

from typing import Any, Dict

from .base import (
    LIMIT_PROPERTY,
    METAFIELDS_PROPERTY,
    TAGS_PROPERTY,
    ShopifyTool,
    edges_to_nodes,
    money,
    raise_user_errors,
    to_gid,
)
from .customers import NUMERIC_ID_FORMAT, NUMERIC_ID_PATTERN

ORDER_STATUSES = ["any", "open", "closed", "cancelled"]

_ADDRESS_FIELDS = """
    address1
    address2
    city
    company
    country
    firstName
    lastName
    phone
    province
    zip
"""

_ORDER_FIELDS = f"""
    id
    name
    createdAt
    displayFinancialStatus
    displayFulfillmentStatus
    email
    tags
    note
    totalPriceSet {{ shopMoney {{ amount currencyCode }} }}
    subtotalPriceSet {{ shopMoney {{ amount currencyCode }} }}
    totalShippingPriceSet {{ shopMoney {{ amount currencyCode }} }}
    totalTaxSet {{ shopMoney {{ amount currencyCode }} }}
    customer {{ id firstName lastName email }}
    shippingAddress {{{_ADDRESS_FIELDS}}}
    lineItems(first: 10) {{
      edges {{
        node {{
          id
          title
          quantity
          originalTotalSet {{ shopMoney {{ amount currencyCode }} }}
          variant {{ id title sku }}
        }}
      }}
    }}
"""

GET_ORDERS_QUERY = f"""
query GetOrders($first: Int!, $query: String) {{
  orders(first: $first, query: $query) {{
    edges {{
      node {{{_ORDER_FIELDS}}}
    }}
  }}
}}
"""

GET_ORDER_QUERY = f"""
query GetOrderById($id: ID!) {{
  order(id: $id) {{{_ORDER_FIELDS}
    customAttributes {{ key value }}
    metafields(first: 20) {{
      edges {{
        node {{ id namespace key value type }}
      }}
    }}
  }}
}}
"""

UPDATE_ORDER_MUTATION = f"""
mutation OrderUpdate($input: OrderInput!) {{
  orderUpdate(input: $input) {{
    order {{
      id
      name
      email
      note
      tags
      customAttributes {{ key value }}
      metafields(first: 10) {{
        edges {{
          node {{ id namespace key value type }}
        }}
      }}
      shippingAddress {{{_ADDRESS_FIELDS}}}
    }}
    userErrors {{ field message }}
  }}
}}
"""

SHIPPING_ADDRESS_PROPERTY = {
    "type": "object",
    "description": "Shipping address fields to change",
    "properties": {
        field: {"type": "string"}
        for field in (
            "address1",
            "address2",
            "city",
            "company",
            "country",
            "firstName",
            "lastName",
            "phone",
            "province",
            "zip",
        )
    },
}


def format_order(node: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten an Order node into the shape returned to callers."""
    order = {
        "id": node.get("id"),
        "name": node.get("name"),
        "createdAt": node.get("createdAt"),
        "financialStatus": node.get("displayFinancialStatus"),
        "fulfillmentStatus": node.get("displayFulfillmentStatus"),
        "email": node.get("email"),
        "tags": node.get("tags", []),
        "note": node.get("note"),
        "totalPrice": money(node.get("totalPriceSet")),
        "subtotalPrice": money(node.get("subtotalPriceSet")),
        "totalShippingPrice": money(node.get("totalShippingPriceSet")),
        "totalTax": money(node.get("totalTaxSet")),
        "customer": node.get("customer"),
        "shippingAddress": node.get("shippingAddress"),
        "lineItems": [
            {
                "id": item.get("id"),
                "title": item.get("title"),
                "quantity": item.get("quantity"),
                "originalTotal": money(item.get("originalTotalSet")),
                "variant": item.get("variant"),
            }
            for item in edges_to_nodes(node.get("lineItems"))
        ],
    }
    if "customAttributes" in node:
        order["customAttributes"] = node["customAttributes"]
    if "metafields" in node:
        order["metafields"] = edges_to_nodes(node["metafields"])
    return order


class GetOrders(ShopifyTool):
    name = "get-orders"
    description = "Get orders with optional filtering by status"
    input_schema = {
        "type": "object",
        "properties": {
            "status": {
                "type": "string",
                "enum": ORDER_STATUSES,
                "default": "any",
                "description": "Order status filter",
            },
            "limit": LIMIT_PROPERTY,
        },
    }

    async def execute(self, args):
        status = args["status"]
        variables = {
            "first": int(args["limit"]),
            "query": None if status == "any" else f"status:{status}",
        }
        data = await self.client.request(GET_ORDERS_QUERY, variables)
        return {"orders": [format_order(n) for n in edges_to_nodes(data.get("orders"))]}


class GetOrderById(ShopifyTool):
    name = "get-order-by-id"
    description = "Get a specific order by ID"
    input_schema = {
        "type": "object",
        "properties": {
            "orderId": {
                "type": "string",
                "minLength": 1,
                "description": "Order ID (numeric or gid://shopify/Order/...)",
            },
        },
        "required": ["orderId"],
    }

    async def execute(self, args):
        order_id = args["orderId"]
        data = await self.client.request(GET_ORDER_QUERY, {"id": to_gid("Order", order_id)})
        node = data.get("order")
        if not node:
            raise LookupError(f"Order with ID {order_id} not found")
        return {"order": format_order(node)}


class UpdateOrder(ShopifyTool):
    name = "update-order"
    description = "Update an existing order with new information"
    input_schema = {
        "type": "object",
        "properties": {
            "id": {"type": "string", "minLength": 1, "description": "Order ID"},
            "tags": TAGS_PROPERTY,
            "email": {"type": "string", "format": "email"},
            "note": {"type": "string"},
            "customAttributes": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "key": {"type": "string"},
                        "value": {"type": "string"},
                    },
                    "required": ["key", "value"],
                },
            },
            "metafields": METAFIELDS_PROPERTY,
            "shippingAddress": SHIPPING_ADDRESS_PROPERTY,
        },
        "required": ["id"],
    }

    async def execute(self, args):
        order_input = dict(args)
        order_input["id"] = to_gid("Order", args["id"])

        data = await self.client.request(UPDATE_ORDER_MUTATION, {"input": order_input})
        payload = data.get("orderUpdate") or {}
        raise_user_errors("update order", payload.get("userErrors"))

        order = payload.get("order")
        if order and "metafields" in order:
            order = {**order, "metafields": edges_to_nodes(order["metafields"])}
        return {"order": order}


class GetCustomerOrders(ShopifyTool):
    name = "get-customer-orders"
    description = "Get orders for a specific customer"
    input_schema = {
        "type": "object",
        "properties": {
            "customerId": {
                "type": "string",
                "pattern": NUMERIC_ID_PATTERN,
                "format": NUMERIC_ID_FORMAT,
                "description": "Shopify customer ID (numeric)",
            },
            "limit": LIMIT_PROPERTY,
        },
        "required": ["customerId"],
    }

    async def execute(self, args):
        variables = {
            "first": int(args["limit"]),
            "query": f"customer_id:{args['customerId']}",
        }
        data = await self.client.request(GET_ORDERS_QUERY, variables)
        return {"orders": [format_order(n) for n in edges_to_nodes(data.get("orders"))]}
