"""
Customer Tools

  get-customers     — list customers, optionally filtered by a search query
  update-customer   — update a customer's profile, tags, note and metafields
"""

from typing import Any, Dict

from ..schema import NUMERIC_ID_FORMAT
from .base import (
    LIMIT_PROPERTY,
    METAFIELDS_PROPERTY,
    TAGS_PROPERTY,
    ShopifyTool,
    edges_to_nodes,
    raise_user_errors,
    to_gid,
)

# Anchored ASCII digits; the numeric-id format also rejects a trailing newline
NUMERIC_ID_PATTERN = r"^[0-9]+$"

GET_CUSTOMERS_QUERY = """
query GetCustomers($first: Int!, $query: String) {
  customers(first: $first, query: $query) {
    edges {
      node {
        id
        firstName
        lastName
        email
        phone
        createdAt
        updatedAt
        tags
        note
        taxExempt
        numberOfOrders
        amountSpent { amount currencyCode }
        defaultAddress {
          address1
          address2
          city
          province
          country
          zip
          phone
        }
      }
    }
  }
}
"""

UPDATE_CUSTOMER_MUTATION = """
mutation CustomerUpdate($input: CustomerInput!) {
  customerUpdate(input: $input) {
    customer {
      id
      firstName
      lastName
      email
      phone
      tags
      note
      taxExempt
      metafields(first: 10) {
        edges {
          node { id namespace key value type }
        }
      }
    }
    userErrors { field message }
  }
}
"""


def format_customer(node: Dict[str, Any]) -> Dict[str, Any]:
    customer = {k: v for k, v in node.items() if k != "metafields"}
    if "metafields" in node:
        customer["metafields"] = edges_to_nodes(node["metafields"])
    return customer


class GetCustomers(ShopifyTool):
    name = "get-customers"
    description = "Get customers or search by name/email"
    input_schema = {
        "type": "object",
        "properties": {
            "searchQuery": {
                "type": "string",
                "description": "Optional: Shopify customer search query (name, email, ...)",
            },
            "limit": LIMIT_PROPERTY,
        },
    }

    async def execute(self, args):
        variables = {"first": int(args["limit"]), "query": args.get("searchQuery") or None}
        data = await self.client.request(GET_CUSTOMERS_QUERY, variables)
        return {"customers": [format_customer(n) for n in edges_to_nodes(data.get("customers"))]}


class UpdateCustomer(ShopifyTool):
    name = "update-customer"
    description = "Update a customer's information"
    input_schema = {
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "pattern": NUMERIC_ID_PATTERN,
                "format": NUMERIC_ID_FORMAT,
                "description": "Shopify customer ID (numeric, without the gid:// prefix)",
            },
            "firstName": {"type": "string"},
            "lastName": {"type": "string"},
            "email": {"type": "string", "format": "email"},
            "phone": {"type": "string"},
            "tags": TAGS_PROPERTY,
            "note": {"type": "string"},
            "taxExempt": {"type": "boolean"},
            "metafields": METAFIELDS_PROPERTY,
        },
        "required": ["id"],
    }

    async def execute(self, args):
        customer_input = dict(args)
        customer_input["id"] = to_gid("Customer", args["id"])

        data = await self.client.request(UPDATE_CUSTOMER_MUTATION, {"input": customer_input})
        payload = data.get("customerUpdate") or {}
        raise_user_errors("update customer", payload.get("userErrors"))

        customer = payload.get("customer")
        return {"customer": format_customer(customer) if customer else None}
