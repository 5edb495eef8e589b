"""
Tests for the Shopify Tool Units.

Each tool is run directly against a stubbed GraphQL client with already
validated arguments. Covers: GraphQL variables, result shapes, not-found
handling, and userErrors from mutations.
"""

import pytest

from conftest import connection, make_order_node, make_product_node
from shopify_mcp.tools.base import edges_to_nodes, money, raise_user_errors, to_gid
from shopify_mcp.tools.customers import GetCustomers, UpdateCustomer
from shopify_mcp.tools.orders import (
    GetCustomerOrders,
    GetOrderById,
    GetOrders,
    UpdateOrder,
    format_order,
)
from shopify_mcp.tools.products import (
    CreateProduct,
    GetProductById,
    GetProducts,
    format_product,
)

pytestmark = pytest.mark.anyio


def init(tool_cls, client):
    tool = tool_cls()
    tool.initialize(client)
    return tool


def sent_variables(client):
    return client.request.await_args.args[1]


# -- Helpers ------------------------------------------------------------------


class TestHelpers:

    def test_to_gid(self):
        assert to_gid("Order", "123") == "gid://shopify/Order/123"
        assert to_gid("Order", "gid://shopify/Order/123") == "gid://shopify/Order/123"

    def test_edges_to_nodes(self):
        assert edges_to_nodes(None) == []
        assert edges_to_nodes({"edges": [{"node": {"id": 1}}, {"node": None}]}) == [{"id": 1}]

    def test_money(self):
        assert money(None) is None
        assert money({"shopMoney": {"amount": "1.00", "currencyCode": "EUR"}}) == {
            "amount": "1.00",
            "currencyCode": "EUR",
        }

    def test_raise_user_errors(self):
        raise_user_errors("update order", [])
        with pytest.raises(RuntimeError, match="Failed to update order: email: is invalid"):
            raise_user_errors("update order", [{"field": ["email"], "message": "is invalid"}])

    def test_client_required_before_use(self):
        with pytest.raises(RuntimeError, match="before initialize"):
            GetProducts().client


# -- Products -----------------------------------------------------------------


class TestProductTools:

    async def test_get_products_search(self, graphql_client):
        tool = init(GetProducts, graphql_client)
        await tool.execute({"searchTitle": "hat", "limit": 3})
        assert sent_variables(graphql_client) == {"first": 3, "query": "title:*hat*"}

    async def test_get_products_formats_nodes(self, graphql_client):
        graphql_client.request.return_value = {"products": connection(make_product_node(1))}
        tool = init(GetProducts, graphql_client)

        result = await tool.execute({"limit": 10})

        product = result["products"][0]
        assert product["imageUrl"] == "https://cdn.example/1.png"
        assert product["priceRange"]["minPrice"] == {"amount": "9.99", "currencyCode": "USD"}
        assert product["variants"][0]["sku"] == "SKU-1"

    def test_format_product_without_images(self):
        product = format_product(make_product_node(2, images={"edges": []}))
        assert product["imageUrl"] is None

    async def test_get_product_by_id(self, graphql_client):
        graphql_client.request.return_value = {"product": make_product_node(5)}
        tool = init(GetProductById, graphql_client)

        result = await tool.execute({"productId": "5"})

        assert result["product"]["id"] == "gid://shopify/Product/5"
        assert sent_variables(graphql_client) == {"id": "gid://shopify/Product/5"}

    async def test_get_product_by_id_not_found(self, graphql_client):
        graphql_client.request.return_value = {"product": None}
        tool = init(GetProductById, graphql_client)

        with pytest.raises(LookupError, match="Product with ID 5 not found"):
            await tool.execute({"productId": "5"})

    async def test_create_product(self, graphql_client):
        created = {"id": "gid://shopify/Product/9", "title": "Hat", "status": "DRAFT"}
        graphql_client.request.return_value = {"productCreate": {"product": created, "userErrors": []}}
        tool = init(CreateProduct, graphql_client)

        result = await tool.execute({"title": "Hat", "status": "DRAFT"})

        assert result == {"product": created}
        assert sent_variables(graphql_client) == {"input": {"title": "Hat", "status": "DRAFT"}}

    async def test_create_product_user_errors(self, graphql_client):
        graphql_client.request.return_value = {
            "productCreate": {
                "product": None,
                "userErrors": [{"field": ["title"], "message": "can't be blank"}],
            }
        }
        tool = init(CreateProduct, graphql_client)

        with pytest.raises(RuntimeError, match="Failed to create product: title: can't be blank"):
            await tool.execute({"title": " ", "status": "DRAFT"})


# -- Customers ----------------------------------------------------------------


class TestCustomerTools:

    async def test_get_customers(self, graphql_client):
        graphql_client.request.return_value = {
            "customers": connection({"id": "gid://shopify/Customer/1", "email": "a@b.com"})
        }
        tool = init(GetCustomers, graphql_client)

        result = await tool.execute({"searchQuery": "ada", "limit": 4})

        assert result == {"customers": [{"id": "gid://shopify/Customer/1", "email": "a@b.com"}]}
        assert sent_variables(graphql_client) == {"first": 4, "query": "ada"}

    async def test_update_customer_sends_gid(self, graphql_client):
        graphql_client.request.return_value = {
            "customerUpdate": {
                "customer": {
                    "id": "gid://shopify/Customer/7",
                    "note": "VIP",
                    "metafields": connection({"key": "tier", "value": "gold"}),
                },
                "userErrors": [],
            }
        }
        tool = init(UpdateCustomer, graphql_client)

        result = await tool.execute({"id": "7", "note": "VIP"})

        assert sent_variables(graphql_client) == {"input": {"id": "gid://shopify/Customer/7", "note": "VIP"}}
        assert result["customer"]["metafields"] == [{"key": "tier", "value": "gold"}]

    async def test_update_customer_user_errors(self, graphql_client):
        graphql_client.request.return_value = {
            "customerUpdate": {"customer": None, "userErrors": [{"field": None, "message": "Customer not found"}]}
        }
        tool = init(UpdateCustomer, graphql_client)

        with pytest.raises(RuntimeError, match="input: Customer not found"):
            await tool.execute({"id": "7"})


# -- Orders -------------------------------------------------------------------


class TestOrderTools:

    @pytest.mark.parametrize("status, query", [
        ("any", None),
        ("open", "status:open"),
        ("cancelled", "status:cancelled"),
    ])
    async def test_get_orders_status_query(self, graphql_client, status, query):
        tool = init(GetOrders, graphql_client)
        await tool.execute({"status": status, "limit": 10})
        assert sent_variables(graphql_client) == {"first": 10, "query": query}

    def test_format_order(self):
        order = format_order(make_order_node(1))
        assert order["financialStatus"] == "PAID"
        assert order["fulfillmentStatus"] == "UNFULFILLED"
        assert order["totalTax"] is None
        assert order["lineItems"][0]["originalTotal"] == {"amount": "25.00", "currencyCode": "USD"}
        assert "metafields" not in order

    async def test_get_order_by_id(self, graphql_client):
        node = make_order_node(
            3,
            customAttributes=[{"key": "gift", "value": "yes"}],
            metafields=connection({"key": "source", "value": "pos"}),
        )
        graphql_client.request.return_value = {"order": node}
        tool = init(GetOrderById, graphql_client)

        result = await tool.execute({"orderId": "gid://shopify/Order/3"})

        assert sent_variables(graphql_client) == {"id": "gid://shopify/Order/3"}
        assert result["order"]["customAttributes"] == [{"key": "gift", "value": "yes"}]
        assert result["order"]["metafields"] == [{"key": "source", "value": "pos"}]

    async def test_get_order_by_id_not_found(self, graphql_client):
        graphql_client.request.return_value = {"order": None}
        tool = init(GetOrderById, graphql_client)

        with pytest.raises(LookupError, match="Order with ID 3 not found"):
            await tool.execute({"orderId": "3"})

    async def test_update_order(self, graphql_client):
        graphql_client.request.return_value = {
            "orderUpdate": {
                "order": {"id": "gid://shopify/Order/3", "tags": ["rush"], "metafields": connection()},
                "userErrors": [],
            }
        }
        tool = init(UpdateOrder, graphql_client)

        result = await tool.execute({"id": "3", "tags": ["rush"], "shippingAddress": {"city": "Oslo"}})

        assert sent_variables(graphql_client) == {
            "input": {
                "id": "gid://shopify/Order/3",
                "tags": ["rush"],
                "shippingAddress": {"city": "Oslo"},
            }
        }
        assert result["order"]["metafields"] == []

    async def test_update_order_user_errors(self, graphql_client):
        graphql_client.request.return_value = {
            "orderUpdate": {"order": None, "userErrors": [{"field": ["email"], "message": "is invalid"}]}
        }
        tool = init(UpdateOrder, graphql_client)

        with pytest.raises(RuntimeError, match="Failed to update order"):
            await tool.execute({"id": "3", "email": "x@y"})

    async def test_get_customer_orders(self, graphql_client):
        graphql_client.request.return_value = {"orders": connection(make_order_node(1), make_order_node(2))}
        tool = init(GetCustomerOrders, graphql_client)

        result = await tool.execute({"customerId": "42", "limit": 10})

        assert [o["name"] for o in result["orders"]] == ["#1001", "#1002"]
        assert sent_variables(graphql_client) == {"first": 10, "query": "customer_id:42"}
