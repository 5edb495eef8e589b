"""
Shopify Tool Units

Modules:
  products    — get-products, get-product-by-id, create-product
  customers   — get-customers, update-customer
  orders      — get-orders, get-order-by-id, update-order, get-customer-orders
"""

from typing import List

from .base import ShopifyTool
from .customers import GetCustomers, UpdateCustomer
from .orders import GetCustomerOrders, GetOrderById, GetOrders, UpdateOrder
from .products import CreateProduct, GetProductById, GetProducts

# Registration order is the order tools are listed in
TOOL_CLASSES = [
    GetProducts,
    GetProductById,
    GetCustomers,
    GetOrders,
    GetOrderById,
    UpdateOrder,
    GetCustomerOrders,
    UpdateCustomer,
    CreateProduct,
]


def default_tools() -> List[ShopifyTool]:
    """Fresh, uninitialized instances of every Tool Unit."""
    return [cls() for cls in TOOL_CLASSES]
