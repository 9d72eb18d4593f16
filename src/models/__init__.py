# Re-export all table models from a single entry point. Importing this package
# registers every table with Base.metadata before create_all() runs.

from models.cart import CartItem
from models.order import Address, Order, OrderItem
from models.product import Product, TaxRate
from models.user import MarketingSubscriber, User

__all__ = [
    "User",
    "MarketingSubscriber",
    "Address",
    "Order",
    "OrderItem",
    "Product",
    "TaxRate",
    "CartItem",
]
