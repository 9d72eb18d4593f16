from .product import Product
from .cart import Cart, CartItem
from .user import Address, Subscriber, User
from .order import Order, OrderItem, OrderStatus, ShippingAddress

__all__ = [
    "Product",
    "Cart", "CartItem",
    "User", "Address", "Subscriber",
    "Order", "OrderItem", "OrderStatus", "ShippingAddress"
]
