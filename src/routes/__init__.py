from routes.addresses import addresses_bp
from routes.cart import cart_bp
from routes.marketing import marketing_bp
from routes.orders import orders_bp
from routes.products import products_bp
from routes.tax import tax_bp

__all__ = ["products_bp", "tax_bp", "orders_bp", "addresses_bp", "cart_bp", "marketing_bp"]
