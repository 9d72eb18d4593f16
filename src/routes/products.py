import logging

from flask import Blueprint

from routes.utils import handle_errors, success_response
from storefront.core.dependencies import resolve
from storefront.services.product_service import ProductService

logger = logging.getLogger(__name__)

products_bp = Blueprint("products", __name__)


@products_bp.route("", methods=["GET"])
@handle_errors("Failed to load products")
def list_products():
    """Live catalog from the provider, or the local cache when it is down."""
    products, source = resolve(ProductService).list_products()
    return success_response({"products": products, "source": source})


@products_bp.route("/<int:product_id>", methods=["GET"])
@handle_errors("Failed to load product")
def get_product(product_id: int):
    product = resolve(ProductService).get_product(product_id)
    return success_response({"product": product.to_dict()})
