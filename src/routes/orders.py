import logging

from flask import Blueprint

from routes.utils import get_current_user_id, get_optional_user_id, handle_errors, success_response
from storefront.core.dependencies import resolve
from storefront.services.order_service import OrderService

logger = logging.getLogger(__name__)

orders_bp = Blueprint("orders", __name__)


@orders_bp.route("", methods=["GET"])
@handle_errors("Failed to get orders")
def list_orders():
    """Order history of the signed-in user, newest first."""
    user_id = get_current_user_id()
    orders = resolve(OrderService).list_orders(user_id)
    return success_response({"orders": [o.to_dict() for o in orders]})


@orders_bp.route("/<order_number>", methods=["GET"])
@handle_errors("Failed to get order")
def get_order(order_number: str):
    """
    Guest orders can be looked up by anyone holding the number (order
    confirmation page). Orders tied to an account are owner-only.
    """
    order = resolve(OrderService).get_order(order_number, get_optional_user_id())
    return success_response({"order": order.to_dict()})
