import logging

from flask import Blueprint, abort
from marshmallow import ValidationError

from routes.schemas import AddCartItemSchema, UpdateCartItemSchema
from routes.utils import (
    get_json_body,
    get_optional_user_id,
    get_session_id,
    handle_errors,
    success_response,
)
from storefront.core.dependencies import resolve
from storefront.services.cart_service import CartService

logger = logging.getLogger(__name__)

cart_bp = Blueprint("cart", __name__)

_add_schema = AddCartItemSchema()
_update_schema = UpdateCartItemSchema()


def _cart_identity():
    return get_optional_user_id(), get_session_id()


@cart_bp.route("", methods=["GET"])
@handle_errors("Failed to get cart")
def get_cart():
    """Cart of the signed-in user, or of the anonymous session."""
    cart = resolve(CartService).get_cart(*_cart_identity())
    return success_response({"cart": cart.to_dict()})


@cart_bp.route("/items", methods=["POST"])
@handle_errors("Failed to add item to cart")
def add_item():
    user_id, session_id = _cart_identity()

    try:
        item = _add_schema.load(get_json_body())
    except ValidationError as err:
        abort(400, str(err.messages))

    cart_item_id = resolve(CartService).add_item(user_id, session_id, item)
    return success_response({"cartItemId": cart_item_id}, 201)


@cart_bp.route("/items/<int:cart_item_id>", methods=["PATCH"])
@handle_errors("Failed to update cart item")
def update_item(cart_item_id: int):
    """Set a line's quantity. Quantity 0 removes the line."""
    user_id, session_id = _cart_identity()

    try:
        body = _update_schema.load(get_json_body())
    except ValidationError as err:
        abort(400, str(err.messages))

    item = resolve(CartService).update_quantity(user_id, session_id, cart_item_id, body["quantity"])
    if item is None:
        return success_response({"message": "Item removed", "removed": True})
    return success_response({"item": item.to_dict(), "removed": False})


@cart_bp.route("/items/<int:cart_item_id>", methods=["DELETE"])
@handle_errors("Failed to remove cart item")
def remove_item(cart_item_id: int):
    user_id, session_id = _cart_identity()
    resolve(CartService).remove_item(user_id, session_id, cart_item_id)
    return success_response({"message": "Item removed"})


@cart_bp.route("", methods=["DELETE"])
@handle_errors("Failed to clear cart")
def clear_cart():
    removed = resolve(CartService).clear(*_cart_identity())
    return success_response({"removed": removed})


@cart_bp.route("/merge", methods=["POST"])
@handle_errors("Failed to merge cart")
def merge_cart():
    """Move the anonymous session's lines onto the user who just signed in."""
    user_id, session_id = _cart_identity()
    moved = resolve(CartService).merge_session_into_user(session_id, user_id)
    logger.info(f"Merged {moved} cart lines into user {user_id}")
    return success_response({"moved": moved})
