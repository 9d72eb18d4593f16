from typing import Any, Dict, Optional
from storefront.repositories.cart_repository import CartRepository
from storefront.models.cart import Cart, CartItem
from storefront.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
import logging

logger = logging.getLogger(__name__)


class CartService:
    """
    Shopping cart business logic service

    A cart is addressed by the signed-in user when there is one, otherwise by
    the anonymous session id.
    """

    def __init__(self, cart_repository: CartRepository):
        self.cart_repo = cart_repository
        self.max_quantity_per_item = 99  # Business rule

    @staticmethod
    def _require_owner(user_id: Optional[int], session_id: Optional[str]) -> None:
        if user_id is None and not session_id:
            raise UnauthorizedError("Missing cart identity")

    def get_cart(self, user_id: Optional[int], session_id: Optional[str]) -> Cart:
        self._require_owner(user_id, session_id)
        if user_id is not None:
            return Cart(user_id=user_id, items=self.cart_repo.get_cart_by_user(user_id))
        return Cart(session_id=session_id, items=self.cart_repo.get_cart_by_session(session_id))

    def add_item(self, user_id: Optional[int], session_id: Optional[str], item: Dict[str, Any]) -> int:
        """
        Add a line to the cart. A signed-in user's line carries no session
        id. Adding the same product and size twice yields two lines.
        """
        self._require_owner(user_id, session_id)
        self._check_quantity(item["quantity"], minimum=1)

        cart_item_id = self.cart_repo.add_cart_item(
            user_id=user_id,
            session_id=None if user_id is not None else session_id,
            product_id=item["product_id"],
            product_name=item["product_name"],
            size=item["size"],
            quantity=item["quantity"],
            unit_price=item["unit_price"],
            image_url=item.get("image_url"),
        )
        logger.info(f"Added cart item {cart_item_id} (product {item['product_id']}, qty {item['quantity']})")
        return cart_item_id

    def update_quantity(
        self,
        user_id: Optional[int],
        session_id: Optional[str],
        cart_item_id: int,
        quantity: int,
    ) -> Optional[CartItem]:
        """Set a line's quantity; 0 removes the line and returns None."""
        self._check_quantity(quantity, minimum=0)
        item = self._owned_item(user_id, session_id, cart_item_id)

        if quantity == 0:
            self.cart_repo.delete_cart_item(item.id)
            return None

        self.cart_repo.update_cart_item_quantity(item.id, quantity)
        item.quantity = quantity
        return item

    def remove_item(self, user_id: Optional[int], session_id: Optional[str], cart_item_id: int) -> None:
        item = self._owned_item(user_id, session_id, cart_item_id)
        self.cart_repo.delete_cart_item(item.id)

    def clear(self, user_id: Optional[int], session_id: Optional[str]) -> int:
        self._require_owner(user_id, session_id)
        if user_id is not None:
            return self.cart_repo.clear_cart_by_user(user_id)
        return self.cart_repo.clear_cart_by_session(session_id)

    def merge_session_into_user(self, session_id: Optional[str], user_id: Optional[int]) -> int:
        """
        Move an anonymous cart to a user who just signed in. Duplicate
        product/size lines are kept as separate lines.
        """
        if user_id is None:
            raise UnauthorizedError("Authentication required")
        if not session_id:
            raise ValidationError("Missing session id")
        return self.cart_repo.transfer_cart_to_user(session_id, user_id)

    def _owned_item(self, user_id: Optional[int], session_id: Optional[str], cart_item_id: int) -> CartItem:
        self._require_owner(user_id, session_id)
        item = self.cart_repo.get_by_id(cart_item_id)
        if item is None or not item.owned_by(user_id, session_id):
            raise NotFoundError("Cart item")
        return item

    def _check_quantity(self, quantity: int, minimum: int) -> None:
        if quantity < minimum or quantity > self.max_quantity_per_item:
            raise ValidationError(f"Quantity must be between {minimum} and {self.max_quantity_per_item}")
