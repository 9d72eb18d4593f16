from typing import Optional, List
from storefront.repositories.base import BaseRepository
from storefront.models.cart import CartItem
import logging

logger = logging.getLogger(__name__)


class CartRepository(BaseRepository[CartItem]):
    """
    Repository for cart lines.

    A cart is not a row of its own: it is the set of lines sharing a user_id
    (signed in) or a session_id (anonymous).
    """

    @property
    def table_name(self) -> str:
        return "cart_items"

    def get_by_id(self, cart_item_id: int) -> Optional[CartItem]:
        row = self.execute_single_query(
            "SELECT * FROM cart_items WHERE id = :id",
            {"id": cart_item_id},
        )
        return CartItem.from_row(row) if row else None

    def get_cart_by_user(self, user_id: int) -> List[CartItem]:
        rows = self.execute_query(
            "SELECT * FROM cart_items WHERE user_id = :user_id ORDER BY created_at, id",
            {"user_id": user_id},
        )
        return [CartItem.from_row(row) for row in rows]

    def get_cart_by_session(self, session_id: str) -> List[CartItem]:
        rows = self.execute_query(
            "SELECT * FROM cart_items WHERE session_id = :session_id ORDER BY created_at, id",
            {"session_id": session_id},
        )
        return [CartItem.from_row(row) for row in rows]

    def add_cart_item(
        self,
        user_id: Optional[int],
        session_id: Optional[str],
        product_id: int,
        product_name: str,
        size: str,
        quantity: int,
        unit_price: float,
        image_url: Optional[str] = None,
    ) -> int:
        """
        Always inserts a new line; an existing line for the same product and
        size is not merged.
        """
        return self.execute_insert_returning_id(
            """
            INSERT INTO cart_items (user_id, session_id, product_id, product_name, size, quantity, unit_price, image_url)
            VALUES (:user_id, :session_id, :product_id, :product_name, :size, :quantity, :unit_price, :image_url)
            """,
            {
                "user_id": user_id,
                "session_id": session_id,
                "product_id": product_id,
                "product_name": product_name,
                "size": size,
                "quantity": quantity,
                "unit_price": unit_price,
                "image_url": image_url,
            },
        )

    def update_cart_item_quantity(self, cart_item_id: int, quantity: int) -> bool:
        return self.execute_command(
            "UPDATE cart_items SET quantity = :quantity WHERE id = :id",
            {"quantity": quantity, "id": cart_item_id},
        ) > 0

    def delete_cart_item(self, cart_item_id: int) -> bool:
        return self.execute_command(
            "DELETE FROM cart_items WHERE id = :id",
            {"id": cart_item_id},
        ) > 0

    def clear_cart_by_user(self, user_id: int) -> int:
        return self.execute_command(
            "DELETE FROM cart_items WHERE user_id = :user_id",
            {"user_id": user_id},
        )

    def clear_cart_by_session(self, session_id: str) -> int:
        return self.execute_command(
            "DELETE FROM cart_items WHERE session_id = :session_id",
            {"session_id": session_id},
        )

    def transfer_cart_to_user(self, session_id: str, user_id: int) -> int:
        """
        Re-own every line of the session cart. Lines that duplicate a
        product/size already in the user's cart stay separate.
        """
        moved = self.execute_command(
            "UPDATE cart_items SET user_id = :user_id, session_id = NULL WHERE session_id = :session_id",
            {"user_id": user_id, "session_id": session_id},
        )
        logger.info(f"Moved {moved} cart lines from session to user {user_id}")
        return moved
