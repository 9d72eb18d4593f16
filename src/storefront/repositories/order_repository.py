from typing import Any, Dict, List, Optional
from storefront.repositories.base import BaseRepository
from storefront.models.order import Order, OrderItem
import logging

logger = logging.getLogger(__name__)


class OrderRepository(BaseRepository[Order]):
    """Repository for orders and their line items"""

    @property
    def table_name(self) -> str:
        return "orders"

    def get_by_id(self, order_id: int) -> Optional[Order]:
        row = self.execute_single_query("SELECT * FROM orders WHERE id = :id", {"id": order_id})
        return Order.from_row(row) if row else None

    def create_order(
        self,
        order_number: str,
        subtotal: float,
        total_amount: float,
        user_id: Optional[int] = None,
        status: str = "pending",
        tax_amount: float = 0,
        shipping_amount: float = 0,
        shipping: Optional[Dict[str, Any]] = None,
        stripe_payment_intent_id: Optional[str] = None,
        printify_order_id: Optional[str] = None,
    ) -> int:
        """
        Insert an order row. `shipping` holds the snapshot keyed by the
        column suffix: first_name, last_name, address1, address2, city,
        state, postal_code, country, email.
        """
        shipping = shipping or {}
        command = """
        INSERT INTO orders (
            user_id, order_number, status, subtotal, tax_amount, shipping_amount, total_amount,
            shipping_first_name, shipping_last_name, shipping_address1, shipping_address2,
            shipping_city, shipping_state, shipping_postal_code, shipping_country, shipping_email,
            stripe_payment_intent_id, printify_order_id
        ) VALUES (
            :user_id, :order_number, :status, :subtotal, :tax_amount, :shipping_amount, :total_amount,
            :shipping_first_name, :shipping_last_name, :shipping_address1, :shipping_address2,
            :shipping_city, :shipping_state, :shipping_postal_code, :shipping_country, :shipping_email,
            :stripe_payment_intent_id, :printify_order_id
        )
        """
        params = {
            "user_id": user_id,
            "order_number": order_number,
            "status": status,
            "subtotal": subtotal,
            "tax_amount": tax_amount,
            "shipping_amount": shipping_amount,
            "total_amount": total_amount,
            "stripe_payment_intent_id": stripe_payment_intent_id,
            "printify_order_id": printify_order_id,
        }
        for key in ("first_name", "last_name", "address1", "address2", "city",
                    "state", "postal_code", "country", "email"):
            params[f"shipping_{key}"] = shipping.get(key)

        order_id = self.execute_insert_returning_id(command, params)
        logger.info(f"Created order {order_number} (id={order_id}, user={user_id})")
        return order_id

    def create_order_item(
        self,
        order_id: int,
        product_id: int,
        product_name: str,
        size: Optional[str],
        quantity: int,
        unit_price: float,
        total_price: Optional[float] = None,
        image_url: Optional[str] = None,
    ) -> int:
        if total_price is None:
            total_price = round(unit_price * quantity, 2)
        return self.execute_insert_returning_id(
            """
            INSERT INTO order_items (order_id, product_id, product_name, size, quantity, unit_price, total_price, image_url)
            VALUES (:order_id, :product_id, :product_name, :size, :quantity, :unit_price, :total_price, :image_url)
            """,
            {
                "order_id": order_id,
                "product_id": product_id,
                "product_name": product_name,
                "size": size,
                "quantity": quantity,
                "unit_price": unit_price,
                "total_price": total_price,
                "image_url": image_url,
            },
        )

    def get_orders_by_user(self, user_id: int) -> List[Order]:
        rows = self.execute_query(
            "SELECT * FROM orders WHERE user_id = :user_id ORDER BY created_at DESC, id DESC",
            {"user_id": user_id},
        )
        return [Order.from_row(row) for row in rows]

    def get_order_by_number(self, order_number: str) -> Optional[Order]:
        row = self.execute_single_query(
            "SELECT * FROM orders WHERE order_number = :order_number",
            {"order_number": order_number},
        )
        return Order.from_row(row) if row else None

    def get_order_items(self, order_id: int) -> List[OrderItem]:
        rows = self.execute_query(
            "SELECT * FROM order_items WHERE order_id = :order_id ORDER BY id",
            {"order_id": order_id},
        )
        return [OrderItem.from_row(row) for row in rows]

    def update_order_status(self, order_id: int, status: str) -> bool:
        return self.execute_command(
            "UPDATE orders SET status = :status WHERE id = :id",
            {"status": status, "id": order_id},
        ) > 0

    def update_order_fulfillment_id(self, order_id: int, printify_order_id: str) -> bool:
        return self.execute_command(
            "UPDATE orders SET printify_order_id = :printify_order_id WHERE id = :id",
            {"printify_order_id": printify_order_id, "id": order_id},
        ) > 0
