from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from storefront.utils.date_utils import DateUtils


class OrderStatus(Enum):
    """Order status values written by the checkout and fulfillment flows"""
    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


@dataclass
class OrderItem:
    """A purchased line, snapshotted at order time"""
    id: int
    order_id: int
    product_id: int
    product_name: str
    size: Optional[str]
    quantity: int
    unit_price: float
    total_price: float
    image_url: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "OrderItem":
        return cls(
            id=row["id"],
            order_id=row["order_id"],
            product_id=row["product_id"],
            product_name=row["product_name"],
            size=row.get("size"),
            quantity=row["quantity"],
            unit_price=row["unit_price"],
            total_price=row["total_price"],
            image_url=row.get("image_url"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "order_id": self.order_id,
            "product_id": self.product_id,
            "product_name": self.product_name,
            "size": self.size,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "total_price": self.total_price,
            "image_url": self.image_url,
        }


@dataclass
class ShippingAddress:
    """Shipping snapshot stored on the order row"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten back to the shipping_* column names"""
        return {f"shipping_{name}": value for name, value in self.__dict__.items()}


@dataclass
class Order:
    """A placed order; user_id is None for guest checkouts"""
    id: int
    order_number: str
    user_id: Optional[int]
    status: str
    subtotal: float
    tax_amount: float
    shipping_amount: float
    total_amount: float
    shipping: ShippingAddress = field(default_factory=ShippingAddress)
    stripe_payment_intent_id: Optional[str] = None
    printify_order_id: Optional[str] = None
    created_at: Optional[datetime] = None
    items: List[OrderItem] = field(default_factory=list)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Order":
        return cls(
            id=row["id"],
            order_number=row["order_number"],
            user_id=row.get("user_id"),
            status=row["status"],
            subtotal=row["subtotal"],
            tax_amount=row["tax_amount"],
            shipping_amount=row["shipping_amount"],
            total_amount=row["total_amount"],
            shipping=ShippingAddress(
                first_name=row.get("shipping_first_name"),
                last_name=row.get("shipping_last_name"),
                address1=row.get("shipping_address1"),
                address2=row.get("shipping_address2"),
                city=row.get("shipping_city"),
                state=row.get("shipping_state"),
                postal_code=row.get("shipping_postal_code"),
                country=row.get("shipping_country"),
                email=row.get("shipping_email"),
            ),
            stripe_payment_intent_id=row.get("stripe_payment_intent_id"),
            printify_order_id=row.get("printify_order_id"),
            created_at=DateUtils.parse(row.get("created_at")),
        )

    @property
    def is_guest(self) -> bool:
        return self.user_id is None

    def is_visible_to(self, user_id: Optional[int]) -> bool:
        """Guest orders are readable by anyone holding the number; owned orders only by the owner."""
        if self.is_guest:
            return True
        return user_id is not None and self.user_id == user_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        data = {
            "id": self.id,
            "order_number": self.order_number,
            "user_id": self.user_id,
            "status": self.status,
            "subtotal": self.subtotal,
            "tax_amount": self.tax_amount,
            "shipping_amount": self.shipping_amount,
            "total_amount": self.total_amount,
            "stripe_payment_intent_id": self.stripe_payment_intent_id,
            "printify_order_id": self.printify_order_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        data.update(self.shipping.to_dict())
        data["items"] = [item.to_dict() for item in self.items]
        return data
