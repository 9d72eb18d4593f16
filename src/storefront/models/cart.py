from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from storefront.utils.date_utils import DateUtils


@dataclass
class CartItem:
    """Represents an item in a shopping cart"""
    id: int
    product_id: int
    product_name: str
    size: str
    quantity: int
    unit_price: float  # Price at time of adding to cart
    user_id: Optional[int] = None
    session_id: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CartItem":
        return cls(
            id=row["id"],
            user_id=row.get("user_id"),
            session_id=row.get("session_id"),
            product_id=row["product_id"],
            product_name=row["product_name"],
            size=row["size"],
            quantity=row["quantity"],
            unit_price=row["unit_price"],
            image_url=row.get("image_url"),
            created_at=DateUtils.parse(row.get("created_at")),
        )

    @property
    def line_total(self) -> float:
        return round(self.unit_price * self.quantity, 2)

    def owned_by(self, user_id: Optional[int], session_id: Optional[str]) -> bool:
        if user_id is not None:
            return self.user_id == user_id
        return session_id is not None and self.session_id == session_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": self.id,
            "product_id": self.product_id,
            "product_name": self.product_name,
            "size": self.size,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "line_total": self.line_total,
            "image_url": self.image_url,
        }


@dataclass
class Cart:
    """All lines owned by one user or one anonymous session"""
    user_id: Optional[int] = None
    session_id: Optional[str] = None
    items: List[CartItem] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        """Total quantity of all items"""
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> float:
        return round(sum(item.unit_price * item.quantity for item in self.items), 2)

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "items": [item.to_dict() for item in self.items],
            "item_count": self.item_count,
            "subtotal": self.subtotal,
            "is_empty": self.is_empty,
        }
