from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from storefront.utils.date_utils import DateUtils


@dataclass
class User:
    """A registered customer, without credentials"""
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    marketing_opt_in: bool = True
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        return cls(
            id=row["id"],
            email=row["email"],
            first_name=row.get("first_name"),
            last_name=row.get("last_name"),
            phone=row.get("phone"),
            marketing_opt_in=bool(row.get("marketing_opt_in", 1)),
            created_at=DateUtils.parse(row.get("created_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone": self.phone,
            "marketing_opt_in": self.marketing_opt_in,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass
class Address:
    """A saved postal address of a user"""
    id: int
    user_id: int
    is_default: bool
    first_name: str
    last_name: str
    address_line1: str
    city: str
    state: str
    postal_code: str
    country: str = "US"
    address_line2: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Address":
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            is_default=bool(row["is_default"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            address_line1=row["address_line1"],
            address_line2=row.get("address_line2"),
            city=row["city"],
            state=row["state"],
            postal_code=row["postal_code"],
            country=row.get("country") or "US",
            phone=row.get("phone"),
            created_at=DateUtils.parse(row.get("created_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "is_default": 1 if self.is_default else 0,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "address_line1": self.address_line1,
            "address_line2": self.address_line2,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "country": self.country,
            "phone": self.phone,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass
class Subscriber:
    """A marketing list entry"""
    email: str
    user_id: Optional[int]
    subscribed: bool
    subscribed_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Subscriber":
        return cls(
            email=row["email"],
            user_id=row.get("user_id"),
            subscribed=bool(row["subscribed"]),
            subscribed_at=DateUtils.parse(row.get("subscribed_at")),
        )
