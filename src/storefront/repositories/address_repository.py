from typing import Any, Dict, List, Optional
from sqlalchemy import text
from storefront.repositories.base import BaseRepository
from storefront.models.user import Address
import logging

logger = logging.getLogger(__name__)


class AddressRepository(BaseRepository[Address]):
    """Repository for saved shipping addresses"""

    @property
    def table_name(self) -> str:
        return "addresses"

    def get_by_id(self, address_id: int) -> Optional[Address]:
        row = self.execute_single_query(
            "SELECT * FROM addresses WHERE id = :id",
            {"id": address_id},
        )
        return Address.from_row(row) if row else None

    def get_addresses_by_user(self, user_id: int) -> List[Address]:
        rows = self.execute_query(
            """
            SELECT * FROM addresses
            WHERE user_id = :user_id
            ORDER BY is_default DESC, created_at DESC, id DESC
            """,
            {"user_id": user_id},
        )
        return [Address.from_row(row) for row in rows]

    def create_address(self, user_id: int, fields: Dict[str, Any], is_default: bool = False) -> int:
        """
        Insert an address for the user.

        A new default demotes the user's other addresses in the same
        transaction, so the user never ends up with zero or two defaults.
        """
        insert = """
        INSERT INTO addresses (
            user_id, is_default, first_name, last_name, address_line1, address_line2,
            city, state, postal_code, country, phone
        ) VALUES (
            :user_id, :is_default, :first_name, :last_name, :address_line1, :address_line2,
            :city, :state, :postal_code, :country, :phone
        )
        """
        params = {
            "user_id": user_id,
            "is_default": 1 if is_default else 0,
            "first_name": fields["first_name"],
            "last_name": fields["last_name"],
            "address_line1": fields["address_line1"],
            "address_line2": fields.get("address_line2"),
            "city": fields["city"],
            "state": fields["state"],
            "postal_code": fields["postal_code"],
            "country": fields.get("country") or "US",
            "phone": fields.get("phone"),
        }

        with self.transaction() as conn:
            if is_default:
                self._clear_default(conn, user_id)
            address_id = self.execute_insert_returning_id(insert, params, conn=conn)

        logger.info(f"Created address {address_id} for user {user_id} (default={is_default})")
        return address_id

    def delete_address(self, address_id: int, user_id: int) -> bool:
        """Delete only when the address belongs to user_id."""
        return self.execute_command(
            "DELETE FROM addresses WHERE id = :id AND user_id = :user_id",
            {"id": address_id, "user_id": user_id},
        ) > 0

    def _clear_default(self, conn, user_id: int) -> None:
        conn.execute(
            text("UPDATE addresses SET is_default = 0 WHERE user_id = :user_id"),
            {"user_id": user_id},
        )
