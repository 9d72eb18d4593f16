from typing import Any, Dict, Optional
from storefront.repositories.base import BaseRepository
from storefront.models.user import User
from storefront.core.exceptions import ConflictError
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for user accounts"""

    @property
    def table_name(self) -> str:
        return "users"

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.get_user_by_id(user_id)

    def create_user(
        self,
        email: str,
        password_hash: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        marketing_opt_in: bool = True,
    ) -> int:
        """Insert a user and return its id. A taken email raises ConflictError."""
        command = """
        INSERT INTO users (email, password_hash, first_name, last_name, phone, marketing_opt_in)
        VALUES (:email, :password_hash, :first_name, :last_name, :phone, :marketing_opt_in)
        """
        try:
            return self.execute_insert_returning_id(command, {
                "email": email,
                "password_hash": password_hash,
                "first_name": first_name,
                "last_name": last_name,
                "phone": phone,
                "marketing_opt_in": 1 if marketing_opt_in else 0,
            })
        except ConflictError:
            logger.warning(f"Email already registered: {email}")
            raise ConflictError("Email already registered")

    def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Full user row, password hash included. Only the auth layer should
        call this; everything else goes through get_user_by_id.
        """
        return self.execute_single_query(
            "SELECT * FROM users WHERE email = :email",
            {"email": email},
        )

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        row = self.execute_single_query(
            """
            SELECT id, email, first_name, last_name, phone, marketing_opt_in, created_at
            FROM users WHERE id = :id
            """,
            {"id": user_id},
        )
        return User.from_row(row) if row else None
