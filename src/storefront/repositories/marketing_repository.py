from typing import Optional
from storefront.repositories.base import BaseRepository
from storefront.models.user import Subscriber


class MarketingRepository(BaseRepository[Subscriber]):
    """Marketing list. Rows are soft-deleted via the subscribed flag."""

    @property
    def table_name(self) -> str:
        return "marketing_subscribers"

    def get_by_id(self, subscriber_id: int) -> Optional[Subscriber]:
        row = self.execute_single_query(
            "SELECT * FROM marketing_subscribers WHERE id = :id",
            {"id": subscriber_id},
        )
        return Subscriber.from_row(row) if row else None

    def get_subscriber(self, email: str) -> Optional[Subscriber]:
        row = self.execute_single_query(
            "SELECT * FROM marketing_subscribers WHERE email = :email",
            {"email": email},
        )
        return Subscriber.from_row(row) if row else None

    def add_subscriber(self, email: str, user_id: Optional[int] = None) -> bool:
        """
        Upsert a subscription. A lapsed row is switched back on, and a
        known user id is linked without dropping an earlier one.
        """
        return self.execute_command(
            """
            INSERT INTO marketing_subscribers (email, user_id)
            VALUES (:email, :user_id)
            ON CONFLICT (email) DO UPDATE SET
                subscribed = 1,
                user_id = COALESCE(excluded.user_id, marketing_subscribers.user_id)
            """,
            {"email": email, "user_id": user_id},
        ) > 0

    def remove_subscriber(self, email: str) -> bool:
        return self.execute_command(
            "UPDATE marketing_subscribers SET subscribed = 0 WHERE email = :email",
            {"email": email},
        ) > 0
