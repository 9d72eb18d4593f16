from typing import Optional
from storefront.repositories.marketing_repository import MarketingRepository
import logging

logger = logging.getLogger(__name__)


class MarketingService:
    """Newsletter sign-up and opt-out"""

    def __init__(self, marketing_repository: MarketingRepository):
        self.marketing_repo = marketing_repository

    @staticmethod
    def normalize_email(email: str) -> str:
        return (email or "").strip().lower()

    def subscribe(self, email: str, user_id: Optional[int] = None) -> bool:
        """Returns False when the address was already actively subscribed."""
        email = self.normalize_email(email)
        existing = self.marketing_repo.get_subscriber(email)
        self.marketing_repo.add_subscriber(email, user_id)
        if existing is not None and existing.subscribed:
            return False
        logger.info(f"Marketing subscription active (user {user_id})")
        return True

    def unsubscribe(self, email: str) -> bool:
        return self.marketing_repo.remove_subscriber(self.normalize_email(email))
