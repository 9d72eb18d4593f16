from typing import Any, Dict, List
from storefront.repositories.address_repository import AddressRepository
from storefront.models.user import Address
from storefront.core.exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)


class AddressService:
    """Saved address use cases for a signed-in user"""

    def __init__(self, address_repository: AddressRepository):
        self.address_repo = address_repository

    def list_addresses(self, user_id: int) -> List[Address]:
        return self.address_repo.get_addresses_by_user(user_id)

    def create_address(self, user_id: int, fields: Dict[str, Any], is_default: bool = False) -> int:
        return self.address_repo.create_address(user_id, fields, is_default)

    def delete_address(self, user_id: int, address_id: int) -> None:
        """
        Someone else's address is reported as missing, the same as an id
        that does not exist.
        """
        if not self.address_repo.delete_address(address_id, user_id):
            logger.info(f"User {user_id} tried to delete unknown or foreign address {address_id}")
            raise NotFoundError("Address")
