from typing import Optional
from storefront.repositories.base import BaseRepository


class TaxRepository(BaseRepository[float]):
    """Static per-state sales tax table"""

    @property
    def table_name(self) -> str:
        return "tax_rates"

    def get_by_id(self, rate_id: int) -> Optional[float]:
        return self.execute_scalar("SELECT rate FROM tax_rates WHERE id = :id", {"id": rate_id})

    def get_tax_rate(self, state_code: str) -> Optional[float]:
        """Rate for an exact (already upper-cased) state code, or None."""
        return self.execute_scalar(
            "SELECT rate FROM tax_rates WHERE state_code = :state_code",
            {"state_code": state_code},
        )
