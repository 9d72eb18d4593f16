from storefront.repositories.tax_repository import TaxRepository


class TaxService:
    """Sales tax lookup. Unknown regions are untaxed, never an error."""

    def __init__(self, tax_repository: TaxRepository):
        self.tax_repo = tax_repository

    @staticmethod
    def normalize_code(state_code: str) -> str:
        return (state_code or "").strip().upper()

    def get_rate(self, state_code: str) -> float:
        rate = self.tax_repo.get_tax_rate(self.normalize_code(state_code))
        return rate if rate is not None else 0

