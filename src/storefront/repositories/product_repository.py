from typing import List, Optional
from storefront.repositories.base import BaseRepository
from storefront.models.product import Product


class ProductRepository(BaseRepository[Product]):
    """Read access to the local product cache"""

    @property
    def table_name(self) -> str:
        return "products"

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.get_product_by_id(product_id)

    def get_all_products(self) -> List[Product]:
        rows = self.execute_query("SELECT * FROM products ORDER BY id")
        return [Product.from_row(row) for row in rows]

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        row = self.execute_single_query(
            "SELECT * FROM products WHERE id = :id",
            {"id": product_id},
        )
        return Product.from_row(row) if row else None

    def get_product_by_printify_id(self, printify_id: str) -> Optional[Product]:
        row = self.execute_single_query(
            "SELECT * FROM products WHERE printify_id = :printify_id",
            {"printify_id": str(printify_id)},
        )
        return Product.from_row(row) if row else None
