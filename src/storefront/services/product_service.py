from typing import Any, Dict, List, Tuple
from storefront.repositories.product_repository import ProductRepository
from storefront.services.catalog_gateway import CatalogGateway, format_product
from storefront.models.product import Product
from storefront.core.exceptions import CatalogError, NotFoundError
import logging

logger = logging.getLogger(__name__)

SOURCE_PROVIDER = "provider"
SOURCE_CACHE = "cache"


class ProductService:
    """
    Product catalog use cases

    The provider is the source of truth while it answers; the products table
    is a fallback copy that may be stale.
    """

    def __init__(self, product_repository: ProductRepository, catalog: CatalogGateway):
        self.product_repo = product_repository
        self.catalog = catalog

    def list_products(self) -> Tuple[List[Dict[str, Any]], str]:
        """
        Return (products, source).

        Any provider failure falls back to the cache once; a cache failure
        propagates to the caller.
        """
        try:
            products = [format_product(p) for p in self.catalog.get_products()]
            logger.info(f"Serving {len(products)} products from provider")
            return products, SOURCE_PROVIDER
        except CatalogError as e:
            logger.warning(f"Provider catalog unavailable, using cache: {e.internal_message}")

        cached = [p.to_summary() for p in self.product_repo.get_all_products()]
        logger.info(f"Serving {len(cached)} products from cache")
        return cached, SOURCE_CACHE

    def get_product(self, product_id: int) -> Product:
        """Lookup by local id always reads the cache."""
        product = self.product_repo.get_product_by_id(product_id)
        if product is None:
            raise NotFoundError("Product")
        return product
