"""
Client for the print-on-demand provider (Printify) REST API.

Every call is a blocking round trip with a fixed timeout. Network failures,
timeouts, non-2xx answers and unreadable bodies all surface as CatalogError;
callers decide whether to fall back to the local product cache.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import requests
from pydantic import ValidationError as PydanticValidationError

from storefront.core.config import CatalogConfig
from storefront.core.exceptions import CatalogError
from storefront.schemas.catalog_schemas import ProviderProduct
from storefront.utils.formatting_utils import FormattingUtils

logger = logging.getLogger(__name__)

WOMENS_KEYWORDS = ("women", "cropped", "lady")
ACCESSORY_KEYWORDS = ("tumbler", "mug", "hat", "bag")


def detect_category(title: str) -> str:
    """
    Guess the storefront category from a product title.

    Anything not recognised as womenswear or an accessory lands in "mens".
    """
    lower = (title or "").lower()
    if any(word in lower for word in WOMENS_KEYWORDS):
        return "womens"
    if any(word in lower for word in ACCESSORY_KEYWORDS):
        return "accessories"
    return "mens"


def format_product(product: Union[ProviderProduct, Dict[str, Any]]) -> Dict[str, Any]:
    """Convert a provider product into the storefront display shape."""
    if not isinstance(product, ProviderProduct):
        product = ProviderProduct.model_validate(product)

    price = 0
    if product.variants:
        price = FormattingUtils.minor_to_major(product.variants[0].price)

    image_url = ""
    default_image = next((img for img in product.images if img.is_default), None)
    if default_image is not None:
        image_url = default_image.src
    elif product.images:
        image_url = product.images[0].src

    return {
        "id": product.id,
        "name": product.title,
        "price": price,
        "category": detect_category(product.title),
        "image_url": image_url,
        "images": [img.src for img in product.images],
        "sizes": FormattingUtils.unique(v.title for v in product.variants if v.is_available),
        "description": FormattingUtils.strip_html(product.description),
        "variants": [
            {
                "id": v.id,
                "title": v.title,
                "price": FormattingUtils.minor_to_major(v.price),
                "is_available": v.is_available,
            }
            for v in product.variants
        ],
    }


class CatalogGateway:
    """Thin wrapper over the provider's shop-scoped endpoints"""

    def __init__(self, config: CatalogConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.shop_id = config.shop_id
        self.base_url = config.base_url.rstrip("/")
        self.timeout = config.timeout
        self._session = session or requests.Session()
        self._session.headers.update({
            "Authorization": f"Bearer {config.api_token}",
            "Content-Type": "application/json",
        })

    def _url(self, path: str) -> str:
        return f"{self.base_url}/shops/{self.shop_id}/{path}"

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = self._url(path)
        try:
            response = self._session.request(method, url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            body = e.response.text[:500] if e.response is not None else None
            logger.error(f"Printify {method} {path} failed with HTTP {status}: {body}")
            raise CatalogError(f"HTTP {status} from {path}", status_code=status, response_body=body)
        except requests.RequestException as e:
            logger.error(f"Printify {method} {path} request failed: {e}")
            raise CatalogError(f"Request to {path} failed: {e}")
        except ValueError as e:
            logger.error(f"Printify {method} {path} returned an unreadable body: {e}")
            raise CatalogError(f"Invalid JSON from {path}")

    def _parse_product(self, raw: Any) -> ProviderProduct:
        try:
            return ProviderProduct.model_validate(raw)
        except PydanticValidationError as e:
            logger.error(f"Unexpected product payload from Printify: {e}")
            raise CatalogError("Malformed product payload")

    # ------------------------------------------------------------------ #
    # Products                                                             #
    # ------------------------------------------------------------------ #
    def get_products(self) -> List[ProviderProduct]:
        body = self._request("GET", "products.json")
        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            raise CatalogError("Product list response has no data array")
        return [self._parse_product(raw) for raw in body["data"]]

    def get_product(self, product_id: str) -> ProviderProduct:
        return self._parse_product(self._request("GET", f"products/{product_id}.json"))

    # ------------------------------------------------------------------ #
    # Orders                                                               #
    # ------------------------------------------------------------------ #
    def create_order(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "orders.json", payload)

    def get_order(self, order_id: str) -> Dict[str, Any]:
        return self._request("GET", f"orders/{order_id}.json")

    def cancel_order(self, order_id: str) -> Dict[str, Any]:
        return self._request("POST", f"orders/{order_id}/cancel.json")

    # ------------------------------------------------------------------ #
    # Shipping                                                             #
    # ------------------------------------------------------------------ #
    def get_shipping_cost(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "orders/shipping.json", payload)

    def find_variant_id(self, product_id: str, size: str) -> Optional[int]:
        """
        Variant id of the available variant whose title equals `size`
        (case-insensitive). None when nothing matches or the provider fails.
        """
        try:
            product = self.get_product(product_id)
        except CatalogError as e:
            logger.error(f"Error finding variant for product {product_id}: {e.internal_message}")
            return None

        wanted = (size or "").lower()
        for variant in product.variants:
            if variant.is_available and variant.title.lower() == wanted:
                return variant.id
        return None
