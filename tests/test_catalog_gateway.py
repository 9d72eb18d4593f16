"""
Provider client tests.

Covers the pure formatting helpers and the error mapping of CatalogGateway
against a mocked requests session (no network).
"""

from unittest.mock import MagicMock

import pytest
import requests

from storefront.core.config import CatalogConfig
from storefront.core.exceptions import CatalogError
from storefront.schemas.catalog_schemas import ProviderProduct
from storefront.services.catalog_gateway import CatalogGateway, detect_category, format_product
from storefront.utils.formatting_utils import FormattingUtils


RAW_PRODUCT = {
    "id": "abc123",
    "title": "Lowkey Lunar Moth T-Shirt",
    "description": "<p>Embrace the <b>darkness</b>.</p>  ",
    "images": [
        {"src": "https://img/back.png", "is_default": False},
        {"src": "https://img/front.png", "is_default": True},
    ],
    "variants": [
        {"id": 11, "title": "S", "price": 3200, "is_available": True},
        {"id": 12, "title": "M", "price": 3200, "is_available": True},
        {"id": 13, "title": "M", "price": 3400, "is_available": True},
        {"id": 14, "title": "XL", "price": 3200, "is_available": False},
    ],
    "print_areas": [{"ignored": True}],
}


def _gateway(session=None):
    session = session or MagicMock()
    session.headers = {}
    config = CatalogConfig(api_token="tok", shop_id="42", base_url="https://api.example.test/v1/")
    return CatalogGateway(config, session=session), session


def _response(status=200, body=None, text=""):
    response = MagicMock()
    response.status_code = status
    response.text = text
    response.json.return_value = body
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


# ============================================================================
# Formatting helpers
# ============================================================================

class TestDetectCategory:
    @pytest.mark.parametrize("title, expected", [
        ("Lowkey King Playing Card Women's T-Shirt", "womens"),
        ("Lowkey Lady Cropped Top Tee", "womens"),
        ("Lowkey Legends Insulated Tumbler", "accessories"),
        ("Dad Hat", "accessories"),
        ("Lowkey Hot Hand T-Shirt", "mens"),
        ("", "mens"),
    ])
    def test_category_from_title(self, title, expected):
        assert detect_category(title) == expected

    def test_womens_wins_over_accessory(self):
        assert detect_category("Women's Tote Bag") == "womens"


class TestStripHtml:
    def test_removes_tags_and_trims(self):
        assert FormattingUtils.strip_html("  <p>Hello <i>there</i></p> ") == "Hello there"

    def test_empty_input(self):
        assert FormattingUtils.strip_html(None) == ""


class TestFormatProduct:
    def test_display_shape(self):
        product = format_product(RAW_PRODUCT)

        assert product["id"] == "abc123"
        assert product["name"] == "Lowkey Lunar Moth T-Shirt"
        assert product["price"] == 32.0
        assert product["category"] == "mens"
        assert product["image_url"] == "https://img/front.png"
        assert product["images"] == ["https://img/back.png", "https://img/front.png"]
        assert product["description"] == "Embrace the darkness."

    def test_sizes_are_available_and_unique_in_order(self):
        assert format_product(RAW_PRODUCT)["sizes"] == ["S", "M"]

    def test_variant_prices_in_major_units(self):
        variants = format_product(RAW_PRODUCT)["variants"]
        assert variants[2] == {"id": 13, "title": "M", "price": 34.0, "is_available": True}

    def test_no_variants_no_images(self):
        product = format_product({"id": 7, "title": "Mystery Mug", "images": None, "variants": None})
        assert product["id"] == "7"
        assert product["price"] == 0
        assert product["image_url"] == ""
        assert product["sizes"] == []
        assert product["category"] == "accessories"

    def test_first_image_when_none_flagged_default(self):
        raw = dict(RAW_PRODUCT, images=[{"src": "https://img/a.png"}, {"src": "https://img/b.png"}])
        assert format_product(raw)["image_url"] == "https://img/a.png"

    def test_accepts_parsed_model(self):
        model = ProviderProduct.model_validate(RAW_PRODUCT)
        assert format_product(model) == format_product(RAW_PRODUCT)


# ============================================================================
# CatalogGateway
# ============================================================================

class TestCatalogGateway:
    def test_sets_auth_headers(self):
        _, session = _gateway()
        assert session.headers["Authorization"] == "Bearer tok"
        assert session.headers["Content-Type"] == "application/json"

    def test_get_products_calls_shop_scoped_url(self):
        gateway, session = _gateway()
        session.request.return_value = _response(body={"data": [RAW_PRODUCT]})

        products = gateway.get_products()

        assert [p.id for p in products] == ["abc123"]
        session.request.assert_called_once_with(
            "GET",
            "https://api.example.test/v1/shops/42/products.json",
            json=None,
            timeout=30.0,
        )

    def test_http_error_becomes_catalog_error(self):
        gateway, session = _gateway()
        session.request.return_value = _response(status=401, text='{"error":"Unauthenticated"}')

        with pytest.raises(CatalogError) as exc_info:
            gateway.get_products()

        assert exc_info.value.provider_status == 401
        assert "Unauthenticated" in exc_info.value.response_body
        assert exc_info.value.message == "Product provider unavailable"

    def test_network_error_becomes_catalog_error(self):
        gateway, session = _gateway()
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(CatalogError):
            gateway.get_product("abc123")

    def test_timeout_becomes_catalog_error(self):
        gateway, session = _gateway()
        session.request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(CatalogError):
            gateway.get_products()

    def test_unreadable_body_becomes_catalog_error(self):
        gateway, session = _gateway()
        response = _response()
        response.json.side_effect = ValueError("Expecting value")
        session.request.return_value = response

        with pytest.raises(CatalogError):
            gateway.get_products()

    def test_missing_data_array_is_an_error(self):
        gateway, session = _gateway()
        session.request.return_value = _response(body={"products": []})

        with pytest.raises(CatalogError):
            gateway.get_products()

    def test_create_order_posts_payload(self):
        gateway, session = _gateway()
        session.request.return_value = _response(body={"id": "pf-9"})

        result = gateway.create_order({"external_id": "LK-1"})

        assert result == {"id": "pf-9"}
        session.request.assert_called_once_with(
            "POST",
            "https://api.example.test/v1/shops/42/orders.json",
            json={"external_id": "LK-1"},
            timeout=30.0,
        )

    def test_cancel_order_path(self):
        gateway, session = _gateway()
        session.request.return_value = _response(body={"status": "canceled"})

        gateway.cancel_order("pf-9")

        assert session.request.call_args[0][1].endswith("/shops/42/orders/pf-9/cancel.json")

    def test_get_order_path(self):
        gateway, session = _gateway()
        session.request.return_value = _response(body={"id": "pf-9", "status": "in-production"})

        assert gateway.get_order("pf-9")["status"] == "in-production"
        assert session.request.call_args[0][:2] == ("GET", "https://api.example.test/v1/shops/42/orders/pf-9.json")


class TestFindVariantId:
    def test_case_insensitive_match_on_available_variant(self):
        gateway, session = _gateway()
        session.request.return_value = _response(body=RAW_PRODUCT)

        assert gateway.find_variant_id("abc123", "m") == 12

    def test_unavailable_variant_is_not_matched(self):
        gateway, session = _gateway()
        session.request.return_value = _response(body=RAW_PRODUCT)

        assert gateway.find_variant_id("abc123", "XL") is None

    def test_provider_failure_returns_none(self):
        gateway, session = _gateway()
        session.request.side_effect = requests.ConnectionError("down")

        assert gateway.find_variant_id("abc123", "M") is None