"""Cart endpoints for signed-in users and anonymous sessions."""

import pytest

from storefront.core.exceptions import UnauthorizedError, ValidationError
from storefront.services.cart_service import CartService

SESSION = {"X-Session-Id": "sess-abc"}
OTHER_SESSION = {"X-Session-Id": "sess-xyz"}


def _line(**overrides):
    body = {
        "productId": 1,
        "productName": "Lowkey Lunar Moth T-Shirt",
        "size": "M",
        "quantity": 2,
        "unitPrice": 32.0,
        "imageUrl": "https://img/moth.png",
    }
    body.update(overrides)
    return body


def _add(client, headers, **overrides):
    resp = client.post("/api/cart/items", json=_line(**overrides), headers=headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()["cartItemId"]


class TestCartIdentity:
    def test_no_identity_is_401(self, client):
        resp = client.get("/api/cart")

        assert resp.status_code == 401
        assert resp.get_json() == {"success": False, "error": "Missing cart identity"}

    def test_empty_session_cart(self, client):
        cart = client.get("/api/cart", headers=SESSION).get_json()["cart"]
        assert cart == {"items": [], "item_count": 0, "subtotal": 0, "is_empty": True}

    def test_unknown_user_is_401(self, client):
        resp = client.post("/api/cart/items", json=_line(), headers={"X-User-Id": "999"})

        assert resp.status_code == 401
        assert resp.get_json() == {"success": False, "error": "Unknown user"}


class TestAddItem:
    def test_session_cart_totals(self, client):
        _add(client, SESSION)
        _add(client, SESSION, productId=14, productName="Tumbler", size="20oz", quantity=1, unitPrice=36.0)

        cart = client.get("/api/cart", headers=SESSION).get_json()["cart"]

        assert cart["item_count"] == 3
        assert cart["subtotal"] == 100.0
        assert cart["items"][0]["line_total"] == 64.0

    def test_same_product_and_size_makes_two_lines(self, client):
        _add(client, SESSION)
        _add(client, SESSION)

        cart = client.get("/api/cart", headers=SESSION).get_json()["cart"]
        assert len(cart["items"]) == 2

    @pytest.mark.parametrize("quantity", [0, 100, -1])
    def test_quantity_out_of_range(self, client, quantity):
        resp = client.post("/api/cart/items", json=_line(quantity=quantity), headers=SESSION)
        assert resp.status_code == 400
        assert resp.get_json()["success"] is False

    def test_missing_size(self, client):
        body = _line()
        del body["size"]
        assert client.post("/api/cart/items", json=body, headers=SESSION).status_code == 400

    def test_user_cart_ignores_session(self, client, users):
        alice, _ = users
        headers = {"X-User-Id": str(alice), **SESSION}
        _add(client, headers)

        assert client.get("/api/cart", headers=SESSION).get_json()["cart"]["is_empty"] is True
        user_cart = client.get("/api/cart", headers={"X-User-Id": str(alice)}).get_json()["cart"]
        assert user_cart["item_count"] == 2


class TestUpdateAndRemove:
    def test_update_quantity(self, client):
        item_id = _add(client, SESSION)

        resp = client.patch(f"/api/cart/items/{item_id}", json={"quantity": 5}, headers=SESSION)

        assert resp.status_code == 200
        assert resp.get_json()["item"]["quantity"] == 5
        assert client.get("/api/cart", headers=SESSION).get_json()["cart"]["item_count"] == 5

    def test_zero_quantity_removes_line(self, client):
        item_id = _add(client, SESSION)

        resp = client.patch(f"/api/cart/items/{item_id}", json={"quantity": 0}, headers=SESSION)

        assert resp.get_json()["removed"] is True
        assert client.get("/api/cart", headers=SESSION).get_json()["cart"]["is_empty"] is True

    def test_update_above_limit(self, client):
        item_id = _add(client, SESSION)
        resp = client.patch(f"/api/cart/items/{item_id}", json={"quantity": 100}, headers=SESSION)
        assert resp.status_code == 400

    def test_other_session_cannot_touch_line(self, client):
        item_id = _add(client, SESSION)

        patch_resp = client.patch(f"/api/cart/items/{item_id}", json={"quantity": 3}, headers=OTHER_SESSION)
        delete_resp = client.delete(f"/api/cart/items/{item_id}", headers=OTHER_SESSION)

        assert patch_resp.status_code == 404
        assert delete_resp.status_code == 404
        assert delete_resp.get_json()["error"] == "Cart item not found"
        assert client.get("/api/cart", headers=SESSION).get_json()["cart"]["item_count"] == 2

    def test_remove_line(self, client):
        item_id = _add(client, SESSION)

        assert client.delete(f"/api/cart/items/{item_id}", headers=SESSION).status_code == 200
        assert client.get("/api/cart", headers=SESSION).get_json()["cart"]["is_empty"] is True

    def test_clear_cart(self, client):
        _add(client, SESSION)
        _add(client, SESSION, size="L")
        _add(client, OTHER_SESSION)

        resp = client.delete("/api/cart", headers=SESSION)

        assert resp.get_json()["removed"] == 2
        assert client.get("/api/cart", headers=SESSION).get_json()["cart"]["is_empty"] is True
        assert client.get("/api/cart", headers=OTHER_SESSION).get_json()["cart"]["item_count"] == 2


class TestMerge:
    def test_session_lines_move_to_user(self, client, users):
        alice, _ = users
        user_headers = {"X-User-Id": str(alice)}
        _add(client, user_headers)
        _add(client, SESSION)
        _add(client, SESSION, size="L", quantity=1)

        resp = client.post("/api/cart/merge", headers={**user_headers, **SESSION})

        assert resp.status_code == 200
        assert resp.get_json()["moved"] == 2
        assert client.get("/api/cart", headers=SESSION).get_json()["cart"]["is_empty"] is True
        user_cart = client.get("/api/cart", headers=user_headers).get_json()["cart"]
        assert len(user_cart["items"]) == 3
        assert user_cart["item_count"] == 5

    def test_merge_requires_user(self, client):
        assert client.post("/api/cart/merge", headers=SESSION).status_code == 401

    def test_merge_requires_session(self, client, users):
        alice, _ = users
        resp = client.post("/api/cart/merge", headers={"X-User-Id": str(alice)})
        assert resp.status_code == 400


class TestCartService:
    def test_add_without_identity(self, container):
        with pytest.raises(UnauthorizedError):
            container.get(CartService).add_item(None, None, {
                "product_id": 1, "product_name": "x", "size": "M", "quantity": 1, "unit_price": 1.0,
            })

    def test_quantity_bounds(self, container):
        with pytest.raises(ValidationError):
            container.get(CartService).add_item(None, "s1", {
                "product_id": 1, "product_name": "x", "size": "M", "quantity": 100, "unit_price": 1.0,
            })
