"""Saved address endpoints."""

from storefront.repositories.address_repository import AddressRepository


def _headers(user_id):
    return {"X-User-Id": str(user_id)}


def _address(**overrides):
    body = {
        "firstName": "Alice",
        "lastName": "Ng",
        "addressLine1": "1 Main St",
        "city": "Austin",
        "state": "TX",
        "postalCode": "78701",
    }
    body.update(overrides)
    return body


class TestAuthGate:
    def test_missing_user_is_401(self, client):
        resp = client.get("/api/addresses")
        assert resp.status_code == 401
        assert resp.get_json()["success"] is False

    def test_malformed_user_is_400(self, client):
        resp = client.get("/api/addresses", headers={"X-User-Id": "alice"})
        assert resp.status_code == 400

    def test_unknown_user_is_401(self, client, engine):
        resp = client.post("/api/addresses", json=_address(), headers=_headers(999))

        assert resp.status_code == 401
        assert resp.get_json() == {"success": False, "error": "Unknown user"}
        assert AddressRepository(engine).get_addresses_by_user(999) == []


class TestCreateAddress:
    def test_created_with_defaults(self, client, users):
        alice, _ = users

        resp = client.post("/api/addresses", json=_address(), headers=_headers(alice))

        assert resp.status_code == 201
        body = resp.get_json()
        assert body["success"] is True
        assert isinstance(body["addressId"], int)

        listed = client.get("/api/addresses", headers=_headers(alice)).get_json()["addresses"]
        assert len(listed) == 1
        assert listed[0]["country"] == "US"
        assert listed[0]["is_default"] == 0
        assert listed[0]["address_line1"] == "1 Main St"

    def test_missing_field(self, client, users):
        alice, _ = users
        body = _address()
        del body["postalCode"]

        resp = client.post("/api/addresses", json=body, headers=_headers(alice))

        assert resp.status_code == 400
        assert resp.get_json() == {"success": False, "error": "Missing required address fields"}

    def test_numeric_postal_code_is_kept_as_text(self, client, users):
        alice, _ = users

        resp = client.post("/api/addresses", json=_address(postalCode=78701, phone=5125550100),
                           headers=_headers(alice))

        assert resp.status_code == 201
        listed = client.get("/api/addresses", headers=_headers(alice)).get_json()["addresses"]
        assert listed[0]["postal_code"] == "78701"
        assert listed[0]["phone"] == "5125550100"

    def test_postal_code_must_be_scalar(self, client, users):
        alice, _ = users

        resp = client.post("/api/addresses", json=_address(postalCode=["78701"]), headers=_headers(alice))

        assert resp.status_code == 400

    def test_blank_field(self, client, users):
        alice, _ = users

        resp = client.post("/api/addresses", json=_address(city=""), headers=_headers(alice))

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Missing required address fields"

    def test_second_default_demotes_first(self, client, users, engine):
        alice, _ = users
        first = client.post("/api/addresses", json=_address(isDefault=True), headers=_headers(alice))
        second = client.post(
            "/api/addresses",
            json=_address(addressLine1="9 Elm St", isDefault=True),
            headers=_headers(alice),
        )

        addresses = AddressRepository(engine).get_addresses_by_user(alice)
        defaults = [a for a in addresses if a.is_default]

        assert len(defaults) == 1
        assert defaults[0].id == second.get_json()["addressId"]
        assert first.get_json()["addressId"] != defaults[0].id

    def test_default_listed_first(self, client, users):
        alice, _ = users
        client.post("/api/addresses", json=_address(isDefault=True), headers=_headers(alice))
        client.post("/api/addresses", json=_address(addressLine1="2 Side St"), headers=_headers(alice))

        listed = client.get("/api/addresses", headers=_headers(alice)).get_json()["addresses"]

        assert [a["address_line1"] for a in listed] == ["1 Main St", "2 Side St"]

    def test_defaults_are_per_user(self, client, users, engine):
        alice, bob = users
        client.post("/api/addresses", json=_address(isDefault=True), headers=_headers(alice))
        client.post("/api/addresses", json=_address(firstName="Bob", isDefault=True), headers=_headers(bob))

        repo = AddressRepository(engine)
        assert repo.get_addresses_by_user(alice)[0].is_default is True
        assert repo.get_addresses_by_user(bob)[0].is_default is True


class TestDeleteAddress:
    def test_owner_can_delete(self, client, users):
        alice, _ = users
        address_id = client.post("/api/addresses", json=_address(), headers=_headers(alice)).get_json()["addressId"]

        resp = client.delete(f"/api/addresses/{address_id}", headers=_headers(alice))

        assert resp.status_code == 200
        assert client.get("/api/addresses", headers=_headers(alice)).get_json()["addresses"] == []

    def test_someone_elses_address_is_not_found(self, client, users):
        alice, bob = users
        address_id = client.post("/api/addresses", json=_address(), headers=_headers(alice)).get_json()["addressId"]

        resp = client.delete(f"/api/addresses/{address_id}", headers=_headers(bob))

        assert resp.status_code == 404
        assert resp.get_json() == {"success": False, "error": "Address not found"}
        assert len(client.get("/api/addresses", headers=_headers(alice)).get_json()["addresses"]) == 1

    def test_missing_address_is_not_found(self, client, users):
        alice, _ = users
        resp = client.delete("/api/addresses/4242", headers=_headers(alice))

        assert resp.status_code == 404
        assert resp.get_json()["error"] == "Address not found"
