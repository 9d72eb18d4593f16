import pytest

from storefront.core.exceptions import ConflictError
from storefront.repositories.address_repository import AddressRepository
from storefront.repositories.cart_repository import CartRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.tax_repository import TaxRepository

ADDRESS = {
    "first_name": "Alice", "last_name": "Ng", "address_line1": "1 Main St",
    "city": "Austin", "state": "TX", "postal_code": "78701",
}


class TestProductRepository:
    def test_seeded_cache(self, engine):
        repo = ProductRepository(engine)
        products = repo.get_all_products()

        assert len(products) == 14
        assert [p.id for p in products] == list(range(1, 15))
        assert repo.exists(7)
        assert not repo.exists(99)

    def test_lookup_by_provider_id(self, engine):
        product = ProductRepository(engine).get_product_by_printify_id("25324445")
        assert product.name == "Lowkey Legends Insulated Tumbler"
        assert product.category == "accessories"


class TestTaxRepository:
    def test_all_regions_seeded(self, engine):
        repo = TaxRepository(engine)
        assert repo.execute_scalar("SELECT COUNT(*) FROM tax_rates") == 51
        assert repo.get_tax_rate("MN") == 0.06875
        assert repo.get_tax_rate("ZZ") is None


class TestAddressTransaction:
    def test_failed_insert_keeps_existing_default(self, engine, users):
        alice, _ = users
        repo = AddressRepository(engine)
        original = repo.create_address(alice, ADDRESS, is_default=True)

        with pytest.raises(ConflictError):
            with repo.transaction() as conn:
                repo._clear_default(conn, alice)
                repo.execute_insert_returning_id(
                    "INSERT INTO addresses (user_id, first_name) VALUES (:user_id, :first_name)",
                    {"user_id": alice, "first_name": "Incomplete"},
                    conn=conn,
                )

        addresses = repo.get_addresses_by_user(alice)
        assert [(a.id, a.is_default) for a in addresses] == [(original, True)]

    def test_unknown_user_is_rejected(self, engine):
        with pytest.raises(ConflictError):
            AddressRepository(engine).create_address(4242, ADDRESS)


class TestCartTransfer:
    def test_transfer_moves_only_that_session(self, engine, users):
        alice, _ = users
        repo = CartRepository(engine)
        line = dict(product_id=1, product_name="Moth Tee", size="M", quantity=1, unit_price=32.0)
        repo.add_cart_item(user_id=None, session_id="s1", **line)
        repo.add_cart_item(user_id=None, session_id="s1", **line)
        repo.add_cart_item(user_id=None, session_id="s2", **line)

        moved = repo.transfer_cart_to_user("s1", alice)

        assert moved == 2
        assert repo.get_cart_by_session("s1") == []
        assert len(repo.get_cart_by_session("s2")) == 1
        assert all(item.session_id is None for item in repo.get_cart_by_user(alice))
