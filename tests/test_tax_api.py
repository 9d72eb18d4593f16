import pytest

from storefront.services.tax_service import TaxService


class TestTaxEndpoint:
    def test_known_state(self, client):
        resp = client.get("/api/tax/CA")

        assert resp.status_code == 200
        assert resp.get_json() == {"success": True, "rate": 0.0725, "stateCode": "CA"}

    def test_code_is_upper_cased(self, client):
        body = client.get("/api/tax/ny").get_json()
        assert body["stateCode"] == "NY"
        assert body["rate"] == 0.08

    def test_unknown_state_is_untaxed(self, client):
        body = client.get("/api/tax/ZZ").get_json()
        assert body["success"] is True
        assert body["rate"] == 0
        assert body["stateCode"] == "ZZ"

    def test_zero_rate_state(self, client):
        assert client.get("/api/tax/OR").get_json()["rate"] == 0


class TestTaxService:
    @pytest.mark.parametrize("code", ["tx", " TX ", "Tx"])
    def test_normalize_code(self, code):
        assert TaxService.normalize_code(code) == "TX"

    def test_get_rate_normalizes_code(self, container):
        service = container.get(TaxService)
        assert service.get_rate(" ca ") == 0.0725
        assert service.get_rate("ZZ") == 0
