"""
Tests for the utility, health and root endpoints.
"""
import re

import pytest

from catalog_api.api.v1.endpoints.utils import convert_weight


class TestGenerateSku:
    def test_default_prefix(self, client, url):
        response = client.post(url("/utils/generate-sku"))
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert re.fullmatch(r"PRD-\d+-\d{3}", body["sku"])

    def test_custom_prefix_is_upper_cased(self, client, url):
        body = client.post(url("/utils/generate-sku"), json={"prefix": "tee"}).json()
        assert body["sku"].startswith("TEE-")


class TestGenerateBarcode:
    def test_default_length(self, client, url):
        body = client.post(url("/utils/generate-barcode")).json()
        assert re.fullmatch(r"\d{13}", body["barcode"])

    def test_custom_length(self, client, url):
        body = client.post(url("/utils/generate-barcode"), json={"length": 8}).json()
        assert re.fullmatch(r"\d{8}", body["barcode"])

    def test_length_out_of_range(self, client, url):
        response = client.post(url("/utils/generate-barcode"), json={"length": 0})
        assert response.status_code == 422
        assert "length" in response.json()["errors"]


class TestConvertWeight:
    @pytest.mark.parametrize(
        "weight,from_unit,to_unit,expected",
        [
            (1, "kg", "g", 1000),
            (500, "g", "kg", 0.5),
            (1, "lb", "oz", 16.0),
            (2, "kg", "kg", 2),
        ],
    )
    def test_conversions(self, weight, from_unit, to_unit, expected):
        assert convert_weight(weight, from_unit, to_unit) == pytest.approx(expected, abs=1e-3)

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            convert_weight(1, "stone", "kg")

    def test_endpoint(self, client, url):
        response = client.post(
            url("/utils/convert-weight"), json={"weight": 1, "from": "kg", "to": "lb"}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["original"] == {"weight": 1, "unit": "kg"}
        assert body["converted"]["unit"] == "lb"
        assert body["converted"]["weight"] == pytest.approx(2.2046, abs=1e-4)

    def test_endpoint_unknown_unit(self, client, url):
        response = client.post(
            url("/utils/convert-weight"), json={"weight": 1, "from": "kg", "to": "stone"}
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid weight unit"}


class TestServiceEndpoints:
    def test_health(self, client, url):
        response = client.get(url("/health"))
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == "1.0.0"

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "message" in response.json()

    def test_unknown_route_uses_envelope(self, client, url):
        response = client.get(url("/nowhere"))
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Not Found"}
