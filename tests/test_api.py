"""
HTTP surface tests. The registry is injected through the get_registry
dependency so every test works on its own data file.
"""

import pytest
from fastapi.testclient import TestClient

import app.main as main
from app.main import app, get_registry
from app.store import SellerRegistry

PREFIX = main.settings.API_PREFIX


@pytest.fixture
def registry(tmp_path):
    r = SellerRegistry(tmp_path / "sellers.json")
    r.load()
    return r


@pytest.fixture
def client(registry):
    app.dependency_overrides[get_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestReadEndpoints:
    def test_list_sellers(self, client):
        resp = client.get(f"{PREFIX}/sellers")
        assert resp.status_code == 200
        sellers = resp.json()["sellers"]
        assert len(sellers) == 6
        assert {s["id"] for s in sellers} >= {"seller-001", "test-seller-001"}

    def test_get_seller_uses_camel_case_keys(self, client):
        resp = client.get(f"{PREFIX}/sellers/seller-001")
        assert resp.status_code == 200
        body = resp.json()
        assert body["companyName"] == "Premium Coffee Co."
        assert body["socialMedia"]["instagram"] == "@premiumcoffee"
        assert body["subscriptionTier"] == "free"

    def test_unknown_seller_is_404(self, client):
        resp = client.get(f"{PREFIX}/sellers/ghost")
        assert resp.status_code == 404

    def test_brand_color(self, client):
        resp = client.get(f"{PREFIX}/sellers/seller-001/brand-color")
        assert resp.json() == {"seller_id": "seller-001", "brand_color": "from-emerald-500 to-teal-600"}


class TestNameAvailabilityEndpoint:
    def test_taken_name(self, client):
        resp = client.get(f"{PREFIX}/sellers/name-availability", params={"company_name": "liquid soul coffee"})
        assert resp.status_code == 200
        assert resp.json() == {"company_name": "liquid soul coffee", "available": False}

    def test_own_name_is_available_when_excluded(self, client):
        resp = client.get(
            f"{PREFIX}/sellers/name-availability",
            params={"company_name": "Liquid Soul Coffee", "exclude_id": "seller-002"},
        )
        assert resp.json()["available"] is True

    def test_name_is_required(self, client):
        resp = client.get(f"{PREFIX}/sellers/name-availability")
        assert resp.status_code == 422


class TestUpdateEndpoint:
    def test_rename(self, client, registry):
        resp = client.put(f"{PREFIX}/sellers/seller-002", json={"companyName": "Liquid Soul Coffee Redux"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["data"]["companyName"] == "Liquid Soul Coffee Redux"
        assert "updatedAt" in body["data"]
        assert registry.get_seller_profile("seller-002").company_name == "Liquid Soul Coffee Redux"

    def test_duplicate_name_is_409(self, client, registry):
        resp = client.put(f"{PREFIX}/sellers/seller-002", json={"companyName": "Premium Coffee Co."})
        assert resp.status_code == 409
        detail = resp.json()["detail"]
        assert detail["errorType"] == "DUPLICATE_NAME"
        assert "Premium Coffee Co." in detail["error"]
        assert registry.get_seller_profile("seller-002").company_name == "Liquid Soul Coffee"

    def test_new_seller_is_created(self, client):
        resp = client.put(f"{PREFIX}/sellers/new-seller-42", json={"companyName": "Brand New Co"})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["id"] == "new-seller-42"
        assert data["companySize"] == "1-5 employees"

        assert client.get(f"{PREFIX}/sellers/new-seller-42").json()["companyName"] == "Brand New Co"

    def test_null_specialties_is_422(self, client, registry):
        resp = client.put(f"{PREFIX}/sellers/seller-001", json={"specialties": None})
        assert resp.status_code == 422
        assert registry.get_seller_profile("seller-001").specialties == ["Single Origin", "Organic", "Fair Trade"]

    def test_null_company_name_keeps_stored_name(self, client):
        resp = client.put(f"{PREFIX}/sellers/seller-001", json={"companyName": None, "city": "Ottawa"})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["companyName"] == "Premium Coffee Co."
        assert data["city"] == "Ottawa"

    def test_invalid_tier_is_422(self, client):
        resp = client.put(f"{PREFIX}/sellers/seller-001", json={"subscriptionTier": "platinum"})
        assert resp.status_code == 422


class TestHealth:
    def test_health_reports_registry_status(self, client):
        body = client.get(f"{PREFIX}/health").json()
        assert body["mode"] == "bootstrapped"
        assert body["record_count"] == 6
        assert body["healthy"] is True

    def test_lifespan_loads_registry_on_startup(self, tmp_path, monkeypatch):
        data_file = tmp_path / "startup" / "sellers.json"
        monkeypatch.setattr(main.settings, "SELLERS_DATA_FILE", str(data_file))

        with TestClient(app) as c:
            body = c.get(f"{PREFIX}/health").json()

        assert body["record_count"] == 6
        assert body["data_file"] == str(data_file)
        assert data_file.exists()
