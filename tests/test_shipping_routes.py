"""
Tests for the Correios shipping HTTP routes.
"""
import pytest
from fastapi.testclient import TestClient

from correios_shipping.api.deps import get_computation_method
from correios_shipping.core.exceptions import CarrierUnavailable
from correios_shipping.main import create_app
from correios_shipping.modules.shipping import CorreiosComputationMethod

RATES_URL = "/api/shipping/correios/rates"

CART = {
    "items": [
        {"weight": "0.5", "length": "20", "width": "15", "height": "3", "quantity": 2},
    ],
    "shipping_address": {
        "country": "br",
        "state_province": "RJ",
        "zip_postal_code": "20040-002",
    },
}


@pytest.fixture
def app(setting_store, localizer, currency_converter):
    return create_app(
        settings_provider=setting_store,
        localizer=localizer,
        currency_converter=currency_converter,
    )


@pytest.fixture
def make_test_client(app, setting_store, localizer, currency_converter):
    """TestClient whose computation method uses the given fake client factory."""
    def _make(factory):
        method = CorreiosComputationMethod(
            settings_provider=setting_store,
            localizer=localizer,
            currency_converter=currency_converter,
            client_factory=factory,
        )
        app.dependency_overrides[get_computation_method] = lambda: method
        return TestClient(app)
    return _make


class TestRatesRoute:
    """POST /rates"""

    def test_rates(self, make_test_client, client_factory, sedex_result, pac_result):
        """Test options come back in carrier order with string rates."""
        client = make_test_client(client_factory(results=[sedex_result, pac_result]))

        response = client.post(RATES_URL, json=CART)

        assert response.status_code == 200
        data = response.json()
        assert data["errors"] == []
        assert [o["name"] for o in data["shipping_options"]] == ["SEDEX - 2 dia(s)", "PAC - 7 dia(s)"]
        assert data["shipping_options"][0]["rate"] == "32.80"
        assert data["shipping_options"][1]["service_code"] == "04510"

    def test_missing_items(self, make_test_client, client_factory):
        """Test validation failures are reported in the body, not as HTTP errors."""
        factory = client_factory()
        client = make_test_client(factory)

        response = client.post(RATES_URL, json={"items": [], "shipping_address": CART["shipping_address"]})

        assert response.status_code == 200
        assert response.json()["errors"] == ["No shipment items"]
        assert factory.clients == []

    def test_carrier_down_returns_default(self, make_test_client, client_factory):
        """Test the default option is offered when the carrier fails."""
        client = make_test_client(client_factory(side_effect=CarrierUnavailable("down")))

        response = client.post(RATES_URL, json=CART)

        options = response.json()["shipping_options"]
        assert len(options) == 1
        assert options[0]["name"] == "Correios Padrao - 10 dia(s)"
        assert options[0]["rate"] == "25.00"

    def test_invalid_payload(self, make_test_client, client_factory):
        """Test schema violations are rejected."""
        client = make_test_client(client_factory())
        cart = {**CART, "items": [{"weight": "-1"}]}

        response = client.post(RATES_URL, json=cart)

        assert response.status_code == 422


class TestTrackingRoute:
    """GET /tracking/{tracking_number}"""

    def test_tracking_url(self, make_test_client, client_factory):
        client = make_test_client(client_factory())

        response = client.get("/api/shipping/correios/tracking/AA123456789BR")

        assert response.status_code == 200
        assert response.json()["url"].endswith("objetos=AA123456789BR")

    def test_foreign_tracking_number(self, make_test_client, client_factory):
        """Test non-Correios numbers are not found."""
        client = make_test_client(client_factory())

        response = client.get("/api/shipping/correios/tracking/1Z999AA10123456784")

        assert response.status_code == 404
        assert response.json()["detail"] == "Not a Correios tracking number"


class TestConfigureRoute:
    """GET /configure"""

    def test_configure(self, app, setting_store, correios_settings):
        """Test password is masked and unknown codes reported."""
        correios_settings.password = "secret"
        correios_settings.carrier_services_offered = ["04014", "12345"]
        setting_store.save_setting(correios_settings)
        client = TestClient(app)

        response = client.get("/api/shipping/correios/configure")

        assert response.status_code == 200
        data = response.json()
        assert data["settings"]["password"] == "***"
        assert data["available_services"]["04014"] == "SEDEX"
        assert data["unknown_service_codes"] == ["12345"]

    def test_health(self, app):
        response = TestClient(app).get("/health")
        assert response.json()["status"] == "ok"
