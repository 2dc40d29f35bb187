"""Tests for the FastAPI adapter — status codes and response bodies."""

import pytest
from fastapi.testclient import TestClient

from idcheck import build_service
from idcheck.api.main import app
from idcheck.api.routes import validate as validate_routes
from idcheck.config.settings import Settings
from idcheck.core.entities.document import DocumentKind

client = TestClient(app)

SUCCESS = {"message": "Validation successful"}


class TestHealth:
    def test_health(self) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "version": "1.0.0",
            "document_kinds": 27,
            "passport_countries": 53,
        }


class TestDocumentRoutes:
    @pytest.mark.parametrize(
        "slug,number",
        [
            ("cpf", "453.178.287-91"),
            ("pis-pasep", "12056412545"),
            ("us-ssn", "123-45-6789"),
            ("uk-ni", "AB123456C"),
            ("kr-rrn", "6801011000015"),
            ("de-personalausweis", "0110000005"),
        ],
    )
    def test_valid(self, slug: str, number: str) -> None:
        response = client.post(f"/api/v1/validate/{slug}", json={"number": number})
        assert response.status_code == 200
        assert response.json() == SUCCESS

    def test_checksum_error(self) -> None:
        response = client.post("/api/v1/validate/cnpj", json={"number": "11222333000182"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid CNPJ number"}

    def test_format_error(self) -> None:
        response = client.post("/api/v1/validate/crm", json={"number": "1234SP"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid CRM format"}

    @pytest.mark.parametrize("body", [{}, {"number": ""}, {"number": None}])
    def test_number_required(self, body: dict) -> None:
        response = client.post("/api/v1/validate/cnh", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "CNH number is required."}

    def test_required_message_per_kind(self) -> None:
        response = client.post("/api/v1/validate/ca-sin", json={})
        assert response.json() == {"error": "Canadian SIN Number is required."}

    def test_every_kind_has_required_message(self) -> None:
        assert set(validate_routes.REQUIRED_MESSAGES) == set(DocumentKind)

    def test_unknown_slug(self) -> None:
        response = client.post("/api/v1/validate/voter-id", json={"number": "123"})
        assert response.status_code == 404
        assert response.json() == {"error": "Unsupported document kind: voter-id"}


class TestPassportRoute:
    def test_valid(self) -> None:
        response = client.post(
            "/api/v1/validate/passport", json={"passport_number": "C01234565", "country_code": "DE"}
        )
        assert response.status_code == 200
        assert response.json() == SUCCESS

    def test_invalid(self) -> None:
        response = client.post(
            "/api/v1/validate/passport", json={"passport_number": "123456789", "country_code": "US"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid ICAO checksum."}

    @pytest.mark.parametrize("body", [{}, {"passport_number": "AB123456"}, {"country_code": "BR"}])
    def test_required(self, body: dict) -> None:
        response = client.post("/api/v1/validate/passport", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Passport number and country code are required."}


class TestFieldsRoute:
    PAYLOAD = {
        "username": "jdoe",
        "name": "John",
        "surname": "Doe",
        "email": "john@example.com",
        "password": "Secret123",
        "role": "Admin",
    }

    def test_valid(self) -> None:
        response = client.post("/api/v1/validate/fields", json=self.PAYLOAD)
        assert response.status_code == 200
        assert response.json() == SUCCESS

    def test_missing(self) -> None:
        response = client.post("/api/v1/validate/fields", json={"username": "jdoe"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: name, surname, email, password"}

    def test_strict_password_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(validate_routes, "get_settings", lambda: Settings(strict_password=True))
        response = client.post("/api/v1/validate/fields", json=self.PAYLOAD)
        assert response.status_code == 400
        assert response.json()["error"].endswith("a number, and a special character.")


class TestServiceWiring:
    def test_singleton_matches_package_factory(self) -> None:
        service = validate_routes.get_service()
        assert service is validate_routes.get_service()
        assert service.document_kinds == build_service().document_kinds
        assert service.passport_countries == build_service().passport_countries
