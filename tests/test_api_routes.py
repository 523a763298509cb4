# /tests/test_api_routes.py

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from app.main import app
from app.services.card_catalog_client import CardCatalogError, get_catalog_client
from app.services.database_service import get_db_service
from app.services.gemini_service import GeminiTextClient, UpstreamGenerationError, get_text_client

PROXY_PAYLOAD = {
    "cardName": "Zeta Card",
    "bankName": "Acme Bank",
    "platform": "facebook",
    "audience": "Family",
    "language": "english",
    "tone": "professional",
    "customPrompt": "",
}


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def override_dependencies(mock_db_service, mock_text_client):
    app.dependency_overrides[get_db_service] = lambda: mock_db_service
    app.dependency_overrides[get_text_client] = lambda: mock_text_client
    return mock_db_service, mock_text_client


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


# --- Content proxy ---

def test_proxy_returns_four_variations(client, mock_text_client):
    app.dependency_overrides[get_text_client] = lambda: mock_text_client

    response = client.post("/functions/generate-content", json=PROXY_PAYLOAD)

    assert response.status_code == 200
    variations = response.json()["variations"]
    assert len(variations) == 4
    assert variations[:2] == ["Great card!", "Try it today."]
    assert variations[2] == "Zeta Card from Acme Bank - Great choice for family!"

def test_proxy_missing_credential_is_fatal(client, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    app.dependency_overrides[get_text_client] = lambda: GeminiTextClient()

    response = client.post("/functions/generate-content", json=PROXY_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Gemini API key not configured"}

def test_proxy_upstream_failure(client):
    failing_client = MagicMock()
    failing_client.generate_text = AsyncMock(side_effect=UpstreamGenerationError("Gemini API error: 429", status_code=429))
    app.dependency_overrides[get_text_client] = lambda: failing_client

    response = client.post("/functions/generate-content", json=PROXY_PAYLOAD)

    assert response.status_code == 502
    assert response.json() == {"error": "Gemini API error: 429"}

def test_proxy_answers_cors_preflight(client):
    response = client.options(
        "/functions/generate-content",
        headers={
            "Origin": "https://marketing.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization, x-client-info, apikey, content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


# --- Card search ---

def test_search_with_empty_query_skips_catalog(client):
    catalog = MagicMock()
    catalog.fetch_cards = AsyncMock()
    app.dependency_overrides[get_catalog_client] = lambda: catalog

    response = client.get("/api/cards/search", params={"q": ""})

    assert response.status_code == 200
    assert response.json() == {"results": []}
    catalog.fetch_cards.assert_not_called()

def test_search_failure_returns_notice(client):
    catalog = MagicMock()
    catalog.fetch_cards = AsyncMock(side_effect=CardCatalogError("timeout"))
    app.dependency_overrides[get_catalog_client] = lambda: catalog

    response = client.get("/api/cards/search", params={"q": "zeta"})

    assert response.status_code == 502
    assert response.json()["detail"] == "Couldn't search cards. Please try again."

def test_search_returns_matches(client):
    catalog = MagicMock()
    catalog.fetch_cards = AsyncMock(return_value=[
        {"id": 11, "card_name": "Zeta Card", "issuing_bank": "Acme Bank", "slug": "zeta-card"},
        {"id": 12, "card_name": "Other", "issuing_bank": "Other Bank", "slug": "other"},
    ])
    app.dependency_overrides[get_catalog_client] = lambda: catalog

    response = client.get("/api/cards/search", params={"q": "ZETA"})

    assert response.json()["results"] == [{
        "id": "11", "card_name": "Zeta Card", "bank_name": "Acme Bank", "slug": "zeta-card",
        "description": None, "rewards_summary": None,
    }]


# --- Generation workflow ---

def test_options_lists_form_choices(client):
    body = client.get("/api/content/options").json()

    assert body["platforms"] == ["whatsapp", "instagram", "telegram", "youtube", "facebook"]
    assert body["languages"] == ["english", "hindi"]
    assert body["custom_prompt_max_length"] == 300

def test_generate_returns_batch(client, override_dependencies, complete_request):
    mock_db_service, _ = override_dependencies

    response = client.post("/api/content/generate", json=complete_request.model_dump(mode="json"))

    assert response.status_code == 201
    body = response.json()
    assert body["input_id"] == "input_1"
    assert [o["variation_number"] for o in body["outputs"]] == [1, 2, 3, 4]
    assert mock_db_service.add_ai_output.call_count == 4

def test_generate_with_incomplete_form_is_rejected(client, override_dependencies):
    mock_db_service, mock_text_client = override_dependencies

    response = client.post("/api/content/generate", json={"platform": "instagram"})

    assert response.status_code == 422
    assert response.json()["detail"] == "Please fill in all required fields."
    assert mock_db_service.method_calls == []
    mock_text_client.generate_text.assert_not_called()

def test_generate_with_unknown_choice_is_rejected(client, override_dependencies, complete_request):
    mock_db_service, mock_text_client = override_dependencies
    payload = complete_request.model_dump(mode="json")
    payload["platform"] = "myspace"

    response = client.post("/api/content/generate", json=payload)

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "platform"]
    assert mock_db_service.method_calls == []
    mock_text_client.generate_text.assert_not_called()

def test_generate_with_unselected_dropdown_gets_validation_notice(client, override_dependencies, complete_request):
    mock_db_service, _ = override_dependencies
    payload = complete_request.model_dump(mode="json")
    payload["audience"] = ""

    response = client.post("/api/content/generate", json=payload)

    assert response.status_code == 422
    assert response.json()["detail"] == "Please fill in all required fields."
    assert mock_db_service.method_calls == []

def test_generate_failure_returns_generic_notice(client, override_dependencies, complete_request):
    _, mock_text_client = override_dependencies
    mock_text_client.generate_text.side_effect = UpstreamGenerationError("Gemini API error: 500", status_code=500)

    response = client.post("/api/content/generate", json=complete_request.model_dump(mode="json"))

    assert response.status_code == 500
    assert response.json()["detail"] == "Couldn't generate content. Please try again."

def test_custom_prompt_longer_than_limit_is_rejected(client, override_dependencies, complete_request):
    payload = complete_request.model_dump(mode="json")
    payload["custom_prompt"] = "x" * 301

    response = client.post("/api/content/generate", json=payload)

    assert response.status_code == 422

def test_regenerate_unknown_input_is_404(client, override_dependencies):
    mock_db_service, _ = override_dependencies
    mock_db_service.get_user_input.return_value = None

    response = client.post("/api/content/inputs/nope/regenerate")

    assert response.status_code == 404

def test_get_generation_unknown_input_is_404(client, override_dependencies):
    mock_db_service, _ = override_dependencies
    mock_db_service.get_user_input.return_value = None

    assert client.get("/api/content/inputs/nope").status_code == 404


# --- Contact ---

def test_contact_submission(client, mock_db_service):
    mock_db_service.add_contact_submission.side_effect = lambda record: SimpleNamespace(id="contact_1", created_at=None, **record)
    app.dependency_overrides[get_db_service] = lambda: mock_db_service

    response = client.post("/api/contact", json={"name": "Asha", "email": "asha@example.com", "message": "Hi"})

    assert response.status_code == 201
    assert response.json()["id"] == "contact_1"

def test_contact_submission_rejects_bad_email(client, mock_db_service):
    app.dependency_overrides[get_db_service] = lambda: mock_db_service

    response = client.post("/api/contact", json={"name": "Asha", "email": "not-an-email", "message": "Hi"})

    assert response.status_code == 422
    mock_db_service.add_contact_submission.assert_not_called()
