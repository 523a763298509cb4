# /tests/conftest.py

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from app.models.card_model import CardSummary
from app.models.content_model import GenerationRequest

TWO_ITEM_ANSWER = "1. Great card! 2. Try it today."


@pytest.fixture
def mock_db_service():
    """
    A MagicMock standing in for DatabaseService. Inserts echo their record back
    as an object with a predictable id, the way the SQL repositories return
    freshly refreshed rows.
    """
    db = MagicMock()
    db.upsert_cached_card.side_effect = lambda record: SimpleNamespace(id="card_1", **record)
    db.add_user_input.side_effect = lambda record: SimpleNamespace(
        id=f"input_{db.add_user_input.call_count}", created_at=None, **record
    )
    db.add_ai_output.side_effect = lambda record: SimpleNamespace(
        id=f"out_{record['input_id']}_{record['variation_number']}", created_at=None, **record
    )
    return db


@pytest.fixture
def mock_text_client():
    """A text-generation client whose model always answers with two numbered items."""
    client = MagicMock()
    client.generate_text = AsyncMock(return_value=TWO_ITEM_ANSWER)
    return client


@pytest.fixture
def selected_card():
    return CardSummary(id="987", card_name="Zeta Card", bank_name="Acme Bank", slug="zeta-card")


@pytest.fixture
def complete_request(selected_card):
    return GenerationRequest(
        card=selected_card,
        platform="instagram",
        audience="friends",
        language="english",
        tone="exciting",
        custom_prompt="Highlight lounge access.",
    )
