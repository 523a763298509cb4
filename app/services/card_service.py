# /app/services/card_service.py

import re
from typing import Any, Dict, List, Optional

from ..models.card_model import CardSummary
from ..db.models.card_models import CardCache
from .card_catalog_client import CardCatalogClient
from .database_service import DatabaseService

MAX_SEARCH_RESULTS = 5


# --- Helper Functions ---
def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""

def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)

def _matches(card: Dict[str, Any], needle: str) -> bool:
    return needle in _text(card.get("card_name")).lower() or needle in _text(card.get("issuing_bank")).lower()

def _to_summary(card: Dict[str, Any]) -> CardSummary:
    """Maps a raw catalog entry onto our card contract."""
    return CardSummary(
        id=_optional_text(card.get("id")),
        card_name=_text(card.get("card_name")),
        bank_name=_text(card.get("issuing_bank")),
        slug=_optional_text(card.get("slug")),
        description=_optional_text(card.get("description")),
        rewards_summary=_optional_text(card.get("rewards_summary")),
    )

def derive_slug(card_name: str, bank_name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", f"{card_name} {bank_name}".lower()).strip("-")


# --- Public Service Functions ---
async def search_cards(query: str, catalog: CardCatalogClient) -> List[CardSummary]:
    """
    Looks up cards whose name or issuing bank contains the query,
    case-insensitively, capped at five results in catalog order. A blank query
    short-circuits without touching the network. CardCatalogError propagates.
    """
    if not (query or "").strip():
        return []

    # Surrounding whitespace is part of the substring the user typed.
    needle = query.lower()
    cards = await catalog.fetch_cards()
    matches = [card for card in cards if isinstance(card, dict) and _matches(card, needle)]
    return [_to_summary(card) for card in matches[:MAX_SEARCH_RESULTS]]


def cache_card(db: DatabaseService, card: CardSummary) -> CardCache:
    """Upserts the selected card into `cards_cache` and returns the stored row."""
    card_record = {
        "card_name": card.card_name,
        "bank_name": card.bank_name,
        "slug": card.slug or derive_slug(card.card_name, card.bank_name),
        "description": card.description,
        "rewards_summary": card.rewards_summary,
    }
    return db.upsert_cached_card(card_record)
