# /app/services/card_catalog_client.py

import os
from dotenv import load_dotenv
from typing import Any, Dict, List, Optional
import httpx

# --- CONFIGURATION ---
load_dotenv()
CARD_CATALOG_URL = os.getenv("CARD_CATALOG_URL", "https://bk-api.bankkaro.com/sp/api/cards")
CARD_CATALOG_TIMEOUT = float(os.getenv("CARD_CATALOG_TIMEOUT", "15"))

# The catalog is always queried unfiltered; matching happens locally.
CATALOG_QUERY_PAYLOAD: Dict[str, Any] = {
    "slug": "",
    "banks_ids": [],
    "card_networks": [],
    "annualFees": "",
    "credit_score": "",
    "sort_by": "",
    "free_cards": "",
    "eligiblityPayload": {},
    "cardGeniusPayload": {},
}


class CardCatalogError(RuntimeError):
    """Raised when the external card catalog cannot be reached or parsed."""


class CardCatalogClient:
    """Narrow adapter over the external card catalog HTTP endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url or CARD_CATALOG_URL
        self.timeout = timeout if timeout is not None else CARD_CATALOG_TIMEOUT
        self.transport = transport

    async def fetch_cards(self) -> List[Dict[str, Any]]:
        """Returns the raw card objects listed under the response's `data` key."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.url, json=CATALOG_QUERY_PAYLOAD)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            raise CardCatalogError(f"Card catalog request failed: {e}") from e
        except ValueError as e:
            raise CardCatalogError(f"Card catalog returned invalid JSON: {e}") from e

        cards = payload.get("data") if isinstance(payload, dict) else None
        if cards is None:
            return []
        if not isinstance(cards, list):
            raise CardCatalogError("Card catalog response 'data' is not a list.")
        return cards


# --- FastAPI dependency ---
def get_catalog_client() -> CardCatalogClient:
    return CardCatalogClient()
