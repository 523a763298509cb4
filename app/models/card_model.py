# /app/models/card_model.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class CardSummary(BaseModel):
    """
    A credit card as the rest of the application sees it. Built either from an
    external catalog entry (where `bank_name` comes from `issuing_bank`) or from
    a `cards_cache` row.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = Field(None, description="Catalog or cache identifier of the card.")
    card_name: str
    bank_name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    rewards_summary: Optional[str] = None


class CardSearchResponse(BaseModel):
    results: List[CardSummary]
