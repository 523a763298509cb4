# /app/services/database_helpers/card_repository_sql.py

from typing import Dict, Optional
from sqlalchemy.orm import Session
from app.db.models.card_models import CardCache


class CardRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_card_by_id(self, card_id: str) -> Optional[CardCache]:
        return self.db.query(CardCache).filter(CardCache.id == card_id).first()

    def get_card_by_slug(self, slug: str) -> Optional[CardCache]:
        return self.db.query(CardCache).filter(CardCache.slug == slug).first()

    def upsert_card(self, record: Dict) -> CardCache:
        """
        Inserts a card keyed by its slug, or refreshes the descriptive fields of
        the existing row so the cache follows the upstream catalog.
        """
        card = self.get_card_by_slug(record["slug"])
        if card:
            for key, value in record.items():
                if key != "id":
                    setattr(card, key, value)
        else:
            card = CardCache(**record)
            self.db.add(card)
        self.db.commit()
        self.db.refresh(card)
        return card
