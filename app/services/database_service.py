# /app/services/database_service.py

from typing import List, Dict, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.card_repository_sql import CardRepositorySQL
from .database_helpers.content_repository_sql import ContentRepositorySQL
from .database_helpers.contact_repository_sql import ContactRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Initializes the DatabaseService facade over the SQL repositories.
        All repositories share the one session so a request sees its own writes.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.session = db_session
        self.card_repo = CardRepositorySQL(db_session)
        self.content_repo = ContentRepositorySQL(db_session)
        self.contact_repo = ContactRepositorySQL(db_session)

    # --- CARD CACHE METHODS (DELEGATED) ---
    def get_cached_card(self, card_id: str): return self.card_repo.get_card_by_id(card_id)
    def upsert_cached_card(self, card_record: Dict): return self.card_repo.upsert_card(card_record)

    # --- USER INPUT & AI OUTPUT METHODS (DELEGATED) ---
    def add_user_input(self, input_record: Dict): return self.content_repo.add_user_input(input_record)
    def get_user_input(self, input_id: str): return self.content_repo.get_user_input_by_id(input_id)
    def get_recent_user_inputs(self, limit: int = 50) -> List: return self.content_repo.get_recent_user_inputs(limit)
    def add_ai_output(self, output_record: Dict): return self.content_repo.add_ai_output(output_record)
    def get_outputs_for_input(self, input_id: str) -> List: return self.content_repo.get_outputs_by_input_id(input_id)

    # --- GENERATION LOG METHODS (DELEGATED) ---
    def add_generation_log(self, log_record: Dict): return self.content_repo.add_generation_log(log_record)
    def get_generation_logs(self, input_id: str) -> List: return self.content_repo.get_logs_by_input_id(input_id)

    # --- CONTACT METHODS (DELEGATED) ---
    def add_contact_submission(self, submission_record: Dict): return self.contact_repo.add_submission(submission_record)

    def rollback(self):
        """Discards a failed, uncommitted write so the session can be used again."""
        self.session.rollback()


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService instance bound to the
    request's SQLAlchemy session.
    """
    yield DatabaseService(db_session=db)
