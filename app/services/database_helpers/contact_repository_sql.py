# /app/services/database_helpers/contact_repository_sql.py

from typing import Dict
from sqlalchemy.orm import Session
from app.db.models.contact_models import ContactSubmission


class ContactRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_submission(self, record: Dict) -> ContactSubmission:
        new_submission = ContactSubmission(**record)
        self.db.add(new_submission)
        self.db.commit()
        self.db.refresh(new_submission)
        return new_submission
