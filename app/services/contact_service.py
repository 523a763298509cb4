# /app/services/contact_service.py

from .database_service import DatabaseService
from ..models.contact_model import ContactCreate, ContactRecord


def submit_contact(db: DatabaseService, payload: ContactCreate) -> ContactRecord:
    """Stores a contact-form submission. A blank phone number is stored as NULL."""
    record = payload.model_dump()
    record["phone"] = (record.get("phone") or "").strip() or None
    new_submission = db.add_contact_submission(record)
    return ContactRecord.model_validate(new_submission)
