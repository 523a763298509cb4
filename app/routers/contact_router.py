# /app/routers/contact_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import contact_model
from ..services import contact_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

@router.post(
    "",  # Maps to /api/contact
    response_model=contact_model.ContactRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Submit the Contact Form"
)
def submit_contact(
    payload: contact_model.ContactCreate,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return contact_service.submit_contact(db=db, payload=payload)
    except Exception as e:
        print(f"ERROR saving contact submission: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while saving your message."
        )
