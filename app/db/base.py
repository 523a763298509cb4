# /app/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic runs its auto-generation scan and when tables are created on startup.

from .base_class import Base

from .models.card_models import CardCache
from .models.content_models import UserInput, AIOutput, GenerationLog
from .models.contact_models import ContactSubmission
