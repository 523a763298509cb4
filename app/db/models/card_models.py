# /app/db/models/card_models.py

"""
SQLAlchemy model for the local copy of credit cards pulled from the external
card catalog. The catalog stays authoritative; rows here exist so that user
inputs can reference the card they were generated for.
"""

import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class CardCache(Base):
    __tablename__ = "cards_cache"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    card_name = Column(String, nullable=False)
    bank_name = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    description = Column(String, nullable=True)
    rewards_summary = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    inputs = relationship("UserInput", back_populates="card")
