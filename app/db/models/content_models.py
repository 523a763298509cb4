# /app/db/models/content_models.py

"""
SQLAlchemy models for a generation request (`UserInput`), the batch of four
variations produced for it (`AIOutput`), and the per-request log of calls made
to the generative API (`GenerationLog`).
"""

import uuid

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class UserInput(Base):
    __tablename__ = "user_inputs"

    id = Column(String, primary_key=True, index=True, default=_new_id)
    card_id = Column(String, ForeignKey("cards_cache.id"), nullable=True, index=True)
    platform = Column(String, nullable=False)
    audience = Column(String, nullable=False)
    language = Column(String, nullable=False)
    tone = Column(String, nullable=False)
    custom_prompt = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    card = relationship("CardCache", back_populates="inputs")
    # Rows are never deleted or updated once written, so no cascade is configured.
    outputs = relationship("AIOutput", back_populates="user_input", order_by="AIOutput.variation_number")
    logs = relationship("GenerationLog", back_populates="user_input")


class AIOutput(Base):
    __tablename__ = "ai_outputs"

    id = Column(String, primary_key=True, index=True, default=_new_id)
    input_id = Column(String, ForeignKey("user_inputs.id"), nullable=True, index=True)
    variation_number = Column(Integer, nullable=False)
    content_variation = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user_input = relationship("UserInput", back_populates="outputs")


class GenerationLog(Base):
    __tablename__ = "generation_logs"

    id = Column(String, primary_key=True, index=True, default=_new_id)
    input_id = Column(String, ForeignKey("user_inputs.id"), nullable=True, index=True)
    prompt_sent = Column(String, nullable=False)
    status = Column(String, nullable=False)  # 'success' or 'failed'
    error_message = Column(String, nullable=True)
    response_time_ms = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user_input = relationship("UserInput", back_populates="logs")
