# /app/models/content_model.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime
from enum import Enum

from .card_model import CardSummary

VARIATION_COUNT = 4
CUSTOM_PROMPT_MAX_LENGTH = 300


# --- Form Choices ---
class Platform(str, Enum):
    WHATSAPP = "whatsapp"
    INSTAGRAM = "instagram"
    TELEGRAM = "telegram"
    YOUTUBE = "youtube"
    FACEBOOK = "facebook"

class Audience(str, Enum):
    FRIENDS = "friends"
    FAMILY = "family"
    FOLLOWERS = "followers"
    COLLEAGUES = "colleagues"
    PEERS = "peers"

class Language(str, Enum):
    ENGLISH = "english"
    HINDI = "hindi"

class Tone(str, Enum):
    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"
    FUNNY = "funny"
    EXCITING = "exciting"
    QUIRKY = "quirky"


class FormOptions(BaseModel):
    platforms: List[str]
    audiences: List[str]
    languages: List[str]
    tones: List[str]
    custom_prompt_max_length: int = CUSTOM_PROMPT_MAX_LENGTH


# --- Generation Workflow Contracts ---
class GenerationRequest(BaseModel):
    """
    The marketer's selections. Every field is optional at the schema level so
    that a partially filled form reaches the workflow and is rejected there
    with a validation notice instead of a schema error. A value outside the
    offered choices is a schema error.
    """
    card: Optional[CardSummary] = None
    platform: Optional[Platform] = None
    audience: Optional[Audience] = None
    language: Optional[Language] = None
    tone: Optional[Tone] = None
    custom_prompt: Optional[str] = Field(None, max_length=CUSTOM_PROMPT_MAX_LENGTH)

    @field_validator("platform", "audience", "language", "tone", mode="before")
    @classmethod
    def blank_choice_is_unset(cls, v):
        # An unselected dropdown posts "". It must reach the workflow as missing, not as an invalid choice.
        if isinstance(v, str) and not v.strip():
            return None
        return v


class AIOutputRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    input_id: Optional[str] = None
    variation_number: int
    content_variation: str
    created_at: Optional[datetime] = None


class GenerationResult(BaseModel):
    """A single generation request together with its batch of variations."""
    model_config = ConfigDict(from_attributes=True)

    input_id: str
    card: Optional[CardSummary] = None
    platform: str
    audience: str
    language: str
    tone: str
    custom_prompt: Optional[str] = None
    created_at: Optional[datetime] = None
    outputs: List[AIOutputRecord]


class HistoryResponse(BaseModel):
    results: List[GenerationResult]
    total: int


# --- Content Proxy Contracts ---
class ContentProxyRequest(BaseModel):
    """Wire shape accepted by the content-generation function."""
    cardName: str
    bankName: str
    platform: str
    audience: str
    language: str
    tone: str
    customPrompt: Optional[str] = None


class ContentProxyResponse(BaseModel):
    variations: List[str]
