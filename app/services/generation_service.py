# /app/services/generation_service.py

"""
The generation workflow: validate the marketer's selections, record them,
request four variations through the content proxy, record the batch, and hand
it back for display. Each step either succeeds or moves the workflow to FAILED.
Rows written before a failure are left in place.
"""

import time
from enum import Enum
from typing import List, Optional

from ..models.card_model import CardSummary
from ..models.content_model import ContentProxyRequest, GenerationRequest, GenerationResult
from . import card_service, content_proxy, history_service
from .database_service import DatabaseService
from .gemini_service import GeminiTextClient

VALIDATION_NOTICE = "Please fill in all required fields."
FAILURE_NOTICE = "Couldn't generate content. Please try again."

REQUIRED_FIELDS = ("platform", "audience", "language", "tone")


class GenerationState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    RECORDING_INPUT = "recording_input"
    REQUESTING_CONTENT = "requesting_content"
    RECORDING_OUTPUTS = "recording_outputs"
    DISPLAYING = "displaying"
    FAILED = "failed"


class GenerationValidationError(ValueError):
    """The form is incomplete. Nothing has been written or requested."""


class GenerationFailedError(RuntimeError):
    """A network or database step failed. Carries the generic user notice."""


class GenerationWorkflow:
    def __init__(self, db: DatabaseService, text_client: GeminiTextClient):
        self.db = db
        self.text_client = text_client
        self.state = GenerationState.IDLE

    async def run(self, request: GenerationRequest) -> GenerationResult:
        self.state = GenerationState.VALIDATING
        self._validate(request)

        self.state = GenerationState.RECORDING_INPUT
        card, user_input = self._record_input(request)

        self.state = GenerationState.REQUESTING_CONTENT
        variations = await self._request_content(request, card, user_input.id)

        self.state = GenerationState.RECORDING_OUTPUTS
        outputs = self._record_outputs(user_input.id, variations)

        self.state = GenerationState.DISPLAYING
        return history_service.to_generation_result(user_input, outputs, card=card)

    # --- Workflow Steps ---
    def _validate(self, request: GenerationRequest):
        missing = [field for field in REQUIRED_FIELDS if not getattr(request, field)]
        if request.card is None or not request.card.card_name.strip():
            missing.insert(0, "card")
        if missing:
            print(f"WARNING: Generation blocked, missing fields: {', '.join(missing)}")
            self.state = GenerationState.IDLE
            raise GenerationValidationError(VALIDATION_NOTICE)

    def _record_input(self, request: GenerationRequest):
        try:
            card = card_service.cache_card(self.db, request.card)
            user_input = self.db.add_user_input({
                "card_id": card.id,
                "platform": request.platform.value,
                "audience": request.audience.value,
                "language": request.language.value,
                "tone": request.tone.value,
                "custom_prompt": (request.custom_prompt or "").strip() or None,
            })
        except Exception as e:
            raise self._failure("recording user input", e) from e
        return card, user_input

    async def _request_content(self, request: GenerationRequest, card, input_id: str) -> List[str]:
        proxy_request = ContentProxyRequest(
            cardName=card.card_name,
            bankName=card.bank_name,
            platform=request.platform.value,
            audience=request.audience.value,
            language=request.language.value,
            tone=request.tone.value,
            customPrompt=(request.custom_prompt or "").strip() or None,
        )
        started = time.perf_counter()
        try:
            variations = await content_proxy.generate_variations(proxy_request, self.text_client)
        except Exception as e:
            self._log_generation(input_id, proxy_request, started, error=e)
            raise self._failure("requesting content", e) from e
        self._log_generation(input_id, proxy_request, started)
        return variations

    def _record_outputs(self, input_id: str, variations: List[str]) -> List:
        outputs = []
        try:
            for index, content in enumerate(variations, start=1):
                outputs.append(self.db.add_ai_output({
                    "input_id": input_id,
                    "variation_number": index,
                    "content_variation": content,
                }))
        except Exception as e:
            raise self._failure("recording outputs", e) from e
        return outputs

    # --- Helpers ---
    def _log_generation(self, input_id: str, proxy_request: ContentProxyRequest, started: float, error: Optional[Exception] = None):
        log_record = {
            "input_id": input_id,
            "prompt_sent": content_proxy.build_prompt(proxy_request),
            "status": "failed" if error else "success",
            "error_message": str(error) if error else None,
            "response_time_ms": int((time.perf_counter() - started) * 1000),
        }
        try:
            self.db.add_generation_log(log_record)
        except Exception as e:
            # The log row is bookkeeping; losing it must not change the outcome of the request.
            print(f"WARNING: Could not write generation log for input {input_id}: {e}")
            self.db.rollback()

    def _failure(self, step: str, error: Exception) -> GenerationFailedError:
        self.state = GenerationState.FAILED
        print(f"ERROR while {step}: {error}")
        try:
            self.db.rollback()
        except Exception as rollback_error:
            print(f"WARNING: Rollback after failed {step} also failed: {rollback_error}")
        return GenerationFailedError(FAILURE_NOTICE)


# --- Public Service Functions ---
async def generate_content(db: DatabaseService, text_client: GeminiTextClient, request: GenerationRequest) -> GenerationResult:
    return await GenerationWorkflow(db, text_client).run(request)


def build_request_from_input(db: DatabaseService, input_id: str) -> Optional[GenerationRequest]:
    """Recovers the field values captured by an earlier generation request."""
    user_input = db.get_user_input(input_id)
    if not user_input:
        return None
    card = db.get_cached_card(user_input.card_id) if user_input.card_id else None
    return GenerationRequest(
        card=CardSummary.model_validate(card) if card else None,
        platform=user_input.platform,
        audience=user_input.audience,
        language=user_input.language,
        tone=user_input.tone,
        custom_prompt=user_input.custom_prompt,
    )


async def regenerate_content(db: DatabaseService, text_client: GeminiTextClient, input_id: str) -> Optional[GenerationResult]:
    """
    Re-runs the whole workflow with the captured values of an earlier request.
    The result is a new input row and a new batch; the earlier batch is untouched.
    Returns None when the input does not exist.
    """
    request = build_request_from_input(db, input_id)
    if request is None:
        return None
    return await generate_content(db, text_client, request)
