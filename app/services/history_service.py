# /app/services/history_service.py

from typing import List, Optional

from .database_service import DatabaseService
from ..models.card_model import CardSummary
from ..models.content_model import AIOutputRecord, GenerationResult, HistoryResponse


def to_generation_result(user_input, outputs: List, card=None) -> GenerationResult:
    """
    Assembles the API view of one generation request from its stored input row,
    its output rows and (optionally) the cached card it was made for.
    """
    card = card if card is not None else getattr(user_input, "card", None)
    ordered_outputs = sorted(outputs, key=lambda output: output.variation_number)
    return GenerationResult(
        input_id=user_input.id,
        card=CardSummary.model_validate(card) if card is not None else None,
        platform=user_input.platform,
        audience=user_input.audience,
        language=user_input.language,
        tone=user_input.tone,
        custom_prompt=user_input.custom_prompt,
        created_at=getattr(user_input, "created_at", None),
        outputs=[AIOutputRecord.model_validate(output) for output in ordered_outputs],
    )


def get_generation(db: DatabaseService, input_id: str) -> Optional[GenerationResult]:
    user_input = db.get_user_input(input_id)
    if not user_input:
        return None
    return to_generation_result(user_input, db.get_outputs_for_input(input_id))


def get_history(db: DatabaseService, search: Optional[str] = None, limit: int = 50) -> HistoryResponse:
    """
    Lists recent generation requests with their batches, newest first. The
    optional search matches the card name or any generated variation.
    """
    processed_records = []
    for user_input in db.get_recent_user_inputs(limit):
        try:
            processed_records.append(to_generation_result(user_input, db.get_outputs_for_input(user_input.id)))
        except Exception as e:
            print(f"Skipping corrupted history record: {getattr(user_input, 'id', 'N/A')}. Error: {e}")
            continue

    filtered_results = processed_records
    if search:
        search_lower = search.lower()
        filtered_results = [
            r for r in filtered_results
            if (r.card and search_lower in r.card.card_name.lower())
            or any(search_lower in o.content_variation.lower() for o in r.outputs)
        ]

    return HistoryResponse(results=filtered_results, total=len(filtered_results))
