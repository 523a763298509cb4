# /app/routers/content_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from typing import Optional

from ..models import content_model
from ..services import generation_service, history_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.gemini_service import GeminiTextClient, get_text_client

router = APIRouter()

@router.get(
    "/options",
    response_model=content_model.FormOptions,
    summary="Get Form Options",
    description="The platform, audience, language and tone choices offered by the generation form."
)
def get_form_options():
    return content_model.FormOptions(
        platforms=[p.value for p in content_model.Platform],
        audiences=[a.value for a in content_model.Audience],
        languages=[lang.value for lang in content_model.Language],
        tones=[t.value for t in content_model.Tone],
    )


@router.post(
    "/generate",
    response_model=content_model.GenerationResult,
    status_code=status.HTTP_201_CREATED,
    summary="Generate Promotional Content",
    description="Records the selections, requests four variations from the content proxy and records the batch."
)
async def generate_content(
    request: content_model.GenerationRequest,
    db: DatabaseService = Depends(get_db_service),
    text_client: GeminiTextClient = Depends(get_text_client)
):
    try:
        return await generation_service.generate_content(db, text_client, request)
    except generation_service.GenerationValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except generation_service.GenerationFailedError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post(
    "/inputs/{input_id}/regenerate",
    response_model=content_model.GenerationResult,
    status_code=status.HTTP_201_CREATED,
    summary="Regenerate Promotional Content",
    description="Runs the generation again with the values captured by an earlier request, producing a new batch.",
    responses={404: {"description": "Input record not found"}}
)
async def regenerate_content(
    input_id: str,
    db: DatabaseService = Depends(get_db_service),
    text_client: GeminiTextClient = Depends(get_text_client)
):
    try:
        result = await generation_service.regenerate_content(db, text_client, input_id)
    except generation_service.GenerationValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except generation_service.GenerationFailedError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Input record with ID {input_id} not found.",
        )
    return result


@router.get(
    "/inputs/{input_id}",
    response_model=content_model.GenerationResult,
    summary="Get a Generation",
    responses={404: {"description": "Input record not found"}}
)
def get_generation(
    input_id: str,
    db: DatabaseService = Depends(get_db_service)
):
    result = history_service.get_generation(db, input_id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Input record with ID {input_id} not found.",
        )
    return result


@router.get(
    "/history",
    response_model=content_model.HistoryResponse,
    summary="Get Generation History"
)
def get_history(
    search: Optional[str] = None,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return history_service.get_history(db=db, search=search)
    except Exception as e:
        print(f"ERROR fetching generation history: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching the generation history."
        )
