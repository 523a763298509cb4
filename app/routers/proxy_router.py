# /app/routers/proxy_router.py

"""
The content-generation function exposed to browsers. Unlike the other routers
it answers failures with an `{"error": ...}` body rather than FastAPI's
`{"detail": ...}`, because that is the contract its callers parse.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..models import content_model
from ..services import content_proxy
from ..services.gemini_service import (
    GeminiTextClient,
    MissingCredentialError,
    UpstreamGenerationError,
    get_text_client,
)

router = APIRouter()

@router.post(
    "/generate-content",
    response_model=content_model.ContentProxyResponse,
    summary="Generate Content Variations",
    description="Builds the prompt, calls Gemini and returns exactly four variations.",
    responses={
        500: {"description": "Credential missing or unexpected failure"},
        502: {"description": "Gemini answered with a non-success status"},
    }
)
async def generate_content(
    request: content_model.ContentProxyRequest,
    text_client: GeminiTextClient = Depends(get_text_client)
):
    try:
        variations = await content_proxy.generate_variations(request, text_client)
    except MissingCredentialError as e:
        print(f"ERROR in generate-content function: {e}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(e)})
    except UpstreamGenerationError as e:
        print(f"ERROR in generate-content function: {e}")
        return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"error": str(e)})
    except Exception as e:
        print(f"ERROR in generate-content function: {e}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(e)})

    return content_model.ContentProxyResponse(variations=variations)
