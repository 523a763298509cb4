# /app/routers/cards_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import card_model
from ..services import card_service
from ..services.card_catalog_client import CardCatalogClient, CardCatalogError, get_catalog_client

SEARCH_FAILED_NOTICE = "Couldn't search cards. Please try again."

router = APIRouter()

@router.get(
    "/search",
    response_model=card_model.CardSearchResponse,
    summary="Search Credit Cards",
    description="Looks up up to five cards from the external catalog whose name or issuing bank contains the query."
)
async def search_cards(
    q: str = "",
    catalog: CardCatalogClient = Depends(get_catalog_client)
):
    try:
        results = await card_service.search_cards(q, catalog)
    except CardCatalogError as e:
        print(f"ERROR during card search: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=SEARCH_FAILED_NOTICE)
    return card_model.CardSearchResponse(results=results)
