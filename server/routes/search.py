"""Search endpoints: run a query and move between result pages."""

from fastapi import APIRouter, Depends, HTTPException, status

from orchestrator.core import SearchOrchestrator
from server.dependencies import get_api_key, get_orchestrator
from server.schemas.requests import SearchRequest
from server.schemas.responses import SearchResponseDTO
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/v1/search", tags=["Search"])


def _require_active_query(orchestrator: SearchOrchestrator) -> None:
    if not orchestrator.active_query:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="No active search. Run a search first."
        )


@router.post("", response_model=SearchResponseDTO)
async def search(
    body: SearchRequest,
    _api_key=Depends(get_api_key),
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """
    Search for a query. A query other than the active one starts a new search.

    Provider failures are not errors here: they come back as an empty result list.
    """
    if body.query != orchestrator.active_query:
        logger.info("Starting new search", extra={"extra_fields": {"query": body.query}})
        orchestrator.pagination.start_new_search(body.query)

    search_page = await orchestrator.load_page(body.page)
    return SearchResponseDTO.from_search_page(search_page)


@router.post("/next", response_model=SearchResponseDTO)
async def next_page(
    _api_key=Depends(get_api_key),
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    _require_active_query(orchestrator)
    return SearchResponseDTO.from_search_page(await orchestrator.next_page())


@router.post("/previous", response_model=SearchResponseDTO)
async def previous_page(
    _api_key=Depends(get_api_key),
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    _require_active_query(orchestrator)
    return SearchResponseDTO.from_search_page(await orchestrator.previous_page())
