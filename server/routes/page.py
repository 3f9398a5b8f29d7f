"""Generated page endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from models.search import PageOutcome
from orchestrator.core import SearchOrchestrator
from server.dependencies import get_api_key, get_orchestrator
from server.schemas.requests import PageRequest
from server.schemas.responses import ErrorDTO, GeneratedPageDTO, PageResponseDTO
from utils.page_renderer import SANDBOX_CSP, compose_document

router = APIRouter(prefix="/v1/page", tags=["Page"])


async def _open(body: PageRequest, orchestrator: SearchOrchestrator) -> PageOutcome:
    original_query = body.original_query
    if original_query is None:
        original_query = orchestrator.active_query

    outcome = await orchestrator.open_result(body.result.to_result(), original_query)
    if not outcome.is_available:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=ErrorDTO(
                code="generation_failed",
                message=outcome.error or "Page generation failed",
            ).model_dump(),
        )
    return outcome


@router.post("", response_model=PageResponseDTO)
async def open_result(
    body: PageRequest,
    _api_key=Depends(get_api_key),
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """
    Generate (or fetch from cache) the page behind a search result.

    Returns 502 with code ``generation_failed`` when no page could be produced.
    """
    outcome = await _open(body, orchestrator)
    return PageResponseDTO(page=GeneratedPageDTO.from_page(outcome.page), cached=outcome.cached)


@router.post("/render", response_class=HTMLResponse)
async def render_result(
    body: PageRequest,
    _api_key=Depends(get_api_key),
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """Same as ``POST /v1/page`` but returns the composed document, scripts disabled."""
    outcome = await _open(body, orchestrator)
    return HTMLResponse(
        content=compose_document(outcome.page),
        headers={"Content-Security-Policy": SANDBOX_CSP},
    )
