"""
Search orchestration: caches in front of the provider gateway and extractor.

One SearchOrchestrator is one browsing session. It owns its result cache,
page cache and pagination state; nothing is shared through module globals.
"""

from collections.abc import Callable

from api.gateway import ProviderGateway
from config.api_settings import ApiConfig, ApiSettings
from models.errors import ConfigError, SearchEngineError
from models.search import (
    PageOutcome,
    PaginationData,
    ResultPageRequest,
    SearchPage,
    SearchResult,
)
from orchestrator.cache import PageCache, ResultCache
from orchestrator.pagination import PaginationController
from orchestrator.response_extractor import extract_page, extract_results
from utils.logger import get_logger

logger = get_logger(__name__)


class SearchOrchestrator:
    """
    Composes caches, gateway and extractor for each user action.

    Search failures degrade to an empty result list. Page failures degrade
    to a PageOutcome without a page so the caller can show an error view.
    Concurrent calls are not coordinated: whichever finishes last writes its
    cache entry last.
    """

    def __init__(
        self,
        settings_provider: Callable[[], ApiSettings],
        gateway: ProviderGateway | None = None,
        result_cache: ResultCache | None = None,
        page_cache: PageCache | None = None,
        pagination: PaginationController | None = None,
    ):
        """
        Args:
            settings_provider: Returns the current settings snapshot; called
                once per provider request
            gateway: Provider gateway (default: built from the app config)
            result_cache: Cache for result pages
            page_cache: Cache for generated pages
            pagination: Active query/page state
        """
        self._settings_provider = settings_provider
        self.gateway = gateway or ProviderGateway()
        self.result_cache = result_cache or ResultCache()
        self.page_cache = page_cache or PageCache()
        self.pagination = pagination or PaginationController()

    def _api_config(self) -> ApiConfig:
        api_config = self._settings_provider().api_config()
        if api_config is None:
            raise ConfigError(
                "API configuration not available. Please configure your API settings."
            )
        return api_config

    async def search(self, query: str, page: int) -> tuple[SearchResult, ...]:
        """
        Results for ``query`` at ``page``, served from cache when possible.

        Every call for a cached pair returns the same stored tuple.

        Returns:
            The extracted results, or an empty tuple if the provider call failed
        """
        cached = self.result_cache.get_results(query, page)
        if cached is not None:
            logger.info(
                "Search results served from cache",
                extra={"extra_fields": {"query": query, "page": page}},
            )
            return cached

        try:
            api_config = self._api_config()
            completion = await self.gateway.fetch_results(api_config, query, page)
        except SearchEngineError as e:
            logger.error(
                f"Search error: {e.message}",
                extra={
                    "extra_fields": {
                        "query": query,
                        "page": page,
                        "error_code": e.code,
                        "status_code": getattr(e, "status_code", None),
                    }
                },
            )
            return ()

        results = extract_results(completion, query, page)
        return self.result_cache.put_results(query, page, results)

    async def open_result(self, result: SearchResult, original_query: str) -> PageOutcome:
        """
        Generated page for a clicked result, served from cache when possible.

        Returns:
            PageOutcome with ``page`` set, or with ``page=None`` and ``error``
            describing why no page is available
        """
        request = ResultPageRequest(result=result, original_query=original_query)
        cached = self.page_cache.get_page(request)
        if cached is not None:
            logger.info(
                "Generated page served from cache",
                extra={"extra_fields": {"title": result.title, "url": result.url}},
            )
            return PageOutcome(page=cached, cached=True)

        try:
            api_config = self._api_config()
            completion = await self.gateway.generate_page(api_config, request)
            page = extract_page(completion)
        except SearchEngineError as e:
            logger.error(
                f"Page generation error: {e.message}",
                extra={
                    "extra_fields": {
                        "title": result.title,
                        "url": result.url,
                        "error_code": e.code,
                        "missing_fields": getattr(e, "missing_fields", None),
                    }
                },
            )
            return PageOutcome(page=None, error=e.message)

        self.page_cache.put_page(request, page)
        return PageOutcome(page=page)

    def clear_results(self) -> None:
        """Drop cached result pages and return to page 1 of the active query."""
        self.result_cache.clear()
        self.pagination.reset_page()

    @property
    def active_query(self) -> str:
        return self.pagination.active_query

    @property
    def active_page(self) -> int:
        return self.pagination.active_page

    def pagination_data(self) -> PaginationData:
        return self.pagination.pagination_data(self.pagination.active_page)

    async def _load_active_page(self) -> SearchPage:
        query = self.pagination.active_query
        page = self.pagination.active_page
        results = await self.search(query, page)
        return SearchPage(
            query=query, results=results, pagination=self.pagination.pagination_data(page)
        )

    async def new_search(self, query: str) -> SearchPage:
        self.pagination.start_new_search(query)
        return await self._load_active_page()

    async def load_page(self, page: int) -> SearchPage:
        self.pagination.go_to_page(page)
        return await self._load_active_page()

    async def next_page(self) -> SearchPage:
        self.pagination.next_page()
        return await self._load_active_page()

    async def previous_page(self) -> SearchPage:
        self.pagination.previous_page()
        return await self._load_active_page()
