"""Pydantic response models (DTOs) for FastAPI endpoints."""

from pydantic import BaseModel, Field

from config.api_settings import ApiSettings
from models.search import GeneratedPage, PaginationData, SearchPage, SearchResult
from server.utils import api_key_hint


class ErrorDTO(BaseModel):
    code: str
    message: str


class SearchResultDTO(BaseModel):
    title: str
    description: str
    url: str

    @classmethod
    def from_result(cls, result: SearchResult):
        return cls(title=result.title, description=result.description, url=result.url)


class PaginationDTO(BaseModel):
    current_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_pagination(cls, pagination: PaginationData):
        return cls(
            current_page=pagination.current_page,
            total_pages=pagination.total_pages,
            has_next_page=pagination.has_next_page,
            has_previous_page=pagination.has_previous_page,
        )


class SearchResponseDTO(BaseModel):
    query: str
    results: list[SearchResultDTO] = Field(default_factory=list)
    pagination: PaginationDTO

    @classmethod
    def from_search_page(cls, search_page: SearchPage):
        return cls(
            query=search_page.query,
            results=[SearchResultDTO.from_result(r) for r in search_page.results],
            pagination=PaginationDTO.from_pagination(search_page.pagination),
        )


class GeneratedPageDTO(BaseModel):
    html: str
    css: str
    title: str
    url: str

    @classmethod
    def from_page(cls, page: GeneratedPage):
        return cls(**page.to_dict())


class PageResponseDTO(BaseModel):
    page: GeneratedPageDTO
    cached: bool = False


class ProviderSettingsDTO(BaseModel):
    configured: bool
    model: str
    api_key_hint: str | None = None


class SettingsResponseDTO(BaseModel):
    providers: dict[str, ProviderSettingsDTO]
    current_provider: str
    active_provider: str | None
    has_valid_configuration: bool

    @classmethod
    def from_settings(cls, settings: ApiSettings):
        return cls(
            providers={
                name: ProviderSettingsDTO(
                    configured=creds.is_configured,
                    model=creds.model,
                    api_key_hint=api_key_hint(creds.api_key),
                )
                for name, creds in settings.providers.items()
            },
            current_provider=settings.current_provider,
            active_provider=settings.best_provider(),
            has_valid_configuration=settings.has_valid_configuration(),
        )


class HealthResponseDTO(BaseModel):
    status: str
    timestamp: str
    version: str
