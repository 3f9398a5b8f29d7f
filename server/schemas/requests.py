"""Pydantic request models for FastAPI endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from models.search import SearchResult

PROVIDER_PATTERN = "^(openrouter|openai)$"


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    page: int = Field(1, ge=1)


class SearchResultRequest(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)

    def to_result(self) -> SearchResult:
        return SearchResult(title=self.title, description=self.description, url=self.url)


class PageRequest(BaseModel):
    result: SearchResultRequest
    # Defaults to the active query
    original_query: Optional[str] = None


class ProviderSettingsRequest(BaseModel):
    api_key: Optional[str] = None
    model: Optional[str] = None


class SettingsUpdateRequest(BaseModel):
    openrouter: Optional[ProviderSettingsRequest] = None
    openai: Optional[ProviderSettingsRequest] = None


class ProviderChangeRequest(BaseModel):
    provider: str = Field(..., pattern=PROVIDER_PATTERN)
