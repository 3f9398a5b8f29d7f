from dataclasses import dataclass, field


@dataclass(frozen=True)
class SearchResult:
    title: str
    description: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "description": self.description, "url": self.url}


@dataclass(frozen=True)
class GeneratedPage:
    html: str
    css: str
    title: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"html": self.html, "css": self.css, "title": self.title, "url": self.url}


@dataclass(frozen=True)
class ResultPageRequest:
    result: SearchResult
    original_query: str

    @property
    def cache_key(self) -> tuple[str, str, str]:
        return (self.original_query, self.result.title, self.result.url)


@dataclass(frozen=True)
class PaginationData:
    current_page: int
    total_pages: int = -1  # unknown, the provider never reports a total
    has_next_page: bool = True
    has_previous_page: bool = False


@dataclass(frozen=True)
class PageOutcome:
    """Result of opening a search result: a page, or an explicit failure."""

    page: GeneratedPage | None = None
    error: str | None = None
    cached: bool = False

    @property
    def is_available(self) -> bool:
        return self.page is not None


@dataclass(frozen=True)
class SearchPage:
    """One page of results for the active query."""

    query: str
    results: tuple[SearchResult, ...] = ()
    pagination: PaginationData = field(default_factory=lambda: PaginationData(current_page=1))
