"""In-memory caches for search result pages and generated pages."""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from models.search import GeneratedPage, ResultPageRequest, SearchResult

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MemoCache(Generic[K, V]):
    """
    Session-lifetime memo table.

    Entries are never expired; ``put`` replaces an entry wholesale. There is
    no lock: every caller runs on the same event loop and a get followed by
    a put never straddles an await.
    """

    def __init__(self):
        self._entries: dict[K, V] = {}

    def get(self, key: K) -> V | None:
        return self._entries.get(key)

    def put(self, key: K, value: V) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class ResultCache(MemoCache[tuple[str, int], tuple[SearchResult, ...]]):
    """
    Search results keyed by ``(query, page)``.

    Queries are compared exactly: no case folding, no whitespace trimming.
    Entries are stored as tuples so callers cannot edit them in place.
    """

    def get_results(self, query: str, page: int) -> tuple[SearchResult, ...] | None:
        return self.get((query, page))

    def put_results(
        self, query: str, page: int, results: Iterable[SearchResult]
    ) -> tuple[SearchResult, ...]:
        stored = tuple(results)
        self.put((query, page), stored)
        return stored


class PageCache(MemoCache[tuple[str, str, str], GeneratedPage]):
    """Generated pages keyed by ``(original_query, result title, result url)``."""

    def get_page(self, request: ResultPageRequest) -> GeneratedPage | None:
        return self.get(request.cache_key)

    def put_page(self, request: ResultPageRequest, page: GeneratedPage) -> None:
        self.put(request.cache_key, page)
