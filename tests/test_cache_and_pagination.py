from models.search import GeneratedPage, ResultPageRequest, SearchResult
from orchestrator.cache import PageCache, ResultCache
from orchestrator.pagination import PaginationController


def _results(n: int) -> list[SearchResult]:
    return [SearchResult(f"T{i}", f"D{i}", f"https://{i}.example") for i in range(n)]


class TestResultCache:
    def test_round_trip(self):
        cache = ResultCache()
        results = _results(3)
        stored = cache.put_results("rust ownership", 1, results)

        assert stored == tuple(results)
        assert cache.get_results("rust ownership", 1) is stored

    def test_entries_cannot_be_edited_through_the_caller_list(self):
        cache = ResultCache()
        results = _results(3)
        cache.put_results("q", 1, results)
        results.clear()

        assert len(cache.get_results("q", 1)) == 3
        assert isinstance(cache.get_results("q", 1), tuple)

    def test_untried_pairs_are_absent(self):
        cache = ResultCache()
        cache.put_results("rust ownership", 1, _results(1))

        assert cache.get_results("rust ownership", 2) is None
        assert cache.get_results("other", 1) is None

    def test_keys_are_exact(self):
        cache = ResultCache()
        cache.put_results("Rust", 1, _results(1))

        assert cache.get_results("rust", 1) is None
        assert cache.get_results("Rust ", 1) is None

    def test_put_overwrites(self):
        cache = ResultCache()
        cache.put_results("q", 1, _results(1))
        cache.put_results("q", 1, _results(2))

        assert len(cache.get_results("q", 1)) == 2
        assert len(cache) == 1

    def test_queries_coexist_and_clear(self):
        cache = ResultCache()
        cache.put_results("foo", 1, _results(1))
        cache.put_results("foo", 3, _results(1))
        cache.put_results("bar", 1, _results(1))

        assert ("foo", 1) in cache
        assert ("foo", 3) in cache
        assert ("foo", 2) not in cache
        assert ("bar", 1) in cache

        cache.clear()
        assert len(cache) == 0


class TestPageCache:
    def test_keyed_by_query_title_and_url(self):
        cache = PageCache()
        result = SearchResult("Title", "Desc", "https://u.example")
        page = GeneratedPage(html="<p>x</p>", css="p{}", title="Title", url="https://u.example")
        cache.put_page(ResultPageRequest(result=result, original_query="q"), page)

        assert cache.get_page(ResultPageRequest(result=result, original_query="q")) is page
        assert cache.get_page(ResultPageRequest(result=result, original_query="q2")) is None

    def test_description_is_not_part_of_the_key(self):
        cache = PageCache()
        page = GeneratedPage(html="<p>x</p>", css="p{}", title="T", url="https://u")
        cache.put_page(ResultPageRequest(SearchResult("T", "one", "https://u"), "q"), page)

        assert cache.get_page(ResultPageRequest(SearchResult("T", "two", "https://u"), "q")) is page

    def test_no_separator_collisions(self):
        cache = PageCache()
        page = GeneratedPage(html="<p>x</p>", css="p{}", title="T", url="U")
        cache.put_page(ResultPageRequest(SearchResult("b-c", "d", "e"), "a"), page)

        assert cache.get_page(ResultPageRequest(SearchResult("c", "d", "e"), "a-b")) is None


class TestPaginationController:
    def test_new_search_resets_page(self):
        pagination = PaginationController()
        pagination.start_new_search("foo")
        pagination.go_to_page(5)
        pagination.start_new_search("bar")

        assert pagination.active_query == "bar"
        assert pagination.active_page == 1

    def test_go_to_page_ignores_values_below_one(self):
        pagination = PaginationController()
        pagination.go_to_page(3)
        pagination.go_to_page(0)
        pagination.go_to_page(-2)

        assert pagination.active_page == 3

    def test_next_and_previous(self):
        pagination = PaginationController()
        pagination.next_page()
        pagination.next_page()
        assert pagination.active_page == 3

        pagination.previous_page()
        pagination.previous_page()
        pagination.previous_page()
        assert pagination.active_page == 1

    def test_pagination_data_is_optimistic(self):
        first = PaginationController.pagination_data(1)
        later = PaginationController.pagination_data(7)

        assert first.has_next_page is True
        assert first.has_previous_page is False
        assert first.total_pages == -1
        assert later.current_page == 7
        assert later.has_next_page is True
        assert later.has_previous_page is True
