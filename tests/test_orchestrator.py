"""
Tests for SearchOrchestrator: cache-first lookups and failure degradation.

A FakeGateway stands in for the providers so no network calls are made.
"""

import asyncio

from models.errors import ShapeError, TransportError
from orchestrator.core import SearchOrchestrator

from .conftest import FakeGateway, make_results_text


def _orchestrator(settings, gateway):
    return SearchOrchestrator(settings_provider=lambda: settings, gateway=gateway)


class TestSearch:
    def test_second_identical_search_is_served_from_cache(self, configured_settings):
        gateway = FakeGateway(results_text=make_results_text(10))
        orchestrator = _orchestrator(configured_settings, gateway)

        first = asyncio.run(orchestrator.search("rust ownership", 1))
        second = asyncio.run(orchestrator.search("rust ownership", 1))

        assert len(first) == 10
        assert [r.title for r in first] == [f"Result {i}" for i in range(1, 11)]
        assert second is first
        assert gateway.result_calls == [("rust ownership", 1)]

    def test_returned_results_cannot_change_the_cache(self, configured_settings):
        gateway = FakeGateway(results_text=make_results_text(10))
        orchestrator = _orchestrator(configured_settings, gateway)

        hit = asyncio.run(orchestrator.search("q", 1))

        assert isinstance(hit, tuple)
        assert len(asyncio.run(orchestrator.search("q", 1))) == 10
        assert gateway.result_calls == [("q", 1)]

    def test_each_page_is_fetched_once(self, configured_settings):
        gateway = FakeGateway(results_text=make_results_text(10))
        orchestrator = _orchestrator(configured_settings, gateway)

        asyncio.run(orchestrator.search("q", 1))
        asyncio.run(orchestrator.search("q", 2))
        asyncio.run(orchestrator.search("q", 1))

        assert gateway.result_calls == [("q", 1), ("q", 2)]

    def test_unparseable_completion_is_cached_as_placeholder(self, configured_settings):
        gateway = FakeGateway(results_text="no json here")
        orchestrator = _orchestrator(configured_settings, gateway)

        results = asyncio.run(orchestrator.search("q", 2))

        assert len(results) == 1
        assert results[0].title == 'Results for "q" - Page 2'
        assert orchestrator.result_cache.get_results("q", 2) is results

    def test_transport_error_degrades_to_empty_list(self, configured_settings):
        gateway = FakeGateway(error=TransportError("API Error: 500", status_code=500))
        orchestrator = _orchestrator(configured_settings, gateway)

        results = asyncio.run(orchestrator.search("q", 1))

        assert results == ()
        assert orchestrator.result_cache.get_results("q", 1) is None

    def test_shape_error_degrades_to_empty_list(self, configured_settings):
        gateway = FakeGateway(error=ShapeError("Invalid API response"))
        orchestrator = _orchestrator(configured_settings, gateway)

        assert asyncio.run(orchestrator.search("q", 1)) == ()

    def test_missing_configuration_never_reaches_gateway(self, empty_settings):
        gateway = FakeGateway(results_text=make_results_text(10))
        orchestrator = _orchestrator(empty_settings, gateway)

        assert asyncio.run(orchestrator.search("q", 1)) == ()
        assert gateway.result_calls == []

    def test_settings_are_read_at_call_time(self, empty_settings, configured_settings):
        gateway = FakeGateway(results_text=make_results_text(2))
        current = {"settings": empty_settings}
        orchestrator = SearchOrchestrator(
            settings_provider=lambda: current["settings"], gateway=gateway
        )

        assert asyncio.run(orchestrator.search("q", 1)) == ()
        current["settings"] = configured_settings
        assert len(asyncio.run(orchestrator.search("q", 1))) == 2


class TestOpenResult:
    def test_second_open_is_served_from_cache(
        self, configured_settings, sample_result, page_completion
    ):
        gateway = FakeGateway(page_text=page_completion)
        orchestrator = _orchestrator(configured_settings, gateway)

        first = asyncio.run(orchestrator.open_result(sample_result, "rust ownership"))
        second = asyncio.run(orchestrator.open_result(sample_result, "rust ownership"))

        assert first.is_available and not first.cached
        assert second.cached
        assert second.page == first.page
        assert len(gateway.page_calls) == 1

    def test_different_query_is_a_different_page(
        self, configured_settings, sample_result, page_completion
    ):
        gateway = FakeGateway(page_text=page_completion)
        orchestrator = _orchestrator(configured_settings, gateway)

        asyncio.run(orchestrator.open_result(sample_result, "rust ownership"))
        asyncio.run(orchestrator.open_result(sample_result, "rust borrowing"))

        assert len(gateway.page_calls) == 2

    def test_missing_fields_give_no_page(self, configured_settings, sample_result):
        gateway = FakeGateway(page_text='{"html": "<p>hi</p>", "title": "T"}')
        orchestrator = _orchestrator(configured_settings, gateway)

        outcome = asyncio.run(orchestrator.open_result(sample_result, "q"))

        assert outcome.page is None
        assert not outcome.is_available
        assert "css" in outcome.error and "url" in outcome.error
        assert len(orchestrator.page_cache) == 0

    def test_transport_error_gives_no_page(self, configured_settings, sample_result):
        gateway = FakeGateway(error=TransportError("API Error: 401", status_code=401))
        orchestrator = _orchestrator(configured_settings, gateway)

        outcome = asyncio.run(orchestrator.open_result(sample_result, "q"))

        assert outcome.page is None
        assert outcome.error == "API Error: 401"

    def test_failed_page_is_retried_on_next_open(
        self, configured_settings, sample_result, page_completion
    ):
        gateway = FakeGateway(page_text="not json")
        orchestrator = _orchestrator(configured_settings, gateway)

        assert not asyncio.run(orchestrator.open_result(sample_result, "q")).is_available
        gateway.page_text = page_completion
        assert asyncio.run(orchestrator.open_result(sample_result, "q")).is_available
        assert len(gateway.page_calls) == 2

    def test_missing_configuration_gives_no_page(self, empty_settings, sample_result):
        gateway = FakeGateway(page_text="{}")
        orchestrator = _orchestrator(empty_settings, gateway)

        outcome = asyncio.run(orchestrator.open_result(sample_result, "q"))

        assert outcome.page is None
        assert "API configuration not available" in outcome.error
        assert gateway.page_calls == []


class TestSessionNavigation:
    def test_new_search_then_paging(self, configured_settings):
        gateway = FakeGateway(results_text=make_results_text(10))
        orchestrator = _orchestrator(configured_settings, gateway)

        first = asyncio.run(orchestrator.new_search("foo"))
        second = asyncio.run(orchestrator.next_page())
        back = asyncio.run(orchestrator.previous_page())

        assert first.pagination.current_page == 1
        assert first.pagination.has_previous_page is False
        assert second.pagination.current_page == 2
        assert second.pagination.has_previous_page is True
        assert back.results is first.results
        assert gateway.result_calls == [("foo", 1), ("foo", 2)]

    def test_new_search_after_paging_starts_at_page_one(self, configured_settings):
        gateway = FakeGateway(results_text=make_results_text(10))
        orchestrator = _orchestrator(configured_settings, gateway)

        asyncio.run(orchestrator.new_search("foo"))
        asyncio.run(orchestrator.load_page(5))
        page = asyncio.run(orchestrator.new_search("bar"))

        assert orchestrator.active_query == "bar"
        assert page.pagination.current_page == 1
        assert gateway.result_calls[-1] == ("bar", 1)

    def test_clear_results_resets_page_and_cache(self, configured_settings):
        gateway = FakeGateway(results_text=make_results_text(10))
        orchestrator = _orchestrator(configured_settings, gateway)

        asyncio.run(orchestrator.new_search("foo"))
        asyncio.run(orchestrator.load_page(3))
        orchestrator.clear_results()

        assert orchestrator.active_page == 1
        assert orchestrator.active_query == "foo"
        assert len(orchestrator.result_cache) == 0
        assert orchestrator.pagination_data().has_previous_page is False
