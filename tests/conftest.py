import pytest
from dotenv import load_dotenv

from config.api_settings import ApiSettings, ProviderCredentials
from models.search import ResultPageRequest, SearchResult

# Load environment variables from .env file for tests
load_dotenv()


class FakeGateway:
    """
    Gateway double: returns canned completions and records every call.
    """

    def __init__(self, results_text: str = "", page_text: str = "", error: Exception | None = None):
        self.results_text = results_text
        self.page_text = page_text
        self.error = error
        self.result_calls: list[tuple[str, int]] = []
        self.page_calls: list[ResultPageRequest] = []

    async def fetch_results(self, api_config, query: str, page: int) -> str:
        self.result_calls.append((query, page))
        if self.error:
            raise self.error
        return self.results_text

    async def generate_page(self, api_config, request: ResultPageRequest) -> str:
        self.page_calls.append(request)
        if self.error:
            raise self.error
        return self.page_text


def make_results_text(count: int = 10, prefix: str = "Result") -> str:
    items = ",".join(
        f'{{"title":"{prefix} {i}","description":"About {prefix.lower()} {i}",'
        f'"url":"https://example{i}.com"}}'
        for i in range(1, count + 1)
    )
    return f"[{items}]"


@pytest.fixture
def configured_settings():
    return ApiSettings(
        providers={
            "openrouter": ProviderCredentials(api_key="sk-or-test-key", model="google/gemini-2.5-flash"),
            "openai": ProviderCredentials(api_key="", model="gpt-4o"),
        },
        current_provider="openrouter",
    )


@pytest.fixture
def empty_settings():
    return ApiSettings.defaults()


@pytest.fixture
def sample_result():
    return SearchResult(
        title="Understanding Rust Ownership",
        description="A practical guide to ownership and borrowing",
        url="https://rust-guide.example.com/ownership",
    )


@pytest.fixture
def page_completion():
    return (
        '{"html":"<!DOCTYPE html><html><head><title>Understanding Rust Ownership</title></head>'
        '<body><h1>Ownership</h1></body></html>","css":"h1 { color: navy; }",'
        '"title":"Understanding Rust Ownership","url":"https://rust-guide.example.com/ownership"}'
    )
