"""Provider gateway: picks the client for a provider and runs one request."""

from config.api_settings import ApiConfig
from config.config import Config, get_config
from models.errors import ConfigError
from models.search import ResultPageRequest
from utils.logger import get_logger

from .base_client import BaseProviderClient
from .openai_client import OpenAIClient
from .openrouter_client import OpenRouterClient
from .prompts import build_page_prompt, build_search_prompt

logger = get_logger(__name__)

CLIENTS: dict[str, type[BaseProviderClient]] = {
    OpenRouterClient.PROVIDER: OpenRouterClient,
    OpenAIClient.PROVIDER: OpenAIClient,
}


class ProviderGateway:
    """
    Builds provider requests from a credentials snapshot and sends them.

    Each call makes exactly one network attempt. Nothing is retried here.
    """

    def __init__(self, config: Config | None = None):
        self._config = config or get_config()

    def client_for(self, api_config: ApiConfig) -> BaseProviderClient:
        """
        Raises:
            ConfigError: If the provider is not supported
        """
        client_cls = CLIENTS.get(api_config.provider)
        if client_cls is None:
            raise ConfigError(f"Unsupported API provider: {api_config.provider}")

        if client_cls is OpenRouterClient:
            return OpenRouterClient(
                api_key=api_config.api_key,
                model_name=api_config.model,
                app_origin=self._config.APP_ORIGIN,
                app_title=self._config.APP_TITLE,
                page_generation_model=self._config.PAGE_GENERATION_MODEL,
            )
        return client_cls(api_key=api_config.api_key, model_name=api_config.model)

    async def send(self, api_config: ApiConfig, prompt: str, *, model: str | None = None) -> str:
        client = self.client_for(api_config)
        return await client.get_completion(prompt, model=model)

    async def fetch_results(self, api_config: ApiConfig, query: str, page: int) -> str:
        logger.info(
            "Requesting search results",
            extra={"extra_fields": {"provider": api_config.provider, "query": query, "page": page}},
        )
        return await self.send(api_config, build_search_prompt(query, page))

    async def generate_page(self, api_config: ApiConfig, request: ResultPageRequest) -> str:
        client = self.client_for(api_config)
        model = client.page_model()
        logger.info(
            "Requesting generated page",
            extra={
                "extra_fields": {
                    "provider": api_config.provider,
                    "model": model,
                    "title": request.result.title,
                    "url": request.result.url,
                }
            },
        )
        return await client.get_completion(build_page_prompt(request), model=model)
