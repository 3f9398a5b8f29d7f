from .base_client import BaseProviderClient


class OpenRouterClient(BaseProviderClient):
    """
    OpenRouter client.

    OpenRouter is OpenAI-compatible and identifies the calling app through the
    HTTP-Referer and X-Title headers. Page generation always uses
    ``page_generation_model`` regardless of the model chosen for search.
    """

    PROVIDER = "openrouter"
    BASE_URL = "https://openrouter.ai/api/v1"

    def __init__(
        self,
        api_key: str,
        model_name: str = "google/gemini-2.5-flash",
        *,
        app_origin: str = "http://localhost:8000",
        app_title: str = "Search Engine",
        page_generation_model: str = "google/gemini-2.5-flash",
        **kwargs,
    ):
        super().__init__(api_key, model_name=model_name, **kwargs)
        self.app_origin = app_origin
        self.app_title = app_title
        self.page_generation_model = page_generation_model

    def extra_headers(self) -> dict[str, str]:
        return {"HTTP-Referer": self.app_origin, "X-Title": self.app_title}

    def page_model(self) -> str:
        return self.page_generation_model
