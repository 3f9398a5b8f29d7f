from .base_client import BaseProviderClient


class OpenAIClient(BaseProviderClient):
    """
    A client for the OpenAI chat completions API.
    """

    PROVIDER = "openai"
    BASE_URL = "https://api.openai.com/v1"

    def __init__(self, api_key: str, model_name: str = "gpt-4o", **kwargs):
        super().__init__(api_key, model_name=model_name, **kwargs)

    def extra_headers(self) -> dict[str, str]:
        return {}
