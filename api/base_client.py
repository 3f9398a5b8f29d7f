import time
import uuid
from abc import ABC, abstractmethod
from typing import Any

import openai

from models.errors import ShapeError, TransportError
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseProviderClient(ABC):
    """
    Abstract base class for OpenAI-compatible chat completion providers.

    Subclasses only describe where and how to reach their provider; the
    request itself is identical for every provider:
    ``POST {base_url}/chat/completions`` with a bearer token and
    ``{model, messages: [{role: "user", content: prompt}]}``.
    """

    PROVIDER: str = ""
    BASE_URL: str = ""

    def __init__(self, api_key: str, model_name: str, **kwargs):
        """
        Initialize the provider client.

        Args:
            api_key: API key for the provider
            model_name: Model used when a call does not override it
            **kwargs: Additional provider-specific parameters
        """
        self.api_key = api_key
        self.model_name = model_name

    @abstractmethod
    def extra_headers(self) -> dict[str, str]:
        """Provider-specific headers; the SDK adds the bearer Authorization header."""

    def page_model(self) -> str:
        """Model used for page generation. Defaults to the configured model."""
        return self.model_name

    def _create_client(self) -> openai.AsyncOpenAI:
        # One attempt per call and no timeout: retries are user-initiated.
        return openai.AsyncOpenAI(
            api_key=self.api_key,
            base_url=self.BASE_URL,
            default_headers=self.extra_headers(),
            max_retries=0,
            timeout=None,
        )

    async def get_completion(self, prompt: str, *, model: str | None = None) -> str:
        """
        Send a single-message chat completion request.

        Args:
            prompt: User message content
            model: Override the configured model for this call

        Returns:
            The assistant message content

        Raises:
            TransportError: Non-2xx status, connection failure or any other SDK error
            ShapeError: Response has no choices[0].message.content
        """
        request_id = self._generate_request_id()
        model = model or self.model_name
        start_time = time.time()

        client = self._create_client()
        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.APIStatusError as e:
            logger.error(
                f"{self.PROVIDER} completion failed with status {e.status_code}",
                extra={
                    "extra_fields": {
                        "request_id": request_id,
                        "provider": self.PROVIDER,
                        "model": model,
                        "status_code": e.status_code,
                        "latency_ms": self._measure_latency(start_time),
                    }
                },
            )
            raise TransportError(
                f"API Error: {e.status_code}", status_code=e.status_code, provider=self.PROVIDER
            ) from e
        except openai.APIConnectionError as e:
            logger.error(
                f"{self.PROVIDER} completion failed: {e!s}",
                extra={
                    "extra_fields": {
                        "request_id": request_id,
                        "provider": self.PROVIDER,
                        "model": model,
                        "error_type": type(e).__name__,
                    }
                },
            )
            raise TransportError(f"API connection error: {e!s}", provider=self.PROVIDER) from e
        except openai.OpenAIError as e:
            logger.error(
                f"{self.PROVIDER} completion failed: {e!s}",
                extra={
                    "extra_fields": {
                        "request_id": request_id,
                        "provider": self.PROVIDER,
                        "model": model,
                        "error_type": type(e).__name__,
                    }
                },
            )
            raise TransportError(f"API error: {e!s}", provider=self.PROVIDER) from e
        finally:
            await client.close()

        text = self._extract_content(response)

        logger.info(
            f"{self.PROVIDER} completion successful",
            extra={
                "extra_fields": {
                    "request_id": request_id,
                    "provider": self.PROVIDER,
                    "model": model,
                    "latency_ms": self._measure_latency(start_time),
                    "completion_chars": len(text),
                }
            },
        )
        return text

    def _extract_content(self, response: Any) -> str:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            raise ShapeError("Invalid API response: missing choices[0].message.content") from e
        if not isinstance(content, str):
            raise ShapeError("Invalid API response: missing choices[0].message.content")
        return content

    @staticmethod
    def _generate_request_id() -> str:
        return f"req_{uuid.uuid4().hex[:12]}"

    @staticmethod
    def _measure_latency(start_time: float) -> int:
        return int((time.time() - start_time) * 1000)
