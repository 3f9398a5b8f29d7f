import os
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv


class Provider(Enum):
    """Supported LLM providers."""

    OPENROUTER = "openrouter"
    OPENAI = "openai"


DEFAULT_MODELS = {
    Provider.OPENROUTER.value: "google/gemini-2.5-flash",
    Provider.OPENAI.value: "gpt-4o",
}


class Config:
    """Configuration management for the application."""

    def __init__(self):
        """Initialize configuration with environment variables."""
        env_path = Path(__file__).parent.parent / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        # API keys seed the stored settings; keys entered later take precedence
        self.OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")
        self.OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

        # Model configuration
        self.DEFAULT_OPENROUTER_MODEL = os.getenv(
            "DEFAULT_OPENROUTER_MODEL", DEFAULT_MODELS[Provider.OPENROUTER.value]
        )
        self.DEFAULT_OPENAI_MODEL = os.getenv(
            "DEFAULT_OPENAI_MODEL", DEFAULT_MODELS[Provider.OPENAI.value]
        )
        # OpenRouter page generation always runs on this model to bound cost
        self.PAGE_GENERATION_MODEL = os.getenv("PAGE_GENERATION_MODEL", "google/gemini-2.5-flash")

        # Sent to OpenRouter as HTTP-Referer / X-Title
        self.APP_ORIGIN = os.getenv("APP_ORIGIN", "http://localhost:8000")
        self.APP_TITLE = os.getenv("APP_TITLE", "Search Engine")

        self.SETTINGS_DATABASE_URL = os.getenv(
            "SETTINGS_DATABASE_URL", "sqlite:///search_settings.db"
        )


_config: Config | None = None


def get_config() -> Config:
    """Get the process-wide Config, created on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config
