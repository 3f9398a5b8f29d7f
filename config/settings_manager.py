"""Holds the live ApiSettings for a session and persists changes."""

from typing import Protocol

from config.api_settings import ApiSettings
from utils.logger import get_logger

logger = get_logger(__name__)


class SettingsBackend(Protocol):
    def load(self) -> ApiSettings: ...

    def save(self, settings: ApiSettings) -> None: ...


class ApiSettingsManager:
    """
    Current settings snapshot plus the store behind it.

    Settings are loaded once at startup and written back on every update.
    Switching provider is session state only and is not persisted.
    """

    def __init__(self, backend: SettingsBackend):
        self._backend = backend
        self._settings = backend.load()
        logger.info(
            "API settings loaded",
            extra={
                "extra_fields": {
                    "current_provider": self._settings.current_provider,
                    "has_valid_configuration": self._settings.has_valid_configuration(),
                }
            },
        )

    def current(self) -> ApiSettings:
        return self._settings

    def update(self, settings: ApiSettings) -> ApiSettings:
        self._settings = settings
        self._backend.save(settings)
        return settings

    def update_provider(
        self, provider: str, api_key: str | None = None, model: str | None = None
    ) -> ApiSettings:
        return self.update(self._settings.update_provider(provider, api_key=api_key, model=model))

    def change_provider(self, provider: str) -> ApiSettings:
        self._settings = self._settings.change_provider(provider)
        return self._settings
