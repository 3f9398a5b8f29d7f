"""Durable key-value store for provider settings."""

import json

from sqlalchemy import Engine, select
from sqlalchemy.exc import SQLAlchemyError

from config.api_settings import ApiSettings
from db.engine import get_engine
from db.tables import app_settings, create_tables
from utils.logger import get_logger

logger = get_logger(__name__)

SETTINGS_KEY = "search-engine-api-settings"


class SettingsStore:
    """
    Reads and writes ApiSettings under a single fixed key.

    Stored values are merged over the defaults on load, so a missing or
    partial entry still yields settings for every provider.
    """

    def __init__(self, engine: Engine | None = None, defaults: ApiSettings | None = None):
        self._engine = engine or get_engine()
        self._defaults = defaults or ApiSettings.defaults()
        create_tables(self._engine)

    def get_raw(self, key: str) -> str | None:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(app_settings.c.value).where(app_settings.c.key == key)
            ).first()
        return row[0] if row else None

    def set_raw(self, key: str, value: str) -> None:
        with self._engine.begin() as conn:
            updated = conn.execute(
                app_settings.update().where(app_settings.c.key == key).values(value=value)
            )
            if updated.rowcount == 0:
                conn.execute(app_settings.insert().values(key=key, value=value))

    def load(self) -> ApiSettings:
        """
        Load settings, falling back to defaults when nothing usable is stored.
        """
        try:
            raw = self.get_raw(SETTINGS_KEY)
        except SQLAlchemyError as e:
            logger.error(
                f"Error loading API settings: {e!s}",
                extra={"extra_fields": {"error_type": type(e).__name__}},
            )
            return self._defaults

        if raw is None:
            return self._defaults

        try:
            stored = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(
                "Stored API settings are not valid JSON; using defaults",
                extra={"extra_fields": {"error": str(e)}},
            )
            return self._defaults

        if not isinstance(stored, dict):
            logger.error("Stored API settings are not an object; using defaults")
            return self._defaults

        return ApiSettings.from_stored(stored, self._defaults)

    def save(self, settings: ApiSettings) -> None:
        self.set_raw(SETTINGS_KEY, json.dumps(settings.to_stored()))
        logger.info(
            "API settings saved",
            extra={
                "extra_fields": {
                    "configured_providers": [
                        name for name, creds in settings.providers.items() if creds.is_configured
                    ]
                }
            },
        )
