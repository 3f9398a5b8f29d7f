"""FastAPI dependencies for authentication, settings and the search session."""

import os

from fastapi import Header, HTTPException, Request, status

from config.api_settings import ApiSettings
from config.config import get_config
from config.settings_manager import ApiSettingsManager
from orchestrator.core import SearchOrchestrator
from server.utils import redact_sensitive_headers
from utils.logger import get_logger

logger = get_logger(__name__)


async def get_api_key(request: Request, x_api_key: str | None = Header(None)):
    """
    Validate the X-API-Key header against API_KEYS.

    When API_KEYS is unset the server is treated as a local single-user
    instance and every request is accepted.
    """
    valid_keys_str = os.getenv("API_KEYS", "")
    if not valid_keys_str:
        return None

    valid_keys = [k.strip() for k in valid_keys_str.split(",") if k.strip()]
    if not x_api_key or x_api_key not in valid_keys:
        logger.warning(
            "API authentication failed",
            extra={"extra_fields": {"headers": redact_sensitive_headers(dict(request.headers))}},
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or missing API key"
        )
    return x_api_key


def get_settings_manager() -> ApiSettingsManager:
    """Dependency to get the settings manager (singleton pattern)."""
    from db.settings_store import SettingsStore

    if not hasattr(get_settings_manager, "_instance"):
        store = SettingsStore(defaults=ApiSettings.defaults(get_config()))
        get_settings_manager._instance = ApiSettingsManager(store)
    return get_settings_manager._instance


def get_orchestrator() -> SearchOrchestrator:
    """Dependency to get the search session (one per server process)."""
    if not hasattr(get_orchestrator, "_instance"):
        manager = get_settings_manager()
        get_orchestrator._instance = SearchOrchestrator(settings_provider=manager.current)
    return get_orchestrator._instance
