"""Provider settings endpoints. API keys are never echoed back."""

from fastapi import APIRouter, Depends

from config.settings_manager import ApiSettingsManager
from server.dependencies import get_api_key, get_settings_manager
from server.schemas.requests import ProviderChangeRequest, SettingsUpdateRequest
from server.schemas.responses import SettingsResponseDTO

router = APIRouter(prefix="/v1/settings", tags=["Settings"])


@router.get("", response_model=SettingsResponseDTO)
async def get_settings(
    _api_key=Depends(get_api_key),
    manager: ApiSettingsManager = Depends(get_settings_manager),
):
    return SettingsResponseDTO.from_settings(manager.current())


@router.put("", response_model=SettingsResponseDTO)
async def update_settings(
    body: SettingsUpdateRequest,
    _api_key=Depends(get_api_key),
    manager: ApiSettingsManager = Depends(get_settings_manager),
):
    settings = manager.current()
    for provider in ("openrouter", "openai"):
        update = getattr(body, provider)
        if update is not None:
            settings = settings.update_provider(provider, api_key=update.api_key, model=update.model)
    return SettingsResponseDTO.from_settings(manager.update(settings))


@router.put("/provider", response_model=SettingsResponseDTO)
async def change_provider(
    body: ProviderChangeRequest,
    _api_key=Depends(get_api_key),
    manager: ApiSettingsManager = Depends(get_settings_manager),
):
    """Select a provider. Providers without an API key are ignored."""
    return SettingsResponseDTO.from_settings(manager.change_provider(body.provider))
