"""Per-provider credentials and active provider selection."""

from dataclasses import dataclass, field, replace
from typing import Any

from config.config import DEFAULT_MODELS, Config, Provider

PROVIDER_ORDER = (Provider.OPENROUTER.value, Provider.OPENAI.value)


@dataclass(frozen=True)
class ProviderCredentials:
    api_key: str = ""
    model: str = ""

    @property
    def is_configured(self) -> bool:
        return len(self.api_key) > 0


@dataclass(frozen=True)
class ApiConfig:
    """Snapshot handed to the gateway for one call."""

    provider: str
    api_key: str
    model: str


@dataclass(frozen=True)
class ApiSettings:
    """
    Credentials for every provider plus the provider the user picked.

    Instances are immutable snapshots; every change returns a new instance.
    """

    providers: dict[str, ProviderCredentials] = field(default_factory=dict)
    current_provider: str = Provider.OPENROUTER.value

    @classmethod
    def defaults(cls, config: Config | None = None) -> "ApiSettings":
        if config is None:
            providers = {
                name: ProviderCredentials(api_key="", model=DEFAULT_MODELS[name])
                for name in PROVIDER_ORDER
            }
        else:
            providers = {
                Provider.OPENROUTER.value: ProviderCredentials(
                    api_key=config.OPENROUTER_API_KEY, model=config.DEFAULT_OPENROUTER_MODEL
                ),
                Provider.OPENAI.value: ProviderCredentials(
                    api_key=config.OPENAI_API_KEY, model=config.DEFAULT_OPENAI_MODEL
                ),
            }
        return cls(providers=providers).with_initial_provider()

    @classmethod
    def from_stored(cls, stored: dict[str, Any], base: "ApiSettings") -> "ApiSettings":
        """
        Merge a stored settings mapping over ``base``.

        Unknown providers and non-string values are ignored. The initial
        provider is openai when it has a key, otherwise openrouter.
        """
        providers = dict(base.providers)
        for name in PROVIDER_ORDER:
            entry = stored.get(name)
            if not isinstance(entry, dict):
                continue
            current = providers.get(name, ProviderCredentials())
            api_key = entry.get("api_key")
            model = entry.get("model")
            providers[name] = ProviderCredentials(
                api_key=api_key if isinstance(api_key, str) else current.api_key,
                model=model if isinstance(model, str) and model else current.model,
            )
        return cls(providers=providers).with_initial_provider()

    def with_initial_provider(self) -> "ApiSettings":
        if self.credentials(Provider.OPENAI.value).is_configured:
            return replace(self, current_provider=Provider.OPENAI.value)
        return replace(self, current_provider=Provider.OPENROUTER.value)

    def to_stored(self) -> dict[str, dict[str, str]]:
        return {
            name: {"api_key": creds.api_key, "model": creds.model}
            for name, creds in self.providers.items()
        }

    def credentials(self, provider: str) -> ProviderCredentials:
        return self.providers.get(provider, ProviderCredentials())

    def has_valid_configuration(self) -> bool:
        return any(creds.is_configured for creds in self.providers.values())

    def best_provider(self) -> str | None:
        """The selected provider if it has a key, else the first provider that does."""
        if self.credentials(self.current_provider).is_configured:
            return self.current_provider
        for name in PROVIDER_ORDER:
            if self.credentials(name).is_configured:
                return name
        return None

    def change_provider(self, provider: str) -> "ApiSettings":
        """Switch provider; unconfigured providers are ignored."""
        if not self.credentials(provider).is_configured:
            return self
        return replace(self, current_provider=provider)

    def update_provider(
        self, provider: str, api_key: str | None = None, model: str | None = None
    ) -> "ApiSettings":
        if provider not in PROVIDER_ORDER:
            raise ValueError(f"Unsupported API provider: {provider}")
        current = self.credentials(provider)
        providers = dict(self.providers)
        providers[provider] = ProviderCredentials(
            api_key=current.api_key if api_key is None else api_key,
            model=current.model if not model else model,
        )
        return replace(self, providers=providers)

    def api_config(self) -> ApiConfig | None:
        provider = self.best_provider()
        if provider is None:
            return None
        creds = self.credentials(provider)
        return ApiConfig(provider=provider, api_key=creds.api_key, model=creds.model)
