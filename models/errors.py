"""Error taxonomy shared by the gateway, extractor and orchestrator."""


class SearchEngineError(Exception):
    code = "unknown"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(SearchEngineError):
    """No usable provider configuration; raised before any network call."""

    code = "config"


class TransportError(SearchEngineError):
    """The provider answered with a non-2xx status, could not be reached or the SDK failed."""

    code = "transport"

    def __init__(self, message: str, status_code: int | None = None, provider: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.provider = provider


class ShapeError(SearchEngineError):
    """The provider response lacks choices[0].message.content."""

    code = "shape"


class PageExtractionError(SearchEngineError):
    """A completion could not be turned into a GeneratedPage."""

    code = "extraction"

    def __init__(self, message: str, missing_fields: list[str] | None = None):
        super().__init__(message)
        self.missing_fields = list(missing_fields or [])
