from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import urlparse

from config.settings import NAMED_ENDPOINT_PREFIX, Settings, endpoint_env_key, get_settings
from services.errors import EndpointResolutionError


def _checked_base_url(name: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        raise EndpointResolutionError(name, "no base URL configured")
    url = str(value).strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise EndpointResolutionError(name, f"not an absolute http(s) URL: {url!r}")
    return url


class StaticEndpointResolver:
    """Resolve logical endpoint names from an in-memory mapping."""

    def __init__(self, endpoints: Dict[str, str]):
        self.endpoints = {endpoint_env_key(k): v for k, v in endpoints.items()}

    def resolve(self, name: str) -> str:
        return _checked_base_url(name, self.endpoints.get(endpoint_env_key(name)))


class SettingsEndpointResolver:
    """Resolve logical endpoint names from NAMED_ENDPOINT_<NAME> settings.

    'Heroku_Datasource' is looked up as NAMED_ENDPOINT_HEROKU_DATASOURCE.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def resolve(self, name: str) -> str:
        key = endpoint_env_key(name)
        value = self.settings.named_endpoints.get(key)
        if value is None:
            raise EndpointResolutionError(name, f"{NAMED_ENDPOINT_PREFIX}{key} is not set")
        return _checked_base_url(name, value)
