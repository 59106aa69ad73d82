from __future__ import annotations

import pytest

from config.settings import endpoint_env_key, get_settings
from services.endpoint_resolver import SettingsEndpointResolver, StaticEndpointResolver
from services.errors import EndpointResolutionError


def test_env_key_normalization():
    assert endpoint_env_key("Heroku_Datasource") == "HEROKU_DATASOURCE"
    assert endpoint_env_key("heroku-datasource") == "HEROKU_DATASOURCE"


def test_settings_resolver_reads_named_endpoint_env(monkeypatch):
    monkeypatch.setenv("NAMED_ENDPOINT_HEROKU_DATASOURCE", "https://gen.example.com/candidates/")
    get_settings.cache_clear()
    resolver = SettingsEndpointResolver()
    assert resolver.resolve("Heroku_Datasource") == "https://gen.example.com/candidates/"


def test_settings_resolver_missing_name(monkeypatch):
    monkeypatch.delenv("NAMED_ENDPOINT_HEROKU_DATASOURCE", raising=False)
    get_settings.cache_clear()
    with pytest.raises(EndpointResolutionError) as excinfo:
        SettingsEndpointResolver().resolve("Heroku_Datasource")
    assert "NAMED_ENDPOINT_HEROKU_DATASOURCE" in excinfo.value.detail


@pytest.mark.parametrize("value", ["", "   ", "datasource.example.com/", "ftp://files.example.com/"])
def test_blank_or_relative_urls_rejected(value):
    resolver = StaticEndpointResolver({"Heroku_Datasource": value})
    with pytest.raises(EndpointResolutionError):
        resolver.resolve("Heroku_Datasource")


def test_static_resolver_is_case_insensitive_on_names():
    resolver = StaticEndpointResolver({"heroku_datasource": "http://localhost:8000/"})
    assert resolver.resolve("Heroku_Datasource") == "http://localhost:8000/"
