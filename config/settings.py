from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv


NAMED_ENDPOINT_PREFIX = "NAMED_ENDPOINT_"


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def endpoint_env_key(name: str) -> str:
    """Map a logical endpoint name like 'Heroku_Datasource' to its env key suffix."""
    return re.sub(r"[^0-9A-Za-z]+", "_", str(name).strip()).upper()


def _named_endpoints_from_env() -> dict[str, str]:
    endpoints: dict[str, str] = {}
    for key, value in os.environ.items():
        if key.startswith(NAMED_ENDPOINT_PREFIX) and len(key) > len(NAMED_ENDPOINT_PREFIX):
            endpoints[key[len(NAMED_ENDPOINT_PREFIX):].upper()] = value
    return endpoints


@dataclass(frozen=True)
class Settings:
    log_level: str

    # Core/runtime
    run_env: str

    # Datasource
    datasource_endpoint_name: str
    named_endpoints: dict[str, str] = field(default_factory=dict)

    # Logging/tracing
    callout_trace: bool = False
    callout_log_path: str = "logs/callouts.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        datasource_endpoint_name=os.getenv("DATASOURCE_ENDPOINT_NAME", "Heroku_Datasource"),
        named_endpoints=_named_endpoints_from_env(),
        callout_trace=os.getenv("CALLOUT_TRACE", "false").lower() in ("1", "true", "yes", "on"),
        callout_log_path=os.getenv("CALLOUT_LOG_PATH", "logs/callouts.jsonl"),
    )
