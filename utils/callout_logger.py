from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def _ensure_parent_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except Exception:
        pass


def log_callout(
    *,
    caller: str,
    endpoint_name: Optional[str],
    url: str,
    method: str = "GET",
    status: str = "ok",
    status_code: Optional[int] = None,
    duration_ms: Optional[int] = None,
    error_kind: Optional[str] = None,
    error: Optional[str] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a single JSON line describing an HTTP callout if tracing is enabled.

    Controlled by CALLOUT_TRACE / CALLOUT_LOG_PATH in config/settings.py
    """
    from config.settings import get_settings
    # Ensure latest env changes (tests may monkeypatch env between calls)
    get_settings.cache_clear()
    settings = get_settings()
    if not settings.callout_trace:
        return

    log_path = Path(settings.callout_log_path)
    _ensure_parent_dir(log_path)

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "caller": caller,
        "endpoint_name": endpoint_name,
        "method": method,
        "url": url,
        "status": status,
        "status_code": status_code,
        "duration_ms": duration_ms,
        "error_kind": error_kind,
        "error": error,
    }
    run_id = os.getenv("RUN_ID")
    if run_id:
        payload["run_id"] = run_id

    if extras:
        payload["extras"] = extras

    try:
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError:
        # Never break the callout on trace failures
        return
