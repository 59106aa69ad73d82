"""
HTTP callout to the candidate datasource: one GET, no retries.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

import requests

from services.errors import RemoteError, TransportError
from utils.callout_logger import log_callout


logger = logging.getLogger(__name__)

# Large result sets (size=large) are slow to generate on the datasource side.
CALLOUT_TIMEOUT_SECONDS = 120


class CalloutExecutor:
    """Issues the datasource GET and classifies the outcome.

    The session is where auth headers or adapters from the endpoint
    resolution side get attached; a plain session is used otherwise.
    """

    def __init__(self, session: Optional[requests.Session] = None, endpoint_name: Optional[str] = None):
        # Only a session created here is closed by close()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.endpoint_name = endpoint_name

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def execute(self, endpoint: str) -> str:
        """GET `endpoint` and return the body text of an exact 200 response."""
        logger.info(
            f"Calling datasource {endpoint}",
            extra={"step": "callout", "status": "start", "provider": self.endpoint_name or "-"},
        )
        t0 = time.time()
        try:
            response = self.session.get(endpoint, timeout=CALLOUT_TIMEOUT_SECONDS, allow_redirects=False)
        except requests.exceptions.RequestException as e:
            duration_ms = int((time.time() - t0) * 1000)
            logger.error(
                f"Datasource request failed: {e}",
                extra={"step": "callout", "status": "error", "duration_ms": duration_ms,
                       "provider": self.endpoint_name or "-", "error": type(e).__name__},
            )
            error = TransportError(endpoint, str(e))
            self._trace(endpoint, "error", None, duration_ms, error)
            raise error from e

        duration_ms = int((time.time() - t0) * 1000)
        if response.status_code != 200:
            logger.error(
                f"Datasource returned status {response.status_code}: {response.text}",
                extra={"step": "callout", "status": "error", "duration_ms": duration_ms,
                       "provider": self.endpoint_name or "-", "error": "RemoteError"},
            )
            error = RemoteError(response.status_code, response.reason, response.text)
            self._trace(endpoint, "error", response.status_code, duration_ms, error)
            raise error

        logger.info(
            f"Datasource responded in {duration_ms} ms",
            extra={"step": "callout", "status": "ok", "duration_ms": duration_ms,
                   "provider": self.endpoint_name or "-"},
        )
        self._trace(endpoint, "ok", response.status_code, duration_ms, None)
        return response.text

    def _trace(self, endpoint, status, status_code, duration_ms, error) -> None:
        log_callout(
            caller="callout.execute",
            endpoint_name=self.endpoint_name,
            url=endpoint,
            status=status,
            status_code=status_code,
            duration_ms=duration_ms,
            error_kind=error.kind.value if error is not None else None,
            error=error.message if error is not None else None,
        )
