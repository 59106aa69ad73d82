from __future__ import annotations

import logging
import time
from typing import List, Optional, Union

import requests

from config.settings import get_settings
from models.candidate_record import CandidateRecord
from models.selection import Mode, Size
from ports.endpoint_resolver import EndpointResolverPort
from services.callout import CalloutExecutor
from services.endpoint_resolver import SettingsEndpointResolver
from services.errors import CandidateFetchError
from services.request_builder import build_endpoint
from services.response_mapper import map_candidates


logger = logging.getLogger(__name__)


class CandidateService:
    """Fetch candidates from the named datasource: build, call, map."""

    def __init__(
        self,
        resolver: Optional[EndpointResolverPort] = None,
        session: Optional[requests.Session] = None,
        endpoint_name: Optional[str] = None,
    ) -> None:
        self.resolver = resolver or SettingsEndpointResolver()
        self.endpoint_name = endpoint_name or get_settings().datasource_endpoint_name
        self.executor = CalloutExecutor(session=session, endpoint_name=self.endpoint_name)

    def close(self) -> None:
        self.executor.close()

    def __enter__(self) -> "CandidateService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_candidates(
        self,
        mode: Union[Mode, str],
        size: Union[Size, str, None] = None,
    ) -> List[CandidateRecord]:
        t0 = time.time()
        try:
            endpoint = build_endpoint(mode, size, self.resolver, self.endpoint_name)
            raw_body = self.executor.execute(endpoint)
            records = map_candidates(raw_body)
        except CandidateFetchError as e:
            logger.error(
                f"Candidate fetch failed: {e.message}",
                extra={"step": "get_candidates", "status": "error",
                       "duration_ms": int((time.time() - t0) * 1000),
                       "provider": self.endpoint_name, "error": e.kind.value},
            )
            raise
        logger.info(
            f"Fetched {len(records)} candidates",
            extra={"step": "get_candidates", "status": "ok",
                   "duration_ms": int((time.time() - t0) * 1000),
                   "provider": self.endpoint_name},
        )
        return records


def get_candidates(
    mode: Union[Mode, str],
    size: Union[Size, str, None] = None,
    *,
    resolver: Optional[EndpointResolverPort] = None,
    session: Optional[requests.Session] = None,
    endpoint_name: Optional[str] = None,
) -> List[CandidateRecord]:
    """Convenience function for one-off fetches"""
    with CandidateService(resolver=resolver, session=session, endpoint_name=endpoint_name) as service:
        return service.get_candidates(mode, size)
