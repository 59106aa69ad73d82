from __future__ import annotations

from typing import List, Optional

from models.candidate_record import CandidateRecord
from services.candidate_service import CandidateService
from sources.registry import register


class DatasourceCandidateSource:
    source_name = "heroku_datasource"
    entity_type = "person"

    def __init__(self, service: Optional[CandidateService] = None):
        # Without an injected service each run builds and closes its own
        self._service = service

    def run(self, mode: str, size: Optional[str]) -> List[CandidateRecord]:
        if self._service is not None:
            return self._service.get_candidates(mode, size)
        with CandidateService() as service:
            return service.get_candidates(mode, size)


def _register():
    register(DatasourceCandidateSource.source_name, DatasourceCandidateSource)


_register()
