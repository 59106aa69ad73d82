from __future__ import annotations

from typing import List, Literal, Optional, Protocol

from models.candidate_record import CandidateRecord


EntityType = Literal["person"]


class SourcePort(Protocol):
    source_name: str
    entity_type: EntityType

    def run(self, mode: str, size: Optional[str]) -> List[CandidateRecord]:
        ...
