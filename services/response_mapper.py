from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from models.candidate_record import CandidateRecord
from models.response_envelope import CandidateEnvelope
from services.errors import ApplicationError, MalformedResponseError


logger = logging.getLogger(__name__)


def parse_envelope(raw_body: str) -> CandidateEnvelope:
    try:
        return CandidateEnvelope.model_validate_json(raw_body)
    except ValidationError as e:
        raise MalformedResponseError(str(e)) from e


def _to_record(item: Dict[str, Optional[str]]) -> CandidateRecord:
    # Each field comes from exactly one datasource key
    return CandidateRecord(
        name=item.get("name"),
        external_id=item.get("id"),
        position=item.get("job"),
        company=item.get("company"),
    )


def map_candidates(raw_body: str) -> List[CandidateRecord]:
    """Turn a 200 response body into candidate records, preserving item order.

    Raises MalformedResponseError when the body is not a valid envelope and
    ApplicationError when the datasource reports success other than true.
    Items are not validated; absent keys leave the field as None.
    """
    envelope = parse_envelope(raw_body)
    if not envelope.succeeded:
        logger.warning(
            f"Datasource reported failure: {envelope.error}",
            extra={"step": "map", "status": "error", "error": "ApplicationError"},
        )
        raise ApplicationError(envelope.error)

    records = [_to_record(item) for item in envelope.data]
    logger.info(
        f"Mapped {len(records)} candidates",
        extra={"step": "map", "status": "ok"},
    )
    return records
