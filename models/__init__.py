from .candidate_record import CandidateRecord
from .response_envelope import CandidateEnvelope
from .selection import Mode, Size

__all__ = [
    "CandidateRecord",
    "CandidateEnvelope",
    "Mode",
    "Size",
]
