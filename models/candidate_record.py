from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CandidateRecord(BaseModel):
    """Caller-facing candidate: one per datasource item, owned by the caller."""

    name: str | None = None
    external_id: str | None = Field(default=None, alias="id")
    position: str | None = Field(default=None, alias="job")
    company: str | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
