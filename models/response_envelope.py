from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CandidateEnvelope(BaseModel):
    """Datasource JSON body: application status plus the raw candidate items."""

    success: Any = None
    error: str | None = None
    data: list[dict[str, str | None]] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("data", mode="before")
    @classmethod
    def _null_data_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def succeeded(self) -> bool:
        # Only a literal JSON true counts; "true", 1 and null do not
        return self.success is True
