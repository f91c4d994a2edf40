"""NetworkRunReport — the per-network result returned by a scheduler run."""

from pydantic import BaseModel, Field

from autostake.orchestration.domain.history import AttemptStatus


class NetworkRunReport(BaseModel, frozen=True):
    network: str = Field(min_length=1)
    status: AttemptStatus
    attempts: int = Field(ge=0)
    skip_reason: str | None = None
