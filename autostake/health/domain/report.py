"""HealthReport — the accumulated record of one network's autostake run."""

from enum import StrEnum

from pydantic import BaseModel, Field


class HealthStatus(StrEnum):
    SUCCESS = "success"
    FAILED = "failed"


class HealthReport(BaseModel, frozen=True):
    """Snapshot of everything a reporter has accumulated for one network.

    ``status`` and ``message`` stay unset until the run reaches a terminal mark.
    """

    network: str = Field(min_length=1)
    lines: list[str] = []
    status: HealthStatus | None = None
    message: str | None = None
