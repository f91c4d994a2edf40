"""AttemptHistory — the ordered attempts made for one network."""

from dataclasses import dataclass, field
from enum import StrEnum

from autostake.runner.domain.result import TxResult
from autostake.runner.domain.runner import NetworkRunner


class AttemptStatus(StrEnum):
    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class Attempt:
    """One attempt against a network.

    ``runner`` is None when constructing the runner raised. ``addresses`` is
    the restricted target set the attempt ran with; None means the full set.
    """

    number: int
    addresses: list[str] | None
    runner: NetworkRunner | None
    error: str | None = None

    @property
    def results(self) -> list[TxResult]:
        if self.runner is None:
            return []
        return list(self.runner.results)


@dataclass(frozen=True)
class AttemptHistory:
    """Attempts in chronological order plus how the sequence ended."""

    status: AttemptStatus
    attempts: list[Attempt] = field(default_factory=list)
    skip_reason: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is AttemptStatus.SUCCEEDED
