"""ResultSummary — reduces a runner's transaction results to report lines."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from autostake.runner.domain.result import TxResult


class ResultSummary(BaseModel, frozen=True):
    success_count: int = Field(ge=0)
    total_count: int = Field(ge=0)
    lines: list[str]

    @property
    def headline(self) -> str:
        return f"Sent {self.success_count}/{self.total_count} transactions"


def summarize(results: Sequence[TxResult]) -> ResultSummary:
    """Count the successful results and render one ``TX n: message`` line each.

    A result is successful when it carries no error. Line order follows
    ``results``.
    """
    failures = sum(1 for result in results if result.error)
    return ResultSummary(
        success_count=len(results) - failures,
        total_count=len(results),
        lines=[
            f"TX {index}: {result.message}"
            for index, result in enumerate(results, start=1)
        ],
    )
