"""Glue between attempt outcomes and the HealthReporter."""

from collections.abc import Sequence

from autostake.health.domain.reporter import HealthReporter
from autostake.orchestration.domain.summary import summarize
from autostake.runner.domain.result import TxResult
from autostake.runner.domain.runner import NetworkRunner


def log_summary(reporter: HealthReporter, results: Sequence[TxResult]) -> None:
    summary = summarize(results)
    reporter.log(summary.headline)
    for line in summary.lines:
        reporter.log(line)


async def log_results(
    reporter: HealthReporter,
    runner: NetworkRunner | None,
    error: str | None = None,
    message: str | None = None,
) -> None:
    """Log one attempt and flush it.

    Order is fixed: query errors, summary, error, then the retry or terminal
    message.
    """
    if runner is not None:
        reporter.add_logs(_query_errors(runner=runner))
    log_summary(reporter=reporter, results=runner.results if runner is not None else [])
    if error:
        reporter.log(f"Failed with error: {error}")
    if message:
        reporter.log(message)
    await reporter.send_log()


def _query_errors(runner: NetworkRunner) -> list[str]:
    try:
        return list(runner.query_errors())
    except Exception as exc:  # noqa: BLE001
        return [f"Failed to collect query errors: {str(exc) or type(exc).__name__}"]
