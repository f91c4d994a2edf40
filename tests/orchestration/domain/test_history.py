"""Tests for AttemptHistory and Attempt value objects."""

from autostake.orchestration.domain.history import (
    Attempt,
    AttemptHistory,
    AttemptStatus,
)
from autostake.runner.domain.result import TxResult
from tests.runner.fake_runner import FakeNetworkRunner


class TestAttempt:
    def test_results_come_from_runner(self) -> None:
        runner = FakeNetworkRunner(results=[TxResult(message="ok")])

        attempt = Attempt(number=1, addresses=None, runner=runner)

        assert attempt.results == [TxResult(message="ok")]

    def test_attempt_without_runner_has_no_results(self) -> None:
        attempt = Attempt(number=1, addresses=None, runner=None, error="boom")

        assert attempt.results == []


class TestAttemptHistory:
    def test_succeeded_only_for_succeeded_status(self) -> None:
        assert AttemptHistory(status=AttemptStatus.SUCCEEDED).succeeded
        assert not AttemptHistory(status=AttemptStatus.SKIPPED).succeeded
        assert not AttemptHistory(status=AttemptStatus.FAILED).succeeded

