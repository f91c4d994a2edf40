"""RetryController — runs one network's attempts with bounded, narrowing retries."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from autostake.config.domain.network import NetworkConfig
from autostake.health.domain.reporter import HealthReporter
from autostake.orchestration.application.reporting import log_results
from autostake.orchestration.domain.history import (
    Attempt,
    AttemptHistory,
    AttemptStatus,
)
from autostake.orchestration.domain.observer import AutostakeObserver
from autostake.runner.domain.factory import NetworkRunnerFactory
from autostake.runner.domain.runner import NetworkRunner
from autostake.runner.infrastructure.errors import NoEligibleWorkError

Sleep: TypeAlias = Callable[[float], Awaitable[None]]


class RetryController:
    """Drives the attempts for a single network until success, skip, or give-up.

    Every attempt gets a freshly constructed runner. A retry only targets the
    addresses the previous attempt reported as failed; when it reported none,
    the retry runs against the full set again. Retries stop when the runner
    sets ``force_fail`` or after ``max_retries`` retries, so a network sees at
    most ``max_retries + 1`` attempts.

    Errors raised while constructing or running a runner are recorded on the
    attempt and handled like a reported failure. Nothing propagates to the
    caller except the returned AttemptHistory.
    """

    def __init__(
        self,
        runner_factory: NetworkRunnerFactory,
        observer: AutostakeObserver,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._runner_factory = runner_factory
        self._observer = observer
        self._sleep = sleep

    async def attempt(
        self, network: NetworkConfig, reporter: HealthReporter
    ) -> AttemptHistory:
        max_retries = network.autostake.max_retries
        delay = network.autostake.retry_delay
        max_attempts = max_retries + 1

        attempts: list[Attempt] = []
        addresses: list[str] | None = None
        last_runner: NetworkRunner | None = None

        while True:
            number = len(attempts) + 1
            self._observer.attempt_started(
                network=network.name,
                attempt=number,
                max_attempts=max_attempts,
                addresses=addresses,
            )

            runner: NetworkRunner | None = None
            error: str | None = None
            succeeded = False
            try:
                runner = await self._runner_factory.create(network=network)
                await runner.run(addresses=addresses)
                succeeded = runner.did_succeed()
                if not succeeded:
                    error = runner.error
            except NoEligibleWorkError as exc:
                self._observer.network_no_work(network=network.name, reason=exc.reason)
                return AttemptHistory(
                    status=AttemptStatus.SKIPPED,
                    attempts=attempts,
                    skip_reason=exc.reason,
                )
            except Exception as exc:  # noqa: BLE001
                error = str(exc) or type(exc).__name__

            attempts.append(
                Attempt(number=number, addresses=addresses, runner=runner, error=error)
            )
            if runner is not None:
                last_runner = runner

            if succeeded:
                await log_results(reporter=reporter, runner=runner)
                self._observer.attempt_succeeded(network=network.name, attempt=number)
                return AttemptHistory(status=AttemptStatus.SUCCEEDED, attempts=attempts)

            # An absent runner never forces a failure; only the budget can stop it.
            force_fail = runner is not None and runner.force_fail
            self._observer.attempt_failed(
                network=network.name,
                attempt=number,
                max_attempts=max_attempts,
                reason=error,
                force_fail=force_fail,
            )

            if force_fail or number > max_retries:
                await log_results(reporter=reporter, runner=last_runner, error=error)
                return AttemptHistory(status=AttemptStatus.FAILED, attempts=attempts)

            await log_results(
                reporter=reporter,
                runner=last_runner,
                error=error,
                message=(
                    f"Failed attempt {number}/{max_attempts},"
                    f" retrying in {delay:g} seconds..."
                ),
            )

            addresses = self._next_addresses(
                network=network.name, attempt=number, runner=runner, current=addresses
            )

            self._observer.attempt_retry(
                network=network.name,
                attempt=number,
                delay_seconds=delay,
                addresses=addresses,
            )
            await self._sleep(delay)

    def _next_addresses(
        self,
        network: str,
        attempt: int,
        runner: NetworkRunner | None,
        current: list[str] | None,
    ) -> list[str] | None:
        """Target set for the next attempt; ``current`` when the runner can't say."""
        if runner is None:
            return current
        try:
            return runner.failed_addresses() or None
        except Exception as exc:  # noqa: BLE001
            self._observer.failed_addresses_unavailable(
                network=network,
                attempt=attempt,
                reason=str(exc) or type(exc).__name__,
            )
            return current
