"""NetworkScheduler — runs autostake across the configured networks, one at a time."""

from collections.abc import Sequence

from autostake.config.domain.network import NetworkConfig
from autostake.health.domain.reporter import HealthReporterFactory
from autostake.orchestration.application.reporting import log_summary
from autostake.orchestration.application.retry import RetryController
from autostake.orchestration.domain.history import AttemptStatus
from autostake.orchestration.domain.observer import AutostakeObserver
from autostake.orchestration.domain.report import NetworkRunReport

_START_MARKER = "⚛"


class NetworkScheduler:
    """Selects networks and runs each one's RetryController strictly in sequence.

    Networks never overlap: the next network starts only once the previous
    one has flushed its health report, so signing and RPC resources are used
    by one network at a time.
    """

    def __init__(
        self,
        networks: Sequence[NetworkConfig],
        retry_controller: RetryController,
        reporter_factory: HealthReporterFactory,
        observer: AutostakeObserver,
    ) -> None:
        self._networks = list(networks)
        self._retry_controller = retry_controller
        self._reporter_factory = reporter_factory
        self._observer = observer

    async def run(
        self, network_names: Sequence[str] | None = None
    ) -> list[NetworkRunReport]:
        """Run every selected network and return one report per network processed.

        An empty or absent ``network_names`` selects all enabled networks. If any
        requested name is not configured, the run is aborted before any network
        is processed and an empty list is returned.
        """
        names = [name for name in network_names or [] if name]
        configured = [network.name for network in self._networks]
        for name in names:
            if name not in configured:
                self._observer.invalid_network_name(name=name, configured=configured)
                return []

        reports: list[NetworkRunReport] = []
        for network in self._networks:
            if names and network.name not in names:
                self._observer.network_skipped(network=network.name, reason="not selected")
                continue
            if network.enabled is False:
                self._observer.network_skipped(network=network.name, reason="disabled")
                continue
            reports.append(await self._run_network(network=network))
        return reports

    async def _run_network(self, network: NetworkConfig) -> NetworkRunReport:
        reporter = self._reporter_factory.create(network=network)
        self._observer.network_started(
            network=network.name, max_retries=network.autostake.max_retries
        )
        await reporter.started(_START_MARKER)

        history = await self._retry_controller.attempt(network=network, reporter=reporter)

        if history.status is not AttemptStatus.SKIPPED:
            reporter.log(f"Autostake completed in {len(history.attempts)} attempt(s)")
            for attempt in history.attempts:
                reporter.log(f"Attempt {attempt.number}:")
                log_summary(reporter=reporter, results=attempt.results)

            if history.succeeded:
                reporter.success("Autostake finished")
            else:
                reporter.failed("Autostake failed")
            await reporter.send_log()

        self._observer.network_completed(
            network=network.name,
            status=history.status.value,
            attempts=len(history.attempts),
        )
        return NetworkRunReport(
            network=network.name,
            status=history.status,
            attempts=len(history.attempts),
            skip_reason=history.skip_reason,
        )
