"""Healthchecks.io-style reporter — delivers health reports as HTTP pings."""

from collections.abc import Sequence

import httpx

from autostake.config.domain.network import HealthCheckConfig, NetworkConfig
from autostake.health.domain.observer import HealthObserver
from autostake.health.domain.report import HealthReport, HealthStatus


class HealthchecksReporter:
    """Accumulates one network's report and pings a healthchecks endpoint.

    Ping URLs are ``{address}/{uuid}/start``, ``{address}/{uuid}/log`` for
    interim flushes, ``{address}/{uuid}`` for success and
    ``{address}/{uuid}/fail`` for failure. The pending lines are sent as the
    request body. Without a ``uuid`` nothing is sent and the lines only reach
    the observer; with ``dry_run`` the pings are reported but never sent.

    Does NOT inherit from HealthReporter (structural typing via Protocol).
    """

    def __init__(
        self,
        network: str,
        config: HealthCheckConfig,
        client: httpx.AsyncClient,
        observer: HealthObserver,
        dry_run: bool = False,
    ) -> None:
        self._network = network
        self._config = config
        self._client = client
        self._observer = observer
        self._dry_run = dry_run
        self._lines: list[str] = []
        self._pending: list[str] = []
        self._status: HealthStatus | None = None
        self._message: str | None = None
        self._started = False
        self._terminal_sent = False

    @property
    def report(self) -> HealthReport:
        return HealthReport(
            network=self._network,
            lines=list(self._lines),
            status=self._status,
            message=self._message,
        )

    async def started(self, marker: str) -> None:
        if self._started:
            return
        self._started = True
        self._observer.report_started(network=self._network, marker=marker)
        await self._ping(path="start", lines=[marker])

    def log(self, line: str, *detail: object) -> None:
        text = " ".join([line, *(str(item) for item in detail)])
        self._lines.append(text)
        self._pending.append(text)
        self._observer.report_line(network=self._network, line=text)

    def add_logs(self, lines: Sequence[str]) -> None:
        for line in lines:
            self.log(line)

    def success(self, message: str) -> None:
        self._set_terminal(status=HealthStatus.SUCCESS, message=message)

    def failed(self, message: str) -> None:
        self._set_terminal(status=HealthStatus.FAILED, message=message)

    async def send_log(self) -> None:
        if self._terminal_sent:
            return
        lines, self._pending = self._pending, []

        if self._status is None:
            await self._ping(path="log", lines=lines)
        else:
            self._terminal_sent = True
            path = "" if self._status is HealthStatus.SUCCESS else "fail"
            await self._ping(path=path, lines=lines)

        self._observer.report_flushed(
            network=self._network,
            status=self._status.value if self._status is not None else None,
            total_lines=len(lines),
        )

    def _set_terminal(self, status: HealthStatus, message: str) -> None:
        self._status = status
        self._message = message
        self.log(message)

    def _url(self, path: str) -> str:
        parts = [self._config.address.rstrip("/"), self._config.uuid or "", path]
        return "/".join(part for part in parts if part)

    async def _ping(self, path: str, lines: list[str]) -> None:
        if not self._config.uuid:
            return
        url = self._url(path=path)
        if self._dry_run:
            self._observer.ping_skipped(network=self._network, url=url, reason="dry run")
            return

        try:
            response = await self._client.post(
                url,
                content="\n".join(lines).encode("utf-8"),
                timeout=self._config.timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            self._observer.ping_failed(network=self._network, url=url, reason=str(exc))


class HealthchecksReporterFactory:
    """Builds one HealthchecksReporter per network, sharing a single HTTP client."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        observer: HealthObserver,
        dry_run: bool = False,
    ) -> None:
        self._client = client
        self._observer = observer
        self._dry_run = dry_run

    def create(self, network: NetworkConfig) -> HealthchecksReporter:
        return HealthchecksReporter(
            network=network.name,
            config=network.health_check,
            client=self._client,
            observer=self._observer,
            dry_run=self._dry_run,
        )
