"""HealthReporter Protocol — write-only accumulator for one network's report."""

from collections.abc import Sequence
from typing import Protocol

from autostake.config.domain.network import NetworkConfig


class HealthReporter(Protocol):
    """Accumulates log lines and a terminal status, then flushes them to a sink.

    ``log`` and ``add_logs`` preserve call order. Exactly one of ``success``
    or ``failed`` is called per network run. ``send_log`` flushes the lines
    pending since the previous flush; once a terminal status is set the flush
    also delivers that status. Delivery failures are handled by the sink and
    never raised to the caller.
    """

    async def started(self, marker: str) -> None: ...

    def log(self, line: str, *detail: object) -> None: ...

    def add_logs(self, lines: Sequence[str]) -> None: ...

    def success(self, message: str) -> None: ...

    def failed(self, message: str) -> None: ...

    async def send_log(self) -> None: ...


class HealthReporterFactory(Protocol):
    """Constructs a new HealthReporter for a network's run."""

    def create(self, network: NetworkConfig) -> HealthReporter: ...
